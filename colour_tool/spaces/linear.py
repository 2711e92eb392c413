"""Linear RGB: sRGB without companding, D65 whitepoint. Grammar: lin(r,g,b)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, clamp, format_number, numbers_equal, parse_number
from colour_tool.spaces.rgb import RGB

_NUM = r'((?:0|[1-9]\d{0,2})(?:\.\d+)?%?)'
_PATTERN = re.compile(r'lin\(\s*' + r'\s*,\s*'.join([_NUM] * 3) + r'\s*\)')


def to_linear(v: float) -> float:
    """Undo sRGB companding on one component."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def from_linear(v: float) -> float:
    """Apply sRGB companding to one component."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * v ** (1 / 2.4) - 0.055


@dataclass(frozen=True)
class Linear:
    PRECISION: ClassVar[float] = 1e-6
    EMPTY: ClassVar[Linear]

    r: float
    g: float
    b: float

    @property
    def empty(self) -> bool:
        return all_nan(self.r, self.g, self.b)

    @classmethod
    def parse_string(cls, text: str) -> Linear | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(*(parse_number(g) for g in m.groups()))

    def to_string(self, precision: float = PRECISION) -> str:
        return 'lin(' + ','.join(format_number(v, precision) for v in (self.r, self.g, self.b)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    def to_rgb(self) -> RGB:
        """Compand to sRGB, clamping the result to [0.0, 1.0]."""
        return RGB(*(clamp(from_linear(v)) for v in (self.r, self.g, self.b)))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Linear:
        return cls(to_linear(rgb.r), to_linear(rgb.g), to_linear(rgb.b))

    def equal_to(self, other: Linear, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.r, other.r, epsilon)
            and numbers_equal(self.g, other.g, epsilon)
            and numbers_equal(self.b, other.b, epsilon)
        )


Linear.EMPTY = Linear(math.nan, math.nan, math.nan)
