"""CIE xyY chromaticity plus luminance. Grammar: xyy(x,y,Y)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number
from colour_tool.spaces.xyz import XYZ

_NUM = r'((?:0|[1-9]\d{0,2})(?:\.\d+)?%?)'
_PATTERN = re.compile(r'xyy\(\s*' + r'\s*,\s*'.join([_NUM] * 3) + r'\s*\)')


def _divide(a: float, b: float) -> float:
    # IEEE semantics for the zero-sum (black) case
    if b == 0.0:
        return math.nan if a == 0.0 or math.isnan(a) else math.copysign(math.inf, a)
    return a / b


@dataclass(frozen=True)
class XYY:
    PRECISION: ClassVar[float] = 1e-6
    EMPTY: ClassVar[XYY]

    x: float
    y: float
    Y: float

    @property
    def empty(self) -> bool:
        return all_nan(self.x, self.y, self.Y)

    @classmethod
    def parse_string(cls, text: str) -> XYY | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(*(parse_number(g) for g in m.groups()))

    def to_string(self, precision: float = PRECISION) -> str:
        return 'xyy(' + ','.join(format_number(v, precision) for v in (self.x, self.y, self.Y)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> XYY:
        total = xyz.x + xyz.y + xyz.z
        return cls(_divide(xyz.x, total), _divide(xyz.y, total), xyz.y)

    def to_xyz(self) -> XYZ:
        """Back to XYZ; a chromaticity y of (nearly) zero has no XYZ image and gives XYZ.EMPTY."""
        if numbers_equal(self.y, 0.0, XYY.PRECISION):
            return XYZ.EMPTY
        return XYZ(self.x * self.Y / self.y, self.Y, (1 - self.x - self.y) * self.Y / self.y)

    def equal_to(self, other: XYY, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.x, other.x, epsilon)
            and numbers_equal(self.y, other.y, epsilon)
            and numbers_equal(self.Y, other.Y, epsilon)
        )


XYY.EMPTY = XYY(math.nan, math.nan, math.nan)
