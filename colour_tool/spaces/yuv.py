"""YUV (ITU T.871 weights) computed from linear RGB.

Grammar: yuv(Y,U,V) with 8-bit codes; U and V are offset by 128.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number, round_half_up
from colour_tool.spaces.linear import Linear

_NUM = r'((?:0|[1-9]\d{0,2})(?:\.\d+)?%?)'
_PATTERN = re.compile(r'yuv\(\s*' + r'\s*,\s*'.join([_NUM] * 3) + r'\s*\)')


def _code(v: float) -> float:
    if math.isnan(v):
        return v
    return max(0, min(255, round_half_up(v * 255.0)))


@dataclass(frozen=True)
class YUV:
    PRECISION: ClassVar[float] = 1e-2
    EMPTY: ClassVar[YUV]

    y: float
    u: float  # [-0.5, 0.5]
    v: float  # [-0.5, 0.5]

    @property
    def y_code(self) -> float:
        return _code(self.y)

    @property
    def u_code(self) -> float:
        return _code(self.u + 0.5)

    @property
    def v_code(self) -> float:
        return _code(self.v + 0.5)

    @property
    def empty(self) -> bool:
        return all_nan(self.y, self.u, self.v)

    @classmethod
    def parse_string(cls, text: str) -> YUV | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        y, u, v = (parse_number(g) for g in m.groups())
        return cls(y / 255.0, u / 255.0 - 0.5, v / 255.0 - 0.5)

    def to_string(self) -> str:
        return 'yuv(' + ','.join(format_number(c) for c in (self.y_code, self.u_code, self.v_code)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_linear(cls, lin: Linear) -> YUV:
        y = 0.299 * lin.r + 0.587 * lin.g + 0.114 * lin.b
        u = (-0.299 * lin.r - 0.587 * lin.g + 0.886 * lin.b) / 1.772
        v = (0.701 * lin.r - 0.587 * lin.g - 0.114 * lin.b) / 1.402
        return cls(y, u, v)

    def to_linear(self) -> Linear:
        return Linear(
            self.y + 1.402 * self.v,
            self.y - (0.114 * 1.772 * self.u + 0.299 * 1.402 * self.v) / 0.587,
            self.y + 1.772 * self.u,
        )

    def equal_to(self, other: YUV, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.y, other.y, epsilon)
            and numbers_equal(self.u, other.u, epsilon)
            and numbers_equal(self.v, other.v, epsilon)
        )


YUV.EMPTY = YUV(math.nan, math.nan, math.nan)
