"""Constant-luminance Yc′CbcCrc (ITU-R BT.2020) computed from linear RGB.

Grammar: ycc(Yc,Cbc,Crc) with 12-bit codes.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number
from colour_tool.spaces.linear import Linear

_NUM = r'((?:0|[1-9]\d{0,3})(?:\.\d+)?%?)'
_PATTERN = re.compile(r'ycc\(\s*' + r'\s*,\s*'.join([_NUM] * 3) + r'\s*\)')


def _code(v: float, scale: float, offset: float) -> float:
    if math.isnan(v):
        return v
    return math.trunc((scale * v + offset) * 16.0)


@dataclass(frozen=True)
class YCC:
    PRECISION: ClassVar[float] = 1e-4
    EMPTY: ClassVar[YCC]

    yc: float
    cbc: float
    crc: float

    @property
    def yc_code(self) -> float:
        return _code(self.yc, 219.0, 16.0)

    @property
    def cbc_code(self) -> float:
        return _code(self.cbc, 224.0, 128.0)

    @property
    def crc_code(self) -> float:
        return _code(self.crc, 224.0, 128.0)

    @property
    def empty(self) -> bool:
        return all_nan(self.yc, self.cbc, self.crc)

    @classmethod
    def parse_string(cls, text: str) -> YCC | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        yc, cbc, crc = (parse_number(g) / 16.0 for g in m.groups())
        return cls((yc - 16.0) / 219.0, (cbc - 128.0) / 224.0, (crc - 128.0) / 224.0)

    def to_string(self) -> str:
        return 'ycc(' + ','.join(format_number(c) for c in (self.yc_code, self.cbc_code, self.crc_code)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_linear(cls, lin: Linear) -> YCC:
        yc = 0.2627 * lin.r + 0.6780 * lin.g + 0.0593 * lin.b
        db = lin.b - yc
        dr = lin.r - yc
        return cls(yc, db / (1.9404 if db <= 0 else 1.582), dr / (1.7182 if dr <= 0 else 0.9938))

    def to_linear(self) -> Linear:
        return Linear(
            self.yc + 0.7373 * self.crc,
            self.yc - 0.0822765634218289 * self.cbc - 0.2856765634218289 * self.crc,
            self.yc + 0.9407 * self.cbc,
        )

    def equal_to(self, other: YCC, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.yc, other.yc, epsilon)
            and numbers_equal(self.cbc, other.cbc, epsilon)
            and numbers_equal(self.crc, other.crc, epsilon)
        )


YCC.EMPTY = YCC(math.nan, math.nan, math.nan)
