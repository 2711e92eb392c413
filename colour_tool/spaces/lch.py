"""CIE L*C*h° (polar L*a*b*). Grammar: lch(l c h), hue in degrees."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number
from colour_tool.spaces.lab import LAB

_NUM = r'((?:-|\+)?(?:0|[1-9]\d{0,2})(?:\.\d+)?|\*)'
_PATTERN = re.compile(r'lch\(\s*' + r'\s+'.join([_NUM] * 3) + r'\s*\)')


@dataclass(frozen=True)
class LCH:
    PRECISION: ClassVar[float] = 1e-2
    EMPTY: ClassVar[LCH]

    l: float  # noqa: E741
    c: float  # 0 for greys, up to about 132 for strongly chromatic colours
    h: float  # degrees, [0, 360)

    @property
    def empty(self) -> bool:
        return all_nan(self.l, self.c, self.h)

    @classmethod
    def parse_string(cls, text: str) -> LCH | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(*(parse_number(g) for g in m.groups()))

    def to_string(self, precision: float = PRECISION) -> str:
        return 'lch(' + ' '.join(format_number(v, precision) for v in (self.l, self.c, self.h)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_lab(cls, lab: LAB) -> LCH:
        h = math.degrees(math.atan2(lab.b, lab.a))
        while h < 0:
            h += 360
        while h >= 360:
            h -= 360
        return cls(lab.l, math.sqrt(lab.a * lab.a + lab.b * lab.b), h)

    def to_lab(self) -> LAB:
        rad = math.radians(self.h)
        return LAB(self.l, self.c * math.cos(rad), self.c * math.sin(rad))

    def equal_to(self, other: LCH, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.l, other.l, epsilon)
            and numbers_equal(self.c, other.c, epsilon)
            and numbers_equal(self.h, other.h, epsilon)
        )


LCH.EMPTY = LCH(math.nan, math.nan, math.nan)
