"""HWB (hue, whiteness, blackness) over companded sRGB.

Grammar: hwb(h,w%,b%). The hue takes a bare number (degrees) or a
°, deg, grad or rad suffix.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number
from colour_tool.spaces.hsl import HSL, degrees, hue_of, percent
from colour_tool.spaces.rgb import RGB

_NUM = r'(?:(?:0|[1-9]\d{0,2})(?:\.\d+)?)'
_PATTERN = re.compile(
    r'hwb\(\s*(' + _NUM + r'(?:°|deg|rad|grad)?)\s*,\s*(' + _NUM + r'%?)\s*,\s*(' + _NUM + r'%?)\s*\)'
)


@dataclass(frozen=True)
class HWB:
    PRECISION: ClassVar[float] = 1e-2
    EMPTY: ClassVar[HWB]

    h: float
    w: float
    b: float

    @property
    def hue_degrees(self) -> float:
        return degrees(self.h)

    @property
    def whiteness_percent(self) -> float:
        return percent(self.w)

    @property
    def blackness_percent(self) -> float:
        return percent(self.b)

    @property
    def empty(self) -> bool:
        return all_nan(self.h, self.w, self.b)

    @classmethod
    def parse_string(cls, text: str) -> HWB | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(parse_number(m.group(1), 360), parse_number(m.group(2)), parse_number(m.group(3)))

    def to_string(self, precision: float = PRECISION) -> str:
        h = format_number(self.h * 360.0, precision)
        w = format_number(self.w * 100.0, precision)
        b = format_number(self.b * 100.0, precision)
        return f'hwb({h},{w}%,{b}%)'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_rgb(cls, rgb: RGB) -> HWB:
        if rgb.empty:
            return cls.EMPTY
        h, value, small = hue_of(rgb)
        chroma = value - small
        saturation = 0.0 if chroma == 0 else chroma / value
        return cls(h, (1 - saturation) * value, 1 - value)

    def to_rgb(self) -> RGB:
        """Blend the pure hue with white, renormalizing whiteness and blackness if they exceed 1 together."""
        white, black = self.w, self.b
        total = white + black
        if total > 1:
            white /= total
            black /= total
        t = 1 - white - black
        pure = HSL(self.h, 1, 0.5).to_rgb()
        return RGB(pure.r * t + white, pure.g * t + white, pure.b * t + white)

    def equal_to(self, other: HWB, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.h, other.h, epsilon)
            and numbers_equal(self.w, other.w, epsilon)
            and numbers_equal(self.b, other.b, epsilon)
        )


HWB.EMPTY = HWB(math.nan, math.nan, math.nan)
