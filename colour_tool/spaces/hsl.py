"""HSL (hue, saturation, lightness) over companded sRGB.

Grammar: hsl(h,s%,l%). The hue takes a bare number (degrees) or a
°, deg or rad suffix.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, clamp, format_number, numbers_equal, parse_number, round_half_up
from colour_tool.spaces.rgb import RGB

_NUM = r'(?:(?:0|[1-9]\d{0,2})(?:\.\d+)?)'
_PATTERN = re.compile(
    r'hsl\(\s*(' + _NUM + r'(?:°|deg|rad)?)\s*,\s*(' + _NUM + r'%?)\s*,\s*(' + _NUM + r'%?)\s*\)'
)


def degrees(h: float) -> float:
    """Hue turn fraction as whole degrees in [0, 360]."""
    if math.isnan(h):
        return h
    return clamp(float(round_half_up(h * 360.0)), 0.0, 360.0)


def percent(v: float) -> float:
    """Proportion as a percentage in [0, 100]."""
    return clamp(v * 100.0, 0.0, 100.0)


def hue_of(rgb: RGB) -> tuple[float, float, float]:
    """Hue (turn fraction), largest and smallest component of an RGB colour."""
    big = max(rgb.r, rgb.g, rgb.b)
    small = min(rgb.r, rgb.g, rgb.b)
    chroma = big - small
    if chroma == 0:
        h = 0.0
    elif big == rgb.r:
        h = (rgb.g - rgb.b) / chroma
    elif big == rgb.g:
        h = (rgb.b - rgb.r) / chroma + 2
    else:
        h = (rgb.r - rgb.g) / chroma + 4
    h = (h % 6) / 6
    if h == 1:
        h = 0.0
    return h, big, small


def _rho(m1: float, m2: float, h: float) -> float:
    if h < 0:
        h += 1
    if h > 1:
        h -= 1
    if h * 6 < 1:
        return m1 + (m2 - m1) * h * 6
    if h * 2 < 1:
        return m2
    if h * 3 < 2:
        return m1 + (m2 - m1) * (2.0 / 3.0 - h) * 6
    return m1


@dataclass(frozen=True)
class HSL:
    PRECISION: ClassVar[float] = 1e-2
    EMPTY: ClassVar[HSL]

    h: float
    s: float
    l: float  # noqa: E741

    @property
    def hue_degrees(self) -> float:
        return degrees(self.h)

    @property
    def saturation_percent(self) -> float:
        return percent(self.s)

    @property
    def lightness_percent(self) -> float:
        return percent(self.l)

    @property
    def empty(self) -> bool:
        return all_nan(self.h, self.s, self.l)

    @classmethod
    def parse_string(cls, text: str) -> HSL | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(parse_number(m.group(1), 360), parse_number(m.group(2)), parse_number(m.group(3)))

    def to_string(self, precision: float = PRECISION) -> str:
        h = format_number(self.h * 360.0, precision)
        s = format_number(self.s * 100.0, precision)
        l = format_number(self.l * 100.0, precision)  # noqa: E741
        return f'hsl({h},{s}%,{l}%)'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_rgb(cls, rgb: RGB) -> HSL:
        if rgb.empty:
            return cls.EMPTY
        h, big, small = hue_of(rgb)
        chroma = big - small
        l = 0.5 * (big + small)  # noqa: E741
        s = 0.0 if l in (0, 1) else chroma / (1 - abs(2 * l - 1))
        return cls(h, s, l)

    def to_rgb(self) -> RGB:
        m2 = self.l * (self.s + 1) if self.l <= 0.5 else self.l + self.s - self.l * self.s
        m1 = self.l * 2 - m2
        return RGB(
            _rho(m1, m2, self.h + 1.0 / 3.0),
            _rho(m1, m2, self.h),
            _rho(m1, m2, self.h - 1.0 / 3.0),
        )

    def equal_to(self, other: HSL, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.h, other.h, epsilon)
            and numbers_equal(self.s, other.s, epsilon)
            and numbers_equal(self.l, other.l, epsilon)
        )


HSL.EMPTY = HSL(math.nan, math.nan, math.nan)
