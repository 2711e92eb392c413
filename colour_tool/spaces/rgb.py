"""sRGB (companded) colour values.

Grammars: #rgb, #rrggbb, #rrggbbaa, rgb(r,g,b), rgb(r%,g%,b%), rgba(...).
Alpha is accepted and discarded.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number, round_half_up

_HEX6 = re.compile(r'#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})')
_HEX3 = re.compile(r'#([0-9A-Fa-f])([0-9A-Fa-f])([0-9A-Fa-f])')
_DEC_NUM = r'((?:0|[1-9]\d{0,2})(?:\.\d+)?%?)'
_DEC = re.compile(r'rgb\(\s*' + r'\s*,\s*'.join([_DEC_NUM] * 3) + r'\s*\)')
_DECA = re.compile(r'rgba\(\s*' + r'\s*,\s*'.join([_DEC_NUM] * 4) + r'\s*\)')


def _byte(v: float) -> int:
    if math.isnan(v):
        return 0
    return max(0, min(255, round_half_up(v * 255.0)))


def _doubled(nibble: int) -> bool:
    """True if a byte is a repeated hex digit, e.g. 0x33."""
    return ((nibble >> 4) & 0xF) == (nibble & 0xF)


def _nearest_hex3(value: int) -> int:
    """The hex digit d whose doubled byte 0xdd is closest to value."""
    a = (value & 0xFF) >> 4
    b = a | (a << 4)
    if a > 0:
        c = a - 1
        if abs(value - b) > abs(value - (c | (c << 4))):
            a, b = c, c | (c << 4)
    if a < 0xF:
        c = a + 1
        if abs(value - b) > abs(value - (c | (c << 4))):
            a, b = c, c | (c << 4)
    return a


@dataclass(frozen=True)
class RGB:
    """An sRGB triplet with components nominally in [0.0, 1.0]."""

    PRECISION: ClassVar[float] = 1e-2
    EMPTY: ClassVar[RGB]

    r: float
    g: float
    b: float

    # Natural (8-bit) component values, rounded and clamped to [0, 255]

    @property
    def red(self) -> int:
        return _byte(self.r)

    @property
    def green(self) -> int:
        return _byte(self.g)

    @property
    def blue(self) -> int:
        return _byte(self.b)

    @property
    def empty(self) -> bool:
        return all_nan(self.r, self.g, self.b)

    @classmethod
    def parse_hex_string(cls, text: str) -> RGB | None:
        """Parse #rrggbb, #rrggbbaa or #rgb."""
        m = _HEX6.search(text)
        if m:
            return cls(*(int(h, 16) / 255.0 for h in m.groups()))
        m = _HEX3.search(text)
        if m:
            return cls(*(int(h * 2, 16) / 255.0 for h in m.groups()))
        return None

    @classmethod
    def parse_rgb_string(cls, text: str) -> RGB | None:
        """Parse rgb(r,g,b) with 0-255 or percentage components, or rgba(r,g,b,a)."""
        m = _DEC.search(text) or _DECA.search(text)
        if not m:
            return None
        return cls(*(parse_number(m.group(i), 255, 0) for i in (1, 2, 3)))

    @classmethod
    def parse_string(cls, text: str) -> RGB | None:
        return cls.parse_hex_string(text) or cls.parse_rgb_string(text)

    def to_hex_string(self, always_hex6: bool = False) -> str:
        r, g, b = self.red, self.green, self.blue
        if not always_hex6 and _doubled(r) and _doubled(g) and _doubled(b):
            return f'#{r & 0xF:x}{g & 0xF:x}{b & 0xF:x}'
        return f'#{r:02x}{g:02x}{b:02x}'

    def to_rgb_string(self, percent: bool = False, precision: float = PRECISION) -> str:
        if percent:
            parts = [format_number(v * 100.0, precision) + '%' for v in (self.r, self.g, self.b)]
        else:
            parts = [format_number(v * 255.0) for v in (self.r, self.g, self.b)]
        return f'rgb({",".join(parts)})'

    def to_string(self, precision: float = PRECISION) -> str:
        """Hex if the colour is exactly representable in hex, else rgb()."""
        if self.is_hexable:
            return self.to_hex_string()
        return self.to_rgb_string(False, precision)

    def __str__(self) -> str:
        return self.to_string()

    @property
    def is_clipped(self) -> bool:
        """True if every component is within [0.0, 1.0]."""
        return all(0.0 <= v <= 1.0 for v in (self.r, self.g, self.b))

    @property
    def is_hexable(self) -> bool:
        """True if the colour can be written as #rrggbb without loss."""
        return self.is_clipped and all(math.trunc(v * 255.0) == v * 255.0 for v in (self.r, self.g, self.b))

    @property
    def is_hexable3(self) -> bool:
        """True if the colour can be written as #rgb without loss."""
        return self.is_hexable and _doubled(self.red) and _doubled(self.green) and _doubled(self.blue)

    def clip(self) -> RGB:
        """This colour with components clamped to [0.0, 1.0]."""
        if self.is_clipped:
            return self
        return RGB(*(max(0.0, min(1.0, v)) for v in (self.r, self.g, self.b)))

    def clip6(self) -> RGB:
        """The nearest colour representable as #rrggbb."""
        return RGB(self.red / 255.0, self.green / 255.0, self.blue / 255.0)

    def clip3(self) -> RGB:
        """The nearest colour representable as #rgb."""
        digits = [_nearest_hex3(v) for v in (self.red, self.green, self.blue)]
        return RGB(*((d | (d << 4)) / 255.0 for d in digits))

    def to_argb(self, alpha: int = 0xFF) -> int:
        """Pack into a 32-bit integer in ARGB order."""
        a = max(0, min(0xFF, round_half_up(alpha)))
        return (a << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_argb(cls, argb: int) -> RGB:
        return cls(((argb >> 16) & 0xFF) / 255.0, ((argb >> 8) & 0xFF) / 255.0, (argb & 0xFF) / 255.0)

    def equal_to(self, other: RGB, epsilon: float | None = None) -> bool:
        """Compare colours.

        Without epsilon the natural 8-bit values are compared. With epsilon the
        unclipped normalized components must each be within epsilon.
        """
        if epsilon is None:
            if self.empty or other.empty:
                return False
            return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)
        return (
            numbers_equal(self.r, other.r, epsilon)
            and numbers_equal(self.g, other.g, epsilon)
            and numbers_equal(self.b, other.b, epsilon)
        )


RGB.EMPTY = RGB(math.nan, math.nan, math.nan)
