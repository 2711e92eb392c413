"""CIE L*a*b* (D50 whitepoint) and the CIEDE2000 colour difference.

Grammar: lab(l a b), components separated by whitespace. A component may
be `*`, which parses as NaN.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number
from colour_tool.spaces.xyz import XYZ

_NUM = r'((?:-|\+)?(?:0|[1-9]\d{0,2})(?:\.\d+)?|\*)'
_PATTERN = re.compile(r'lab\(\s*' + r'\s+'.join([_NUM] * 3) + r'\s*\)')

K = 24389.0 / 27.0
E = 216.0 / 24389.0

# D50 reference white
_WHITE_X = 0.9642
_WHITE_Z = 0.8249

_25_POW_7 = 25.0**7


def _lab_in(v: float) -> float:
    if v > E:
        return v ** (1.0 / 3.0)
    return (K * v + 16.0) / 116.0


def _lab_out(v: float) -> float:
    v3 = v**3
    if v3 > E:
        return v3
    return (116.0 * v - 16.0) / K


def _hue_angle(b: float, a: float) -> float:
    """atan2(b, a) in degrees, normalized to [0, 360)."""
    h = math.degrees(math.atan2(b, a))
    while h < 0:
        h += 360
    while h >= 360:
        h -= 360
    return h


@dataclass(frozen=True)
class LAB:
    PRECISION: ClassVar[float] = 1e-2
    DELTAE: ClassVar[float] = 2.3  # just-noticeable difference
    EMPTY: ClassVar[LAB]

    l: float  # noqa: E741
    a: float
    b: float

    @property
    def empty(self) -> bool:
        return all_nan(self.l, self.a, self.b)

    @classmethod
    def parse_string(cls, text: str) -> LAB | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(*(parse_number(g) for g in m.groups()))

    def to_string(self, precision: float = PRECISION) -> str:
        return 'lab(' + ' '.join(format_number(v, precision) for v in (self.l, self.a, self.b)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> LAB:
        d50 = xyz.multiply(XYZ.D50)
        x = _lab_in(d50.x / _WHITE_X)
        y = _lab_in(d50.y)
        z = _lab_in(d50.z / _WHITE_Z)
        return cls(116.0 * y - 16.0, 500.0 * (x - y), 200.0 * (y - z))

    def to_xyz(self) -> XYZ:
        y = (self.l + 16.0) / 116.0
        x = self.a / 500.0 + y
        z = y - self.b / 200.0
        big_y = ((self.l + 16.0) / 116.0) ** 3 if self.l > K * E else self.l / K
        d50 = XYZ(_lab_out(x) * _WHITE_X, big_y, _lab_out(z) * _WHITE_Z)
        return d50.multiply(XYZ.D65)

    def equal_to(self, other: LAB, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.l, other.l, epsilon)
            and numbers_equal(self.a, other.a, epsilon)
            and numbers_equal(self.b, other.b, epsilon)
        )

    def delta_e(self, other: LAB) -> float:
        """CIEDE2000 colour difference ΔE*₀₀ between this colour and another.

        Symmetric and non-negative; 0 for identical colours. Values under
        DELTAE are generally indistinguishable to an observer.
        """
        c1 = math.sqrt(self.a * self.a + self.b * self.b)
        c2 = math.sqrt(other.a * other.a + other.b * other.b)
        dl = other.l - self.l
        l_mean = (self.l + other.l) / 2
        c_mean = (c1 + c2) / 2
        g = 1 - math.sqrt(c_mean**7 / (c_mean**7 + _25_POW_7))
        a1 = self.a + self.a / 2 * g
        a2 = other.a + other.a / 2 * g
        c1p = math.sqrt(a1 * a1 + self.b * self.b)
        c2p = math.sqrt(a2 * a2 + other.b * other.b)
        dc = c2p - c1p
        cp_mean = (c1p + c2p) / 2
        h1p = _hue_angle(self.b, a1)
        h2p = _hue_angle(other.b, a2)

        spread = abs(h1p - h2p)
        achromatic = c1p == 0 or c2p == 0
        if achromatic:
            dh = 0.0
        elif spread <= 180:
            dh = h2p - h1p
        elif h2p <= h1p:
            dh = h2p - h1p + 360
        else:
            dh = h2p - h1p - 360
        big_dh = 2 * math.sqrt(c1p * c2p) * math.sin(math.radians(dh) / 2)

        if achromatic:
            hp_mean = h1p + h2p
        elif spread <= 180:
            hp_mean = (h1p + h2p) / 2
        elif h1p + h2p < 360:
            hp_mean = (h1p + h2p + 360) / 2
        else:
            hp_mean = (h1p + h2p - 360) / 2

        t = (
            1
            - 0.17 * math.cos(math.radians(hp_mean - 30))
            + 0.24 * math.cos(math.radians(2 * hp_mean))
            + 0.32 * math.cos(math.radians(3 * hp_mean + 6))
            - 0.20 * math.cos(math.radians(4 * hp_mean - 63))
        )
        sl = 1 + (0.015 * (l_mean - 50) ** 2) / math.sqrt(20 + (l_mean - 50) ** 2)
        sc = 1 + 0.045 * cp_mean
        sh = 1 + 0.015 * cp_mean * t
        rt = (
            -2
            * math.sqrt(cp_mean**7 / (cp_mean**7 + _25_POW_7))
            * math.sin(math.radians(60 * math.exp(-(((hp_mean - 275) / 25) ** 2))))
        )
        return math.sqrt((dl / sl) ** 2 + (dc / sc) ** 2 + (big_dh / sh) ** 2 + rt * (dc / sc) * (big_dh / sh))


LAB.EMPTY = LAB(math.nan, math.nan, math.nan)
