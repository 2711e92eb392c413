"""CIE XYZ tristimulus values, D65 whitepoint unless adapted. Grammar: xyz(x,y,z).

Owns the sRGB primaries matrices and the D65/D50 whitepoint adaptation pair.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from colour_tool.core.component import all_nan, format_number, numbers_equal, parse_number
from colour_tool.core.matrix import Matrix3x1, Matrix3x3
from colour_tool.spaces.linear import Linear

_NUM = r'((?:0|[1-9]\d{0,2})(?:\.\d+)?%?)'
_PATTERN = re.compile(r'xyz\(\s*' + r'\s*,\s*'.join([_NUM] * 3) + r'\s*\)')


@dataclass(frozen=True)
class XYZ:
    PRECISION: ClassVar[float] = 1e-6
    EMPTY: ClassVar[XYZ]

    FROM_LINEAR: ClassVar[Matrix3x3] = Matrix3x3([
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ])
    TO_LINEAR: ClassVar[Matrix3x3] = Matrix3x3([
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ])
    # D65 -> D50
    D50: ClassVar[Matrix3x3] = Matrix3x3([
        [1.0478112, 0.0228866, -0.0501270],
        [0.0295424, 0.9904844, -0.0170491],
        [-0.0092345, 0.0150436, 0.7521316],
    ])
    # D50 -> D65
    D65: ClassVar[Matrix3x3] = Matrix3x3([
        [0.9555766, -0.0230393, 0.0631636],
        [-0.0282895, 1.0099416, 0.0210077],
        [0.0122982, -0.0204830, 1.3299098],
    ])

    x: float
    y: float
    z: float

    @property
    def empty(self) -> bool:
        return all_nan(self.x, self.y, self.z)

    @classmethod
    def parse_string(cls, text: str) -> XYZ | None:
        m = _PATTERN.search(text)
        if not m:
            return None
        return cls(*(parse_number(g) for g in m.groups()))

    def to_string(self, precision: float = PRECISION) -> str:
        return 'xyz(' + ','.join(format_number(v, precision) for v in (self.x, self.y, self.z)) + ')'

    def __str__(self) -> str:
        return self.to_string()

    def multiply(self, m: Matrix3x3) -> XYZ:
        """Return m × this colour, e.g. `xyz.multiply(XYZ.D50)` to adapt D65 to D50."""
        return XYZ(*Matrix3x1([self.x, self.y, self.z]).multiply(m))

    @classmethod
    def from_linear(cls, lin: Linear) -> XYZ:
        return cls(lin.r, lin.g, lin.b).multiply(cls.FROM_LINEAR)

    def to_linear(self) -> Linear:
        v = self.multiply(XYZ.TO_LINEAR)
        return Linear(v.x, v.y, v.z)

    def equal_to(self, other: XYZ, epsilon: float = PRECISION) -> bool:
        return (
            numbers_equal(self.x, other.x, epsilon)
            and numbers_equal(self.y, other.y, epsilon)
            and numbers_equal(self.z, other.z, epsilon)
        )


XYZ.EMPTY = XYZ(math.nan, math.nan, math.nan)
