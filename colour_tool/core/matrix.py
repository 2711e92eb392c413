"""Fixed-size read-only 3x3 and 3x1 matrices backed by numpy.

Multiplication follows one convention throughout: `v.multiply(m)` is the
product m × v, so for a 3x1 result row i = sum_k m[i][k] * v[k].
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

import numpy as np


def _frozen(values: Sequence, shape: tuple[int, ...]) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    if arr.shape != shape:
        raise ValueError(f'Expected matrix of shape {shape}, got {arr.shape}')
    arr.setflags(write=False)
    return arr


class Matrix3x3:
    """A read-only 3x3 matrix."""

    IDENTITY: ClassVar[Matrix3x3]

    __slots__ = ('_m',)

    def __init__(self, rows: Sequence[Sequence[float]] | np.ndarray):
        self._m = _frozen(rows, (3, 3))

    @property
    def array(self) -> np.ndarray:
        return self._m

    def cell(self, row: int, col: int) -> float:
        """Cell value by 1-based row and column."""
        return float(self._m[row - 1, col - 1])

    r1c1 = property(lambda self: self.cell(1, 1))
    r1c2 = property(lambda self: self.cell(1, 2))
    r1c3 = property(lambda self: self.cell(1, 3))
    r2c1 = property(lambda self: self.cell(2, 1))
    r2c2 = property(lambda self: self.cell(2, 2))
    r2c3 = property(lambda self: self.cell(2, 3))
    r3c1 = property(lambda self: self.cell(3, 1))
    r3c2 = property(lambda self: self.cell(3, 2))
    r3c3 = property(lambda self: self.cell(3, 3))

    def multiply(self, m: Matrix3x3) -> Matrix3x3:
        """Return m × self."""
        return Matrix3x3(m.array @ self._m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self._m.tobytes())

    def __repr__(self) -> str:
        return f'Matrix3x3({self._m.tolist()!r})'


class Matrix3x1:
    """A read-only 3x1 (column) matrix."""

    __slots__ = ('_m',)

    def __init__(self, values: Sequence[float] | np.ndarray):
        self._m = _frozen(values, (3,))

    @property
    def array(self) -> np.ndarray:
        return self._m

    @property
    def r1c1(self) -> float:
        return float(self._m[0])

    @property
    def r2c1(self) -> float:
        return float(self._m[1])

    @property
    def r3c1(self) -> float:
        return float(self._m[2])

    def multiply(self, m: Matrix3x3) -> Matrix3x1:
        """Return m × self."""
        return Matrix3x1(m.array @ self._m)

    def __iter__(self):
        return iter((self.r1c1, self.r2c1, self.r3c1))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x1):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(self._m.tobytes())

    def __repr__(self) -> str:
        return f'Matrix3x1({self._m.tolist()!r})'


Matrix3x3.IDENTITY = Matrix3x3(np.identity(3))
