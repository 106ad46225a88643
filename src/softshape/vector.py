# MIT License (see LICENSE)
"""
Immutable 2D vector type.

Vector2 is a small value type: every operation returns a new vector and
never mutates its operands. Named methods (add, sub, mul, div, ...) are the
primary API; the arithmetic operators are thin aliases for them.

Degenerate inputs never raise:
  - unit() of a vector shorter than UNIT_EPS is (1, 0).
  - intersection() of parallel lines is NaN or +-inf.
  - nearest() maps a NaN projection to 0.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from .constants import UNIT_EPS


@dataclass(frozen=True)
class Vector2:
    """
    A 2D vector with float components.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, xy) -> "Vector2":
        """Build a vector from any 2-sequence (tuple, list, numpy array)."""
        return cls(float(xy[0]), float(xy[1]))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def mul(self, s: float) -> Vector2:
        return Vector2(self.x * s, self.y * s)

    def div(self, s: float) -> Vector2:
        return Vector2(self.x / s, self.y / s)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def len(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def unit(self) -> Vector2:
        """
        Unit vector in the same direction.

        Returns exactly (1, 0) when the length is below UNIT_EPS.
        """
        n = self.len()
        if n < UNIT_EPS:
            return Vector2(1.0, 0.0)
        return Vector2(self.x / n, self.y / n)

    def rot(self, r: float) -> Vector2:
        """Rotate counter-clockwise by r radians."""
        c, s = math.cos(r), math.sin(r)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def rot90(self, r: int) -> Vector2:
        """
        Rotate by r quarter turns using an exact lookup (no trig).

        r is reduced modulo 4 with floor semantics, so rot90(-1) == rot90(3).
        """
        q = int(math.floor(r)) % 4
        if q == 0:
            return Vector2(self.x, self.y)
        if q == 1:
            return Vector2(-self.y, self.x)
        if q == 2:
            return Vector2(-self.x, -self.y)
        return Vector2(self.y, -self.x)

    def get_rot(self) -> float:
        """Angle of the vector, atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Line helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def intersection(ap: Vector2, av: Vector2, bp: Vector2, bv: Vector2) -> float:
        """
        Parameter s such that ap + s*av lies on the line bp + t*bv.

        Solves s*av - t*bv = bp - ap with Cramer's rule. Parallel lines make
        the determinant zero and the result NaN or +-inf; the caller decides
        what that means.
        """
        d = bp - ap
        det = np.float64(bv.x * av.y - av.x * bv.y)
        num = bv.x * d.y - d.x * bv.y
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(num) / det)

    @staticmethod
    def nearest(lp: Vector2, lv: Vector2, p: Vector2) -> float:
        """
        Parameter in [0, 1] of the point on segment lp -> lp+lv closest to p.

        The projection intersects the segment's line with the perpendicular
        through p. A degenerate segment yields 0.
        """
        s = Vector2.intersection(lp, lv, p, lv.rot90(1))
        if math.isnan(s):
            return 0.0
        return min(1.0, max(0.0, s))


ZERO = Vector2(0.0, 0.0)
