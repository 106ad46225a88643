# MIT License (see LICENSE)
"""
Conserved quantities of a set of mass points.

Used to verify the integrator: spring pairs apply equal and opposite
forces, so they leave total momentum unchanged, and friction can only
remove kinetic energy.
"""
from __future__ import annotations
import numpy as np

from .mass_point import MassPoint


def kinetic_energy(points: list[MassPoint]) -> float:
    """
    Total kinetic energy, T = Σ 0.5·m·|v|².
    """
    return float(sum(0.5 * pt.mass * pt.v.dot(pt.v) for pt in points))


def linear_momentum(points: list[MassPoint]) -> np.ndarray:
    """
    Total linear momentum P = Σ m·v as a float64 array [Px, Py].
    """
    p = np.zeros(2, dtype=np.float64)
    for pt in points:
        p += pt.mass * pt.v.to_array()
    return p
