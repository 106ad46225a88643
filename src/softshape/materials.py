# MIT License (see LICENSE)
"""
Elastic material parameters for soft bodies.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SoftMaterial:
    """
    Coefficients that pull a SoftBody toward its matched target shape.

    Attributes:
        k: Spring constant toward each point's target position. Larger is
           stiffer; too large for the chosen dt makes explicit integration
           diverge.
        c: Damper constant on the difference between a point's velocity and
           the velocity the matched rotation implies for it.
        fric: Friction coefficient, a drag of -fric·v on every point.
    """
    k: float = 1.0
    c: float = 0.0
    fric: float = 0.0
