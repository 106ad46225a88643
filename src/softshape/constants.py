# MIT License (see LICENSE)
"""
Numeric constants shared by the geometry and soft-body modules.
"""
from __future__ import annotations
import math

# Below this length a vector is treated as degenerate and unit() falls back
# to the +x axis instead of dividing by near-zero.
UNIT_EPS: float = 1e-6

# Control-point factor for a cubic Bezier quarter circle: 4/3 * (sqrt(2) - 1).
# Reference: https://spencermortensen.com/articles/bezier-circle/
KAPPA: float = 4.0 / 3.0 * (math.sqrt(2.0) - 1.0)

# How many times per second the sketchy jitter pattern changes.
SKETCHY_FPS: float = 8.0
