# MIT License (see LICENSE)
"""
numpy helpers for polygons and angles.

Polygons are lists of Vector2 at the API boundary. Bulk math converts them
to float64 arrays of shape (N, 2) with as_array() and back with
to_polygon().
"""
from __future__ import annotations

import numpy as np

from .vector import Vector2


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def as_array(shape: list[Vector2]) -> np.ndarray:
    """Polygon as an (N, 2) float64 array. An empty polygon gives shape (0, 2)."""
    if not shape:
        return np.zeros((0, 2), dtype=np.float64)
    return f64([(v.x, v.y) for v in shape])


def to_polygon(arr: np.ndarray) -> list[Vector2]:
    """Inverse of as_array()."""
    return [Vector2(float(x), float(y)) for x, y in np.asarray(arr, dtype=np.float64)]


def circular_mean(angles: np.ndarray, weights: np.ndarray | None = None) -> float:
    """
    Mean of angles via the resultant of their unit vectors.

    Averaging (cos, sin) pairs and taking atan2 of the sum avoids the jump
    an arithmetic mean has across the +-pi boundary. An empty or perfectly
    cancelling input returns 0.
    """
    angles = np.asarray(angles, dtype=np.float64)
    if weights is None:
        weights = np.ones_like(angles)
    sx = float(np.sum(weights * np.cos(angles)))
    sy = float(np.sum(weights * np.sin(angles)))
    return float(np.arctan2(sy, sx))
