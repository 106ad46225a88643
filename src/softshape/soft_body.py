# MIT License (see LICENSE)
"""
Shape-matching soft body.

A SoftBody is a ring of MassPoints that is pulled, every frame, toward a
rigidly transformed copy of its reference polygon (mass_shape). The rigid
transform is the best fit of the reference onto the current points:

  - translation: the current mass-weighted centroid;
  - rotation: the circular mean of each point's angular deviation from its
    reference direction, both measured about their own centroid.

The reference is only a template in shape-space. Replacing it with
set_shape() does not move the points; the body springs toward the new
shape over the following frames.

Reference:
    Müller et al., "Meshless Deformations Based on Shape Matching", 2005.
"""
from __future__ import annotations
import logging

import numpy as np

from .mass_point import MassPoint
from .materials import SoftMaterial
from .util import as_array, circular_mean, f64
from .vector import Vector2

logger = logging.getLogger(__name__)


def _rotate(ss: np.ndarray, angle: float) -> np.ndarray:
    """Rotate each row of an (N, 2) array by angle radians."""
    c, s = np.cos(angle), np.sin(angle)
    return ss @ np.array([[c, s], [-s, c]], dtype=np.float64)


def _angles(ss: np.ndarray) -> np.ndarray:
    return np.arctan2(ss[:, 1], ss[:, 0])


class SoftBody:
    """
    Elastic body that tracks a reference polygon.

    Attributes:
        mass_shape: Reference polygon, index-aligned with points.
        points: Simulated MassPoints, one per reference vertex.
        k: Spring constant toward the matched target positions.
        c: Damper constant toward the matched target velocities.
        fric: Friction coefficient (drag -fric·v per point).
        rotation: Best-fit rotation found by the last update(), radians.
        id: Identifier assigned by World.add_body().
    """

    def __init__(self, shape: list[Vector2], mass: float, k: float, c: float, fric: float) -> None:
        if not shape:
            raise ValueError("SoftBody needs at least one vertex")
        if mass <= 0:
            raise ValueError(f"SoftBody mass must be > 0, got {mass}")
        point_mass = mass / len(shape)
        self.mass_shape: list[Vector2] = list(shape)
        self.points: list[MassPoint] = [MassPoint(p=v, mass=point_mass) for v in shape]
        self.k = k
        self.c = c
        self.fric = fric
        self.rotation = 0.0
        self.id = -1
        logger.debug(
            "SoftBody created: %d points, mass %.4g, k=%.4g c=%.4g fric=%.4g",
            len(shape), mass, k, c, fric,
        )

    @classmethod
    def from_material(cls, shape: list[Vector2], mass: float, material: SoftMaterial) -> SoftBody:
        return cls(shape, mass, material.k, material.c, material.fric)

    def __len__(self) -> int:
        return len(self.points)

    def get_shape(self) -> list[Vector2]:
        """Current point positions, in order. A copy; later updates don't change it."""
        return [pt.p for pt in self.points]

    def set_shape(self, shape: list[Vector2]) -> None:
        """
        Replace the reference polygon.

        Only the template changes. Positions, velocities and masses of the
        points are kept, so the body relaxes toward the new shape over
        subsequent update() calls.
        """
        if len(shape) != len(self.points):
            raise ValueError(
                f"New shape has {len(shape)} vertices, body has {len(self.points)}"
            )
        self.mass_shape = list(shape)
        logger.debug("SoftBody %d: reference shape replaced", self.id)

    def center(self) -> Vector2:
        """Mass-weighted centroid of the current points."""
        w = self._weights()
        return Vector2.of(w @ self._positions())

    def _positions(self) -> np.ndarray:
        return f64([(pt.p.x, pt.p.y) for pt in self.points])

    def _velocities(self) -> np.ndarray:
        return f64([(pt.v.x, pt.v.y) for pt in self.points])

    def _weights(self) -> np.ndarray:
        m = f64([pt.mass for pt in self.points])
        return m / m.sum()

    def update(self, dt: float) -> None:
        """
        Advance the body by one frame of dt seconds.

        1. Centroids of the reference and of the current points.
        2. Both point sets in shape-space (relative to their centroid).
        3-4. Best-fit rotation: circular mean of per-point angle deviations.
        5. Bulk velocity: mass-weighted mean point velocity.
        6. Per-frame rotation: circular mean of the angle between each
           point and its estimated previous position.
        7. Target velocities: reference rotated by that per-frame amount,
           plus bulk velocity, minus the reference itself.
        8. Target positions: reference rotated by the best fit and moved to
           the current centroid.
        9. Spring toward target position (k), damper toward target velocity
           (c), friction (fric).
        10. Semi-implicit Euler on every point.
        """
        w = self._weights()
        pos = self._positions()
        vel = self._velocities()
        ref = as_array(self.mass_shape)

        ref_ss = ref - w @ ref
        cur_center = w @ pos
        cur_ss = pos - cur_center
        cur_ang = _angles(cur_ss)

        rads_avg = circular_mean(cur_ang - _angles(ref_ss))

        bulk = w @ vel
        prev_ss = cur_ss - (vel + bulk)
        rv = circular_mean(cur_ang - _angles(prev_ss))

        target_v = _rotate(ref_ss, rv) + bulk - ref_ss
        target_p = _rotate(ref_ss, rads_avg) + cur_center

        for pt, tp, tv in zip(self.points, target_p, target_v):
            target = MassPoint(p=Vector2.of(tp), v=Vector2.of(tv), mass=pt.mass)
            pt.add_spring_force(target, 0.0, self.k, 0.0)
            pt.add_force((pt.v - target.v) * -self.c)
            pt.add_force(pt.v * -self.fric)

        for pt in self.points:
            pt.update(dt)

        self.rotation = rads_avg
