# MIT License (see LICENSE)
"""
Point masses for the soft-body integrator.

A MassPoint carries position, velocity and mass, plus a force accumulator.
Forces are summed during the force phase of a frame, integrated by
update(), and cleared for the next frame:
  - Linear:  F = m·a  →  a = F/m
"""
from __future__ import annotations
from dataclasses import dataclass

from .vector import Vector2, ZERO


@dataclass
class MassPoint:
    """
    A single simulated point.

    Attributes:
        p: Position.
        v: Velocity, in position units per second.
        mass: Mass, must be > 0.
        force: Accumulated force (cleared by update()).

    Note:
        Callers may overwrite p and v between updates, e.g. to pin a vertex
        to the pointer. The change takes effect on the next update().
    """
    p: Vector2
    v: Vector2 = ZERO
    mass: float = 1.0
    force: Vector2 = ZERO

    def __post_init__(self) -> None:
        if self.mass <= 0:
            raise ValueError(f"MassPoint mass must be > 0, got {self.mass}")

    def add_force(self, f: Vector2) -> None:
        self.force = self.force + f

    def add_spring_force(self, other: MassPoint, rest_len: float, k: float, c: float) -> None:
        """
        Spring-damper between self and other, applied to both ends.

        Hooke term: k·(|d| - rest_len) along d = other.p - self.p.
        Damping term: c·(|d| - |d_prev|), where d_prev is last frame's
        separation estimated by stepping each end back by its own velocity.
        This is a first-order estimate, not a projection of the relative
        velocity onto d.

        A positive scalar pulls the ends together. Self receives +F and
        other -F (Newton's third law).
        """
        d = other.p - self.p
        cur = d.len()
        prev = ((other.p - other.v) - (self.p - self.v)).len()
        f = d.unit() * (k * (cur - rest_len) + c * (cur - prev))
        self.add_force(f)
        other.add_force(-f)

    def update(self, dt: float) -> None:
        """
        Semi-implicit Euler step.

            v += (F/m)·dt
            p += v·dt      (uses the updated v)

        No substepping or dt clamping; a stiff spring with large dt can
        diverge.

        Reference:
            https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
        """
        self.v = self.v + self.force * (dt / self.mass)
        self.p = self.p + self.v * dt
        self.force = ZERO
