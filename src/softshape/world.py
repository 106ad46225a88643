# MIT License (see LICENSE)
"""
A container that steps several soft bodies together.

The World owns a list of SoftBodies and a list of Pins. Each step:
    1. Pins: every pinned vertex is moved to its target and stopped.
    2. Update: every body advances by dt, in insertion order.

Bodies never interact; the World only saves the caller from looping and
answers pointer queries (which body is under a point, which vertex is
closest) across all bodies.

Structure:
    - User creates a World.
    - User adds bodies via add_body().
    - User calls world.step(dt) once per frame with the elapsed time.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from . import shapes
from .profiler import Profiler
from .soft_body import SoftBody
from .vector import Vector2, ZERO

logger = logging.getLogger(__name__)


@dataclass
class Pin:
    """
    Holds one vertex of a body at a target position.

    Typical use is dragging: create the pin on pointer-down, call
    set_target() on every pointer move, and remove it on pointer-up.

    Attributes:
        body: The body whose vertex is held.
        index: Vertex index in body.points.
        target: Where the vertex is placed before each update.
    """
    body: SoftBody
    index: int
    target: Vector2

    def __post_init__(self) -> None:
        if not 0 <= self.index < len(self.body.points):
            raise ValueError(
                f"Pin index {self.index} out of range for a body with {len(self.body.points)} points"
            )

    def set_target(self, target: Vector2) -> None:
        self.target = target

    def apply(self) -> None:
        """Place the vertex on the target and zero its velocity."""
        pt = self.body.points[self.index]
        pt.p = self.target
        pt.v = ZERO


@dataclass
class World:
    """
    Soft-body world.

    Attributes:
        bodies: Bodies in insertion order.
        pins: Active vertex pins, applied at the start of each step.
        time: Sum of all dt passed to step().
        profiler: Optional Profiler for per-section timing.
    """
    bodies: list[SoftBody] = field(default_factory=list)
    pins: list[Pin] = field(default_factory=list)
    time: float = 0.0
    profiler: Profiler | None = None

    def __post_init__(self) -> None:
        self._next_id = 1

    def add_body(self, body: SoftBody) -> int:
        """
        Add a body to the world and assign it a unique ID.

        Returns:
            The assigned body ID.
        """
        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        logger.debug("Body %d added (%d points)", body.id, len(body))
        return body.id

    def remove_body(self, body: SoftBody) -> None:
        """Remove a body and any pins that hold it."""
        if body in self.bodies:
            self.bodies.remove(body)
            self.pins = [pin for pin in self.pins if pin.body is not body]
            logger.debug("Body %d removed", body.id)

    def pin(self, body: SoftBody, index: int, target: Vector2) -> Pin:
        """Pin vertex `index` of `body` to `target` until unpin()."""
        pin = Pin(body=body, index=index, target=target)
        self.pins.append(pin)
        logger.debug("Pinned body %d vertex %d", body.id, index)
        return pin

    def unpin(self, pin: Pin) -> None:
        if pin in self.pins:
            self.pins.remove(pin)

    def query_point(self, point: Vector2) -> SoftBody | None:
        """
        Topmost body whose current outline contains point.

        Later bodies are drawn on top, so the search runs in reverse
        insertion order.
        """
        for body in reversed(self.bodies):
            if shapes.contain(body.get_shape(), point):
                return body
        return None

    def nearest_vertex(self, point: Vector2) -> tuple[SoftBody, int] | None:
        """
        Vertex closest to point along any body's outline.

        Finds the nearest boundary point per body with shapes.nearest_index
        and snaps it to the closer end of its edge.

        Returns:
            (body, vertex index), or None when the world is empty.
        """
        best: tuple[SoftBody, int] | None = None
        best_d = float("inf")
        for body in self.bodies:
            outline = body.get_shape()
            i, s = shapes.nearest_index(outline, point)
            a = outline[i]
            edge = outline[(i + 1) % len(outline)] - a
            d = (a + edge * s - point).len()
            if d < best_d:
                best_d = d
                best = (body, i if s < 0.5 else (i + 1) % len(outline))
        return best

    def _apply_pins(self) -> None:
        for pin in self.pins:
            pin.apply()

    def _update(self, dt: float) -> None:
        for body in self.bodies:
            body.update(dt)

    def step(self, dt: float) -> None:
        """
        Advance every body by one frame.

        Args:
            dt: Elapsed time in seconds. Used as-is; no clamping or
                substepping.
        """
        prof = self.profiler
        if prof:
            with prof.section("pins"):
                self._apply_pins()
            with prof.section("update"):
                self._update(dt)
        else:
            self._apply_pins()
            self._update(dt)

        self.time += dt
