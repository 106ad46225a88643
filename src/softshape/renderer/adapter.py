# MIT License (see LICENSE)
"""
Renderer adapters for soft-body visualization.

The core has no drawing dependency. A backend (canvas, pygame, matplotlib,
...) subclasses RendererAdapter and receives one body at a time; the
outline to draw is body.get_shape().
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..soft_body import SoftBody

if TYPE_CHECKING:
    from ..world import World


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(world.time)
        for body in world.bodies:
            renderer.draw_body(body)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_world(world)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current world time in seconds.
        """
        ...

    @abstractmethod
    def draw_body(self, body: SoftBody) -> None:
        """Draw the current outline of one body."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_world(self, world: "World") -> None:
        self.begin_frame(world.time)
        for body in world.bodies:
            self.draw_body(body)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Writes each frame as text, one line per body.

    Output:
        === Frame t=0.0167 ===
        [1] 16 pts center=(0.00, 0.02) rot=0.001
          (-25.00, -20.00) (-24.81, -22.34) ...
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also list every vertex.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_body(self, body: SoftBody) -> None:
        c = body.center()
        self.output.write(
            f"[{body.id}] {len(body)} pts center=({c.x:.2f}, {c.y:.2f}) rot={body.rotation:.3f}\n"
        )
        if self.verbose:
            pts = " ".join(f"({p.x:.2f}, {p.y:.2f})" for p in body.get_shape())
            self.output.write(f"  {pts}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class BufferedRenderer(RendererAdapter):
    """
    Stores every frame's outlines for later retrieval.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            world.step(1 / 60)
            renderer.render_world(world)

        for frame in renderer.frames:
            print(frame["time"], [len(b["vertices"]) for b in frame["bodies"]])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "bodies": [],
        }

    def draw_body(self, body: SoftBody) -> None:
        if self._current_frame is None:
            return
        self._current_frame["bodies"].append({
            "id": body.id,
            "vertices": [(p.x, p.y) for p in body.get_shape()],
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
