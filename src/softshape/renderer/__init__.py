# MIT License (see LICENSE)
"""
Rendering adapters.

The core hands out vertex snapshots (SoftBody.get_shape()); these adapters
pass them to an output:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - BufferedRenderer: Records frames for playback or export.

Typical usage:
    from softshape.renderer import BufferedRenderer

    renderer = BufferedRenderer()
    world.step(1 / 60)
    renderer.render_world(world)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "BufferedRenderer",
]
