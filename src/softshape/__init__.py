# MIT License (see LICENSE)
"""
softshape - 2D polygon geometry and shape-matching soft bodies.

This package builds and queries polygons and simulates elastic bodies that
deform and spring back toward a rigid target polygon.

Main entry points:
    - Vector2: Immutable 2D vector with rotation and line helpers.
    - shapes: Polygon construction, transforms and queries.
    - SoftBody: Shape-matching body; update(dt), get_shape(), set_shape().
    - World: Steps several bodies and handles vertex pins and picking.

Submodules:
    - mass_point: Point mass with springs and semi-implicit Euler.
    - diagnostics: Kinetic energy and momentum.
    - renderer: Optional output adapters.

Example:
    from softshape import SoftBody, shapes

    body = SoftBody(shapes.circle(50, 24), mass=1.0, k=40.0, c=2.0, fric=0.1)
    body.set_shape(shapes.smooth_rect(100, 100, 20, div=4))
    body.update(1 / 60)
    outline = body.get_shape()
"""
import logging

from . import shapes
from .vector import Vector2
from .mass_point import MassPoint
from .materials import SoftMaterial
from .soft_body import SoftBody
from .world import World, Pin

__all__ = [
    # Geometry
    "Vector2",
    "shapes",
    # Simulation
    "MassPoint",
    "SoftBody",
    "SoftMaterial",
    "World",
    "Pin",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
