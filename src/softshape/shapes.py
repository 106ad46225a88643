# MIT License (see LICENSE)
"""
Polygon construction, transforms and queries.

A polygon is a list of Vector2, implicitly closed: the edge from the last
vertex back to the first always exists. Nothing here mutates its input.

Construction:
    from_coords, smooth_rect, circle, bezier
Transforms:
    limit_edge, to_sketchy, translate
Queries:
    get_center, signed_area, contain, get_edges_normal, get_points_normal,
    nearest_index

Contract violations (odd coordinate counts, negative subdivision counts,
non-positive lengths or repeat counts) raise ValueError.
"""
from __future__ import annotations
import math
import time

import numpy as np

from .constants import KAPPA, SKETCHY_FPS
from .util import as_array, to_polygon
from .vector import Vector2

Polygon = list[Vector2]


# =============================================================================
# Construction
# =============================================================================

def from_coords(*coords: float) -> Polygon:
    """
    Polygon from a flat coordinate list: from_coords(x0, y0, x1, y1, ...).
    """
    if len(coords) % 2 != 0:
        raise ValueError(f"Coordinate list must have even length, got {len(coords)}")
    return [Vector2(float(coords[i]), float(coords[i + 1])) for i in range(0, len(coords), 2)]


def bezier(p1: Vector2, p2: Vector2, p3: Vector2, p4: Vector2, div: int) -> Polygon:
    """
    Sample a cubic Bezier curve at div+2 uniform parameters.

    t runs over [0, 1] including both ends, so the first sample is p1 and
    the last is p4 exactly.

    B(t) = (1-t)³ p1 + 3(1-t)² t p2 + 3(1-t) t² p3 + t³ p4

    Reference: https://en.wikipedia.org/wiki/B%C3%A9zier_curve#Cubic_B%C3%A9zier_curves
    """
    if div < 0:
        raise ValueError(f"div must be >= 0, got {div}")
    t = np.linspace(0.0, 1.0, div + 2)
    u = 1.0 - t
    basis = np.stack([u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t], axis=1)
    ctrl = as_array([p1, p2, p3, p4])
    return to_polygon(basis @ ctrl)


def smooth_rect(w: float, h: float, r1: float, r2: float = KAPPA, div: int = 4) -> Polygon:
    """
    Rectangle of size w x h centered on the origin, with rounded corners.

    One corner arc is a Bezier from (0, r1) to (r1, 0) with control points
    pulled toward the corner by r2. With r2 = KAPPA the arc is a close
    approximation of a quarter circle of radius r1. The arc is rotated by
    quarter turns onto each corner, giving 4 * (div + 2) vertices in
    counter-clockwise order.

    Args:
        w, h: Full width and height.
        r1: Corner radius.
        r2: Control point factor.
        div: Interior samples per corner arc.
    """
    if div < 0:
        raise ValueError(f"div must be >= 0, got {div}")
    k = r1 * (1.0 - r2)
    arc = bezier(Vector2(0.0, r1), Vector2(0.0, k), Vector2(k, 0.0), Vector2(r1, 0.0), div)

    hw, hh = w / 2.0, h / 2.0
    corners = [
        Vector2(-hw, -hh),
        Vector2(hw, -hh),
        Vector2(hw, hh),
        Vector2(-hw, hh),
    ]
    out: Polygon = []
    for quarter, corner in enumerate(corners):
        out.extend(p.rot90(quarter) + corner for p in arc)
    return out


def circle(r: float, div: int) -> Polygon:
    """Regular div-gon of radius r, vertex i at angle 2πi/div."""
    if div < 0:
        raise ValueError(f"div must be >= 0, got {div}")
    if div == 0:
        return []
    a = 2.0 * np.pi * np.arange(div) / div
    return to_polygon(np.stack([r * np.cos(a), r * np.sin(a)], axis=1))


# =============================================================================
# Transforms
# =============================================================================

def limit_edge(shape: Polygon, max_len: float) -> Polygon:
    """
    Subdivide edges so that none is longer than max_len.

    An edge of length L > max_len receives ceil(L / max_len) - 1 evenly
    spaced interior points. Original vertices keep their order.
    """
    if max_len <= 0:
        raise ValueError(f"max_len must be > 0, got {max_len}")
    n = len(shape)
    out: Polygon = []
    for i, a in enumerate(shape):
        b = shape[(i + 1) % n]
        out.append(a)
        edge = b - a
        length = edge.len()
        if length <= max_len:
            continue
        extra = max(1, math.ceil(length / max_len) - 1)
        for j in range(1, extra + 1):
            out.append(a + edge * (j / (extra + 1)))
    return out


def _jitter(frame: float, copy: int, count: int) -> np.ndarray:
    """Hash (frame, copy, vertex) into [-1, 1]; same inputs, same output."""
    i = np.arange(count, dtype=np.float64)
    h = np.sin(i * 12.9898 + copy * 78.233 + frame * 37.719) * 43758.5453
    return 2.0 * (h - np.floor(h)) - 1.0


def to_sketchy(
    shape: Polygon,
    repeat: int,
    t: float | None = None,
    amplitude: float = 1.0,
) -> list[Polygon]:
    """
    Hand-drawn look: `repeat` copies of shape, each vertex pushed along its
    vertex normal by a pseudo-random offset in [-amplitude, amplitude].

    The offsets change SKETCHY_FPS times per second of `t`. With t=None the
    wall clock is used, so consecutive calls "boil" like a redrawn sketch.
    Pass an explicit t (e.g. frame / fps) for reproducible output.
    """
    if repeat <= 0:
        raise ValueError(f"repeat must be > 0, got {repeat}")
    if t is None:
        t = time.perf_counter()
    frame = math.floor(t * SKETCHY_FPS)

    pts = as_array(shape)
    normals = as_array(get_points_normal(shape))
    copies = []
    for r in range(repeat):
        offset = amplitude * _jitter(frame, r, len(shape))
        copies.append(to_polygon(pts + normals * offset[:, None]))
    return copies


def translate(shape: Polygon, offset: Vector2) -> Polygon:
    return [p + offset for p in shape]


# =============================================================================
# Queries
# =============================================================================

def get_center(shape: Polygon) -> Vector2:
    """Unweighted mean of the vertices."""
    if not shape:
        raise ValueError("Cannot take the center of an empty polygon")
    return Vector2.of(as_array(shape).mean(axis=0))


def signed_area(shape: Polygon) -> float:
    """
    Shoelace area. Positive for counter-clockwise winding (y up).

    Reference: https://en.wikipedia.org/wiki/Shoelace_formula
    """
    if len(shape) < 3:
        return 0.0
    pts = as_array(shape)
    nxt = np.roll(pts, -1, axis=0)
    return 0.5 * float(np.sum(pts[:, 0] * nxt[:, 1] - nxt[:, 0] * pts[:, 1]))


def contain(shape: Polygon, p: Vector2) -> bool:
    """
    Point-in-polygon test by ray casting toward +x.

    For each edge a -> b the crossing parameter t = (p.y - a.y) / (b.y - a.y)
    counts only on [0, 1), so a ray through a shared vertex is counted once.
    Horizontal edges never cross a horizontal ray. Odd crossings = inside.
    """
    n = len(shape)
    crossings = 0
    for i, a in enumerate(shape):
        b = shape[(i + 1) % n]
        dy = b.y - a.y
        if dy == 0.0:
            continue
        t = (p.y - a.y) / dy
        if t < 0.0 or t >= 1.0:
            continue
        if a.x + t * (b.x - a.x) > p.x:
            crossings += 1
    return crossings % 2 == 1


def get_edges_normal(shape: Polygon) -> Polygon:
    """
    Unit normal of each edge i (vertex i -> i+1).

    The edge direction is turned a quarter turn clockwise, which points
    outward for a counter-clockwise polygon.
    """
    n = len(shape)
    return [(shape[(i + 1) % n] - shape[i]).rot90(-1).unit() for i in range(n)]


def get_points_normal(shape: Polygon) -> Polygon:
    """Per-vertex normal: normalized sum of the two adjacent edge normals."""
    edges = get_edges_normal(shape)
    n = len(edges)
    return [(edges[i - 1] + edges[i]).unit() for i in range(n)]


def nearest_index(shape: Polygon, p: Vector2) -> tuple[int, float]:
    """
    Closest boundary point to p.

    Scans every edge (O(N)), projects p onto it with Vector2.nearest and
    keeps the edge with the smallest distance.

    Returns:
        (index, s): the edge starts at shape[index]; the closest point is
        shape[index] + s * (shape[index + 1] - shape[index]), s in [0, 1].
    """
    if not shape:
        raise ValueError("Cannot search an empty polygon")
    n = len(shape)
    best_i, best_s, best_d = 0, 0.0, math.inf
    for i, a in enumerate(shape):
        edge = shape[(i + 1) % n] - a
        s = Vector2.nearest(a, edge, p)
        d = (a + edge * s - p).len()
        if d < best_d:
            best_i, best_s, best_d = i, s, d
    return best_i, best_s
