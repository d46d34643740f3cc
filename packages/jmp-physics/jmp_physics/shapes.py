"""Collision shapes and narrow-phase tests."""
from __future__ import annotations

import math
from dataclasses import dataclass

from jmp_physics import vec
from jmp_physics.vec import Vec2


@dataclass(frozen=True)
class Box:
    """Axis-aligned box centred on the body position."""

    half_width: float
    half_height: float

    def __post_init__(self) -> None:
        if self.half_width <= 0 or self.half_height <= 0:
            raise ValueError("box extents must be positive")

    @property
    def area(self) -> float:
        return 4.0 * self.half_width * self.half_height


@dataclass(frozen=True)
class Circle:
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError("radius must be positive")

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius


Shape = Box | Circle


@dataclass(frozen=True)
class Manifold:
    """Overlap between two shapes: unit normal from A towards B, and depth."""

    normal: Vec2
    depth: float


def circle_vs_circle(pos_a: Vec2, a: Circle, pos_b: Vec2, b: Circle) -> Manifold | None:
    dx = pos_b[0] - pos_a[0]
    dy = pos_b[1] - pos_a[1]
    r_sum = a.radius + b.radius
    dist_sq = dx * dx + dy * dy
    if dist_sq >= r_sum * r_sum:
        return None
    dist = math.sqrt(dist_sq)
    if dist == 0.0:
        # Coincident centres: push straight up.
        return Manifold((0.0, 1.0), r_sum)
    return Manifold((dx / dist, dy / dist), r_sum - dist)


def box_vs_box(pos_a: Vec2, a: Box, pos_b: Vec2, b: Box) -> Manifold | None:
    """Separate along the axis of least penetration."""
    dx = pos_b[0] - pos_a[0]
    dy = pos_b[1] - pos_a[1]
    overlap_x = a.half_width + b.half_width - abs(dx)
    if overlap_x <= 0.0:
        return None
    overlap_y = a.half_height + b.half_height - abs(dy)
    if overlap_y <= 0.0:
        return None
    if overlap_x < overlap_y:
        return Manifold((1.0 if dx >= 0 else -1.0, 0.0), overlap_x)
    return Manifold((0.0, 1.0 if dy >= 0 else -1.0), overlap_y)


def circle_vs_box(circle_pos: Vec2, circle: Circle, box_pos: Vec2, box: Box) -> Manifold | None:
    """Normal points from the circle towards the box."""
    min_x = box_pos[0] - box.half_width
    max_x = box_pos[0] + box.half_width
    min_y = box_pos[1] - box.half_height
    max_y = box_pos[1] + box.half_height
    cx, cy = circle_pos
    closest = (max(min_x, min(cx, max_x)), max(min_y, min(cy, max_y)))
    dx = closest[0] - cx
    dy = closest[1] - cy
    dist_sq = dx * dx + dy * dy
    r = circle.radius

    if dist_sq >= r * r:
        return None

    if dist_sq == 0.0:
        # Centre inside the box: leave through the nearest face.
        faces = (
            (max_x - cx, (-1.0, 0.0)),
            (cx - min_x, (1.0, 0.0)),
            (max_y - cy, (0.0, -1.0)),
            (cy - min_y, (0.0, 1.0)),
        )
        pen, normal = min(faces, key=lambda f: f[0])
        return Manifold(normal, r + pen)

    dist = math.sqrt(dist_sq)
    return Manifold((dx / dist, dy / dist), r - dist)


def collide(pos_a: Vec2, a: Shape, pos_b: Vec2, b: Shape) -> Manifold | None:
    """Dispatch on shape kinds. The normal always points from A to B."""
    if isinstance(a, Box) and isinstance(b, Box):
        return box_vs_box(pos_a, a, pos_b, b)
    if isinstance(a, Circle) and isinstance(b, Circle):
        return circle_vs_circle(pos_a, a, pos_b, b)
    if isinstance(a, Circle) and isinstance(b, Box):
        return circle_vs_box(pos_a, a, pos_b, b)
    if isinstance(a, Box) and isinstance(b, Circle):
        m = circle_vs_box(pos_b, b, pos_a, a)
        if m is None:
            return None
        return Manifold(vec.neg(m.normal), m.depth)
    raise TypeError(f"Unsupported shape pair: {type(a).__name__}, {type(b).__name__}")
