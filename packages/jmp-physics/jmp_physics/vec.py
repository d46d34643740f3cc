"""2D vector helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec2) -> Vec2:
    mag = length(v)
    if mag == 0.0:
        return v
    return (v[0] / mag, v[1] / mag)


def neg(v: Vec2) -> Vec2:
    return (-v[0], -v[1])
