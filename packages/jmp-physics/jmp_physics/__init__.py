"""jmp-physics - 2D rigid-body world with contact events."""
from __future__ import annotations

from jmp_physics import vec
from jmp_physics.body import Body, BodyType, Contact
from jmp_physics.shapes import Box, Circle, Manifold, Shape, collide
from jmp_physics.world import ContactListener, World, WorldLockedError

__all__ = [
    "Body",
    "BodyType",
    "Box",
    "Circle",
    "Contact",
    "ContactListener",
    "Manifold",
    "Shape",
    "World",
    "WorldLockedError",
    "collide",
    "vec",
]
