"""Rigid bodies (rotation-free) and contact records."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

from jmp_physics import vec
from jmp_physics.shapes import Manifold, Shape
from jmp_physics.vec import Vec2


class BodyType(enum.Enum):
    STATIC = "static"
    KINEMATIC = "kinematic"
    DYNAMIC = "dynamic"


@dataclass(eq=False)
class Body:
    """Physics body with position, velocity, mass, and a force accumulator.

    Static and kinematic bodies have infinite mass. Kinematic bodies move
    by their velocity but ignore forces and impulses. Sensors report
    contacts without being pushed apart.
    """

    id: int
    type: BodyType
    position: Vec2
    shape: Shape
    velocity: Vec2 = vec.ZERO
    mass: float = 1.0
    restitution: float = 0.0
    friction: float = 0.2
    gravity_scale: float = 1.0
    sensor: bool = False
    forces: list[Vec2] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.type is BodyType.DYNAMIC and self.mass <= 0:
            raise ValueError("dynamic body mass must be positive")

    @property
    def inverse_mass(self) -> float:
        if self.type is not BodyType.DYNAMIC:
            return 0.0
        return 1.0 / self.mass

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    def apply_force(self, force: Vec2) -> None:
        self.forces.append(force)

    def apply_impulse(self, impulse: Vec2) -> None:
        if self.type is BodyType.DYNAMIC:
            self.velocity = vec.add(self.velocity, vec.scale(impulse, 1.0 / self.mass))


@dataclass(frozen=True, eq=False)
class Contact:
    """A touching pair, passed to contact listeners."""

    body_a: Body
    body_b: Body
    manifold: Manifold | None = None

    @property
    def key(self) -> tuple[int, int]:
        return (self.body_a.id, self.body_b.id)
