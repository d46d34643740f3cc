"""World - body storage, impulse solver, and contact events."""
from __future__ import annotations

import logging
import math
from typing import Protocol, Sequence

from jmp_physics import vec
from jmp_physics.body import Body, BodyType, Contact
from jmp_physics.shapes import Manifold, Shape, collide
from jmp_physics.vec import Vec2

logger = logging.getLogger(__name__)

# Penetration allowed to persist so resting contacts stay touching.
LINEAR_SLOP = 0.005
# Fraction of remaining penetration removed per position iteration.
CORRECTION_PERCENT = 0.8
# Below this approach speed (m/s) collisions are inelastic.
RESTITUTION_THRESHOLD = 1.0


class WorldLockedError(RuntimeError):
    """Raised when bodies are destroyed while the world is stepping."""


class ContactListener(Protocol):
    def begin_contact(self, contact: Contact) -> None: ...
    def end_contact(self, contact: Contact) -> None: ...


class World:
    def __init__(self, gravity: Vec2 = (0.0, -10.0)) -> None:
        self._gravity = gravity
        self._bodies: list[Body] = []
        self._next_id = 0
        self._listener: ContactListener | None = None
        self._touching: dict[tuple[int, int], Contact] = {}
        self._locked = False

    @property
    def gravity(self) -> Vec2:
        return self._gravity

    @gravity.setter
    def gravity(self, value: Vec2) -> None:
        self._gravity = value

    @property
    def locked(self) -> bool:
        return self._locked

    def set_contact_listener(self, listener: ContactListener | None) -> None:
        self._listener = listener

    def create_body(
        self,
        body_type: BodyType,
        position: Vec2,
        shape: Shape,
        *,
        velocity: Vec2 = vec.ZERO,
        density: float = 1.0,
        restitution: float = 0.0,
        friction: float = 0.2,
        gravity_scale: float = 1.0,
        sensor: bool = False,
    ) -> Body:
        """Add a body. Dynamic bodies take their mass from density * area."""
        body = Body(
            id=self._next_id,
            type=body_type,
            position=position,
            shape=shape,
            velocity=velocity,
            mass=density * shape.area,
            restitution=restitution,
            friction=friction,
            gravity_scale=gravity_scale,
            sensor=sensor,
        )
        self._next_id += 1
        self._bodies.append(body)
        logger.debug("created %s body %d at %s", body_type.value, body.id, position)
        return body

    def destroy_body(self, body: Body) -> None:
        """Remove a body. Its open contacts end immediately."""
        if self._locked:
            raise WorldLockedError("Cannot destroy a body while the world is stepping")
        try:
            self._bodies.remove(body)
        except ValueError:
            return
        logger.debug("destroyed body %d", body.id)
        ended = [key for key in self._touching if body.id in key]
        for key in ended:
            contact = self._touching.pop(key)
            if self._listener is not None:
                self._listener.end_contact(contact)

    def get_bodies(self) -> Sequence[Body]:
        return tuple(self._bodies)

    def contacts(self) -> list[Contact]:
        """Pairs that were touching at the last step."""
        return list(self._touching.values())

    def step(self, dt: float, velocity_iterations: int, position_iterations: int) -> None:
        self._locked = True
        try:
            self._integrate_velocities(dt)
            contacts = self._detect()
            solid = [c for c in contacts if not (c.body_a.sensor or c.body_b.sensor)]
            for _ in range(velocity_iterations):
                for contact in solid:
                    _solve_velocity(contact)
            self._integrate_positions(dt)
            for _ in range(position_iterations):
                for contact in solid:
                    _solve_position(contact.body_a, contact.body_b)
            self._report(contacts)
        finally:
            self._locked = False

    def _integrate_velocities(self, dt: float) -> None:
        gx, gy = self._gravity
        for body in self._bodies:
            if body.type is BodyType.DYNAMIC:
                ax = gx * body.gravity_scale
                ay = gy * body.gravity_scale
                for fx, fy in body.forces:
                    ax += fx / body.mass
                    ay += fy / body.mass
                body.velocity = (body.velocity[0] + ax * dt, body.velocity[1] + ay * dt)
            body.forces.clear()

    def _integrate_positions(self, dt: float) -> None:
        for body in self._bodies:
            if body.type is not BodyType.STATIC:
                body.position = vec.add(body.position, vec.scale(body.velocity, dt))

    def _detect(self) -> list[Contact]:
        bodies = self._bodies
        found: list[Contact] = []
        for i in range(len(bodies)):
            a = bodies[i]
            for j in range(i + 1, len(bodies)):
                b = bodies[j]
                if a.type is not BodyType.DYNAMIC and b.type is not BodyType.DYNAMIC:
                    continue
                manifold = collide(a.position, a.shape, b.position, b.shape)
                if manifold is not None:
                    found.append(Contact(a, b, manifold))
        return found

    def _report(self, contacts: list[Contact]) -> None:
        current = {c.key: c for c in contacts}
        previous = self._touching
        self._touching = current
        if self._listener is None:
            return
        for key, contact in previous.items():
            if key not in current:
                self._listener.end_contact(contact)
        for key, contact in current.items():
            if key not in previous:
                self._listener.begin_contact(contact)


def _solve_velocity(contact: Contact) -> None:
    a, b = contact.body_a, contact.body_b
    m = contact.manifold
    assert m is not None
    inv_a, inv_b = a.inverse_mass, b.inverse_mass
    inv_sum = inv_a + inv_b
    if inv_sum == 0.0:
        return

    n = m.normal
    rv = vec.sub(b.velocity, a.velocity)
    vn = vec.dot(rv, n)
    if vn > 0.0:
        return  # already separating

    e = max(a.restitution, b.restitution)
    if -vn < RESTITUTION_THRESHOLD:
        e = 0.0
    j = -(1.0 + e) * vn / inv_sum
    impulse = vec.scale(n, j)
    a.velocity = vec.sub(a.velocity, vec.scale(impulse, inv_a))
    b.velocity = vec.add(b.velocity, vec.scale(impulse, inv_b))

    # Coulomb friction along the contact tangent
    rv = vec.sub(b.velocity, a.velocity)
    tangent = vec.sub(rv, vec.scale(n, vec.dot(rv, n)))
    if vec.length(tangent) == 0.0:
        return
    tangent = vec.normalize(tangent)
    jt = -vec.dot(rv, tangent) / inv_sum
    mu = math.sqrt(a.friction * b.friction)
    jt = max(-j * mu, min(jt, j * mu))
    friction = vec.scale(tangent, jt)
    a.velocity = vec.sub(a.velocity, vec.scale(friction, inv_a))
    b.velocity = vec.add(b.velocity, vec.scale(friction, inv_b))


def _solve_position(a: Body, b: Body) -> None:
    inv_sum = a.inverse_mass + b.inverse_mass
    if inv_sum == 0.0:
        return
    m: Manifold | None = collide(a.position, a.shape, b.position, b.shape)
    if m is None or m.depth <= LINEAR_SLOP:
        return
    push = vec.scale(m.normal, (m.depth - LINEAR_SLOP) * CORRECTION_PERCENT / inv_sum)
    if a.type is BodyType.DYNAMIC:
        a.position = vec.sub(a.position, vec.scale(push, a.inverse_mass))
    if b.type is BodyType.DYNAMIC:
        b.position = vec.add(b.position, vec.scale(push, b.inverse_mass))
