"""Game entities: scenery, the player, and falling blocks."""
from __future__ import annotations

from typing import TYPE_CHECKING

from jmp import Entity
from jmp_physics import Body, BodyType, Box, vec

from jmp_game.render import Color

if TYPE_CHECKING:
    from jmp_game.app import Jmp

GROUND_COLOR: Color = (0x2E, 0x4A, 0x4F)
WALL_COLOR: Color = (0x3C, 0x5F, 0x66)
STRIPE_COLOR: Color = (0x00, 0x2A, 0x2E)
PLAYER_COLOR: Color = (0xF2, 0xC1, 0x4E)
BLOCK_COLOR: Color = (0xE0, 0x55, 0x4F)
LANDED_COLOR: Color = (0x9A, 0x3B, 0x37)

WALL_HALF_WIDTH = 0.05
# Blocks slower than this (m/s) for SETTLE_TIME seconds become static.
SETTLE_SPEED = 0.05
SETTLE_TIME = 0.25


class BodyEntity(Entity):
    """Entity owning one box-shaped body, registered with the app."""

    color: Color = (255, 255, 255)

    def __init__(self, app: Jmp, body: Body) -> None:
        self.app = app
        self.body = body
        app.registry.register(body, self)

    def render(self, dt: float) -> None:
        shape = self.body.shape
        assert isinstance(shape, Box)
        self.app.renderer.draw_box(
            self.body.position, (shape.half_width, shape.half_height), self.color
        )

    def dispose(self) -> None:
        # Destroy first so both sides still resolve when the contacts end.
        self.app.world.destroy_body(self.body)
        self.app.registry.unregister(self.body)


def follow_camera(entity: BodyEntity) -> None:
    """Move a static body vertically to the camera centre."""
    body = entity.body
    body.position = (body.x, entity.app.renderer.camera.position[1])


class Ground(BodyEntity):
    color = GROUND_COLOR

    def __init__(self, app: Jmp, width: float) -> None:
        h = app.config.ground_height / 2
        body = app.world.create_body(
            BodyType.STATIC, (width / 2, h), Box(width / 2, h), friction=0.6
        )
        super().__init__(app, body)

    @property
    def top(self) -> float:
        return self.body.y + self.body.shape.half_height


class Wall(BodyEntity):
    """Side wall. Spans twice the view height and stays centred on the camera."""

    color = WALL_COLOR

    def __init__(self, app: Jmp, x: float) -> None:
        h = app.config.world_height
        body = app.world.create_body(
            BodyType.STATIC, (x, h / 2), Box(WALL_HALF_WIDTH, h), friction=0.0
        )
        super().__init__(app, body)

    def step(self, dt: float) -> None:
        follow_camera(self)


class Background(BodyEntity):
    """Scrolling stripes behind everything.

    Owns a static sensor covering the view so the simulation steps and
    renders it like any other entity; contacts with it are ignored.
    """

    SPACING = 2.0
    SPEED = 0.4

    def __init__(self, app: Jmp) -> None:
        w = app.config.world_width
        h = app.config.world_height
        body = app.world.create_body(
            BodyType.STATIC, (w / 2, h / 2), Box(w / 2, h), sensor=True
        )
        super().__init__(app, body)
        self.offset = 0.0

    def reset(self) -> None:
        self.offset = 0.0

    def step(self, dt: float) -> None:
        self.offset = (self.offset + self.SPEED * dt) % self.SPACING
        follow_camera(self)

    def render(self, dt: float) -> None:
        camera = self.app.renderer.camera
        half_w = self.app.config.world_width / 2
        y = camera.bottom - camera.bottom % self.SPACING - self.offset
        while y < camera.top + self.SPACING:
            self.app.renderer.draw_box((half_w, y), (half_w, self.SPACING / 4), STRIPE_COLOR)
            y += self.SPACING


class Block(BodyEntity):
    """Falling obstacle. Turns static once it has come to rest."""

    color = BLOCK_COLOR

    def __init__(self, app: Jmp, x: float, y: float, half: float) -> None:
        body = app.world.create_body(BodyType.DYNAMIC, (x, y), Box(half, half), friction=0.6)
        super().__init__(app, body)
        self.landed = False
        self._still = 0.0
        self._supports: set[Entity] = set()

    @property
    def falling(self) -> bool:
        return not self.landed

    def land(self) -> None:
        self.landed = True
        self.color = LANDED_COLOR
        self.body.type = BodyType.STATIC
        self.body.velocity = vec.ZERO

    def step(self, dt: float) -> None:
        if self.landed:
            return
        if self._supports and abs(self.body.velocity[1]) < SETTLE_SPEED:
            self._still += dt
            if self._still >= SETTLE_TIME:
                self.land()
        else:
            self._still = 0.0

    def begin_contact(self, other: Entity) -> None:
        if isinstance(other, (Ground, Block)):
            self._supports.add(other)

    def end_contact(self, other: Entity) -> None:
        self._supports.discard(other)


class Player(BodyEntity):
    """Runs between the walls and jumps on tap. Crushed by falling blocks."""

    HALF = 0.4
    color = PLAYER_COLOR

    def __init__(self, app: Jmp, x: float, y: float) -> None:
        body = app.world.create_body(
            BodyType.DYNAMIC, (x, y), Box(self.HALF, self.HALF), friction=0.0
        )
        super().__init__(app, body)
        self.direction = 1.0
        self.crushed = False
        self.start_y = y
        self._supports: set[Entity] = set()

    @property
    def grounded(self) -> bool:
        return bool(self._supports)

    @property
    def climbed(self) -> float:
        return self.body.y - self.start_y

    def jump(self) -> bool:
        if not self.grounded or self.crushed:
            return False
        self.body.velocity = (self.body.velocity[0], self.app.config.jump_speed)
        return True

    def step(self, dt: float) -> None:
        if self.crushed:
            self.body.velocity = (0.0, self.body.velocity[1])
            return
        self.body.velocity = (self.direction * self.app.config.run_speed, self.body.velocity[1])

    def begin_contact(self, other: Entity) -> None:
        if isinstance(other, Wall):
            self.direction = 1.0 if other.body.x < self.body.x else -1.0
        elif isinstance(other, Block) and other.falling and other.body.y > self.body.y:
            self.crushed = True
        elif isinstance(other, (Ground, Block)):
            self._supports.add(other)

    def end_contact(self, other: Entity) -> None:
        self._supports.discard(other)
