"""Screens: start menu and the game itself."""
from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import pygame

from jmp import STEP_TOLERANCE, Steppable, Timer

from jmp_game.entities import Block, Player
from jmp_game.input import is_tap

if TYPE_CHECKING:
    from jmp_game.app import Jmp

logger = logging.getLogger(__name__)


class ScreenKind(enum.Enum):
    START = "start"
    GAME = "game"


# Blocks this far below the camera are removed.
CULL_DISTANCE = 5.0
# Fraction of the view height kept between the player and the top edge.
FOLLOW_MARGIN = 0.4


class Screen:
    """Base screen. Screens that need fixed-increment updates override ``steppable``."""

    def __init__(self, app: Jmp) -> None:
        self.app = app

    @property
    def steppable(self) -> Steppable | None:
        return None

    def show(self) -> None:
        pass

    def hide(self) -> None:
        pass

    def render(self, dt: float) -> None:
        pass

    def dispose(self) -> None:
        pass


class StartController:
    def __init__(self, screen: StartScreen) -> None:
        self.screen = screen

    def handle(self, event: pygame.event.Event) -> bool:
        if not is_tap(event):
            return False
        self.screen.start_game()
        return True


class StartScreen(Screen):
    def __init__(self, app: Jmp) -> None:
        super().__init__(app)
        self.controller = StartController(self)

    def show(self) -> None:
        self.app.input.add_processor(self.controller)

    def hide(self) -> None:
        self.app.input.remove_processor(self.controller)

    def start_game(self) -> None:
        self.app.set_screen(ScreenKind.GAME)

    def render(self, dt: float) -> None:
        camera = self.app.renderer.camera
        cx, cy = camera.position
        r = self.app.renderer
        r.draw_text("JMP", cx, cy + 3.0, size=96)
        r.draw_text("tap to start", cx, cy, size=32)
        if self.app.high_score:
            r.draw_text(f"best {self.app.high_score}", cx, cy - 2.0, size=28)


class GameController:
    def __init__(self, screen: GameScreen) -> None:
        self.screen = screen

    def handle(self, event: pygame.event.Event) -> bool:
        if not is_tap(event):
            return False
        return self.screen.tap()


class GameScreen(Screen):
    """One run: spawns blocks, follows the player, keeps score."""

    def __init__(self, app: Jmp, high_score: int) -> None:
        super().__init__(app)
        cfg = app.config
        self.high_score = high_score
        self.score = 0
        self.over = False
        self.blocks: list[Block] = []
        self.controller = GameController(self)
        self._spawn = Timer(cfg.block_interval, auto_reset=False, tolerance=STEP_TOLERANCE)
        self.player = Player(
            app,
            cfg.world_width / 2,
            cfg.ground_height + Player.HALF,
        )

    @property
    def steppable(self) -> Steppable | None:
        return self

    def show(self) -> None:
        self.app.input.add_processor(self.controller)

    def hide(self) -> None:
        self.app.input.remove_processor(self.controller)

    def tap(self) -> bool:
        if self.over:
            return False
        self.player.jump()
        return True

    def spawn_block(self) -> Block:
        cfg = self.app.config
        rng = self.app.random
        half = rng.uniform(cfg.block_min_half, cfg.block_max_half)
        x = rng.uniform(half, cfg.world_width - half)
        y = self.app.renderer.camera.top + half + 1.0
        block = Block(self.app, x, y, half)
        self.blocks.append(block)
        return block

    def step(self, dt: float) -> None:
        if self._spawn.step(dt).is_done:
            self._spawn.reset()
            self._spawn.add(self.app.config.block_interval)
            self.spawn_block()

        camera = self.app.renderer.camera
        target = self.player.body.y + FOLLOW_MARGIN * camera.height - camera.height / 2
        if target > camera.position[1]:
            camera.position = (camera.position[0], target)

        self.score = max(self.score, int(self.player.climbed))

        for block in list(self.blocks):
            if block.body.y < camera.bottom - CULL_DISTANCE:
                block.dispose()
                self.blocks.remove(block)

        if self.player.crushed and not self.over:
            self.over = True
            self.app.game_over(self.score)

    def render(self, dt: float) -> None:
        camera = self.app.renderer.camera
        cx = camera.position[0]
        r = self.app.renderer
        r.draw_text(str(self.score), cx, camera.top - 1.5, size=64)
        r.draw_text(f"best {max(self.high_score, self.score)}", cx, camera.top - 3.0, size=24)
        if self.over:
            r.draw_text("GAME OVER", cx, camera.position[1] + 1.0, size=64)
            if self.app.suspender.timer.is_done:
                r.draw_text("tap to retry", cx, camera.position[1] - 1.0, size=28)

    def dispose(self) -> None:
        self.player.dispose()
        for block in self.blocks:
            block.dispose()
        self.blocks.clear()
        logger.debug("game screen disposed")
