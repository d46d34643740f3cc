"""Jmp - wires the world, simulation, entities, screens, and input."""
from __future__ import annotations

import logging
import random

from jmp import EntityContactListener, EntityRegistry, Simulation, SuspendController
from jmp_physics import World

from jmp_game.config import GameConfig
from jmp_game.entities import Background, Ground, Wall
from jmp_game.input import InputMultiplexer, TouchInput
from jmp_game.render import NullRenderer, Renderer
from jmp_game.screens import GameScreen, Screen, ScreenKind, StartScreen

logger = logging.getLogger(__name__)


class Jmp:
    """The game root. Owns the physics world and everything living in it."""

    def __init__(self, config: GameConfig, renderer: Renderer | NullRenderer) -> None:
        self.config = config
        self.renderer = renderer
        self.random = random.Random(config.seed)
        self.high_score = 0

        sim_cfg = config.simulation_config()
        self.world = World(gravity=(0.0, -sim_cfg.gravity))
        self.registry = EntityRegistry()
        self.world.set_contact_listener(EntityContactListener(self.registry))
        self.suspender = SuspendController()
        self.simulation = Simulation(sim_cfg, self.world, self.registry, self.suspender)

        # Resuming after game over takes priority over screen input.
        self.input = InputMultiplexer()
        self.input.add_processor(TouchInput(self.suspender.tap))

        # Creation order is render order.
        self.background = Background(self)
        self.ground = Ground(self, config.world_width)
        self.walls = (
            Wall(self, -config.wall_offset),
            Wall(self, config.world_width + config.wall_offset),
        )

        self.screen: Screen | None = None
        self.set_screen(ScreenKind.START)

    def set_screen(self, kind: ScreenKind) -> None:
        if kind is ScreenKind.START:
            screen: Screen = StartScreen(self)
        elif kind is ScreenKind.GAME:
            screen = GameScreen(self, self.high_score)
        else:
            raise ValueError(f"Invalid screen {kind!r}")

        if self.screen is not None:
            self.screen.hide()
        self.screen = screen
        self.simulation.screen = screen
        screen.show()
        logger.debug("screen set to %s", kind.value)

    def game_over(self, score: int) -> None:
        logger.info("game over: score=%d high_score=%d", score, self.high_score)
        if score > self.high_score:
            self.high_score = score
            logger.info("new high score %d", score)
        self.suspender.suspend(
            self.config.game_over_suspend_time, tap_required=True, on_resume=self._restart
        )

    def _restart(self) -> None:
        if self.screen is not None:
            self.screen.hide()
            self.screen.dispose()
        self.screen = None
        self.simulation.screen = None
        self.renderer.camera.reset()
        self.background.reset()
        self.set_screen(ScreenKind.GAME)

    def frame(self, delta: float) -> int:
        """Advance and draw one frame. Returns the fixed increments consumed."""
        steps = self.simulation.step(delta)
        self.renderer.clear(self.config.bg_color)
        self.simulation.render(delta)
        if self.screen is not None:
            self.screen.render(delta)
        self.renderer.flush()
        if self.config.debug:
            self.renderer.draw_debug(self.world.get_bodies())
        return steps

    def dispose(self) -> None:
        if self.screen is not None:
            self.screen.hide()
            self.screen.dispose()
            self.screen = None
            self.simulation.screen = None
        for entity in (self.background, self.ground, *self.walls):
            entity.dispose()
