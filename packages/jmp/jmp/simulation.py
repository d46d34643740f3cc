"""Simulation - fixed-timestep catch-up loop with suspend handling."""
from __future__ import annotations

from typing import Iterator

from jmp.config import SimulationConfig
from jmp.contact import EntityRegistry
from jmp.entity import Entity
from jmp.suspend import SuspendController
from jmp.timer import STEP_TOLERANCE, Timer
from jmp.types import PhysicsWorld, Screen


class Simulation:
    """Advances a physics world and its entities in fixed increments.

    Each drawn frame hands its wall-clock delta to ``step``. The delta is
    capped, added to the lag timer, and then consumed one fixed increment
    at a time until simulated time has caught up. Increments that land
    while suspended advance the suspend countdown instead of the world,
    so pauses are measured in simulated time.
    """

    def __init__(
        self,
        config: SimulationConfig,
        world: PhysicsWorld,
        registry: EntityRegistry,
        suspender: SuspendController | None = None,
    ) -> None:
        self._config = config
        self._world = world
        self._registry = registry
        self._suspender = suspender if suspender is not None else SuspendController()
        self._lag = Timer(tolerance=STEP_TOLERANCE)  # how far the world is behind current time
        self._elapsed = 0.0
        self.screen: Screen | None = None

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def world(self) -> PhysicsWorld:
        return self._world

    @property
    def registry(self) -> EntityRegistry:
        return self._registry

    @property
    def suspender(self) -> SuspendController:
        return self._suspender

    @property
    def lag(self) -> Timer:
        return self._lag

    @property
    def elapsed(self) -> float:
        """Simulated seconds the world has been stepped, excluding suspends."""
        return self._elapsed

    def entities(self) -> Iterator[Entity]:
        """Yield entities attached to world bodies, in body order."""
        for body in list(self._world.get_bodies()):
            entity = self._registry.lookup(body)
            if entity is not None:
                yield entity

    def step(self, delta: float) -> int:
        """Catch the world up by ``delta`` seconds. Returns increments consumed."""
        cfg = self._config
        h = cfg.time_step
        self._lag.add(min(max(delta, 0.0), cfg.max_step_delta))

        steps = 0
        while not self._lag.is_done:
            self._lag.step(h)
            steps += 1

            if self._suspender.suspended:
                self._suspender.advance(h)
                continue

            for entity in list(self.entities()):
                entity.step(h)

            steppable = self.screen.steppable if self.screen is not None else None
            if steppable is not None:
                steppable.step(h)

            self._world.step(h, cfg.velocity_iterations, cfg.position_iterations)
            self._elapsed += h
        return steps

    def render(self, delta: float) -> None:
        for entity in list(self.entities()):
            entity.render(delta)

    def frame(self, delta: float) -> int:
        """Per-frame driver: step with the capped delta, then render."""
        steps = self.step(delta)
        self.render(delta)
        return steps
