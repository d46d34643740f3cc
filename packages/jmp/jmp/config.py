"""Simulation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable tuning for the fixed-timestep simulation.

    Attributes:
        world_width: Visible world width in metres.
        gravity: Downward acceleration in m/s^2.
        time_step: Fixed increment advanced per physics step, in seconds.
        max_step_delta: Cap applied to each frame delta before it is
            accumulated, bounding catch-up work after a stall.
        velocity_iterations: Solver velocity iterations per step.
        position_iterations: Solver position iterations per step.
    """

    world_width: float = 20.0
    gravity: float = 25.0
    time_step: float = 1 / 300
    max_step_delta: float = 0.25
    velocity_iterations: int = 6
    position_iterations: int = 2

    def __post_init__(self) -> None:
        if self.world_width <= 0:
            raise ValueError("world_width must be positive")
        if self.time_step <= 0:
            raise ValueError("time_step must be positive")
        if self.max_step_delta < self.time_step:
            raise ValueError("max_step_delta must be at least time_step")
        if self.velocity_iterations <= 0 or self.position_iterations <= 0:
            raise ValueError("solver iterations must be positive")
