"""Game configuration dataclass."""
from __future__ import annotations

import argparse
from dataclasses import dataclass

from jmp import SimulationConfig


@dataclass(frozen=True)
class GameConfig:
    """Immutable game tuning. Distances in metres, times in seconds.

    The simulation fields are forwarded to ``SimulationConfig``; the rest
    is read by the app, screens, and entities.
    """

    world_width: float = 20.0
    gravity: float = 25.0
    time_step: float = 1 / 300
    max_step_delta: float = 0.25
    velocity_iterations: int = 6
    position_iterations: int = 2

    game_over_suspend_time: float = 0.5
    wall_offset: float = 0.05
    ground_height: float = 1.0
    run_speed: float = 6.0
    jump_speed: float = 14.0
    block_interval: float = 1.2
    block_min_half: float = 0.5
    block_max_half: float = 1.2

    window_size: tuple[int, int] = (480, 800)
    fps: int = 60
    bg_color: tuple[int, int, int] = (0x00, 0x1E, 0x21)
    seed: int | None = None
    debug: bool = False

    def __post_init__(self) -> None:
        if self.window_size[0] <= 0 or self.window_size[1] <= 0:
            raise ValueError("window_size must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.block_interval <= 0:
            raise ValueError("block_interval must be positive")
        if not 0 < self.block_min_half <= self.block_max_half:
            raise ValueError("block sizes must satisfy 0 < min <= max")

    @property
    def world_height(self) -> float:
        w, h = self.window_size
        return self.world_width * h / w

    def simulation_config(self) -> SimulationConfig:
        return SimulationConfig(
            world_width=self.world_width,
            gravity=self.gravity,
            time_step=self.time_step,
            max_step_delta=self.max_step_delta,
            velocity_iterations=self.velocity_iterations,
            position_iterations=self.position_iterations,
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> GameConfig:
        return cls(
            window_size=(args.width, args.height),
            fps=args.fps,
            seed=args.seed,
            debug=args.debug,
        )
