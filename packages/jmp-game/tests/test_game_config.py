"""Tests for GameConfig and CLI argument parsing."""
from __future__ import annotations

import math

import pytest
from jmp import SimulationConfig
from jmp_game.__main__ import parse_args
from jmp_game.config import GameConfig


def test_world_height_follows_aspect():
    cfg = GameConfig(window_size=(480, 800))
    assert math.isclose(cfg.world_height, 20.0 * 800 / 480)


def test_simulation_config_defaults():
    assert GameConfig().simulation_config() == SimulationConfig()


def test_simulation_config_forwards_fields():
    cfg = GameConfig(time_step=0.01, max_step_delta=0.1, gravity=9.8)
    sim = cfg.simulation_config()
    assert sim.time_step == 0.01
    assert sim.max_step_delta == 0.1
    assert sim.gravity == 9.8


def test_from_args():
    args = parse_args(["--width", "300", "--height", "600", "--seed", "3", "--debug"])
    cfg = GameConfig.from_args(args)
    assert cfg.window_size == (300, 600)
    assert cfg.seed == 3
    assert cfg.debug


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.width, args.height, args.fps) == (480, 800, 60)
    assert args.log_level == "WARNING"
    assert not args.debug


@pytest.mark.parametrize(
    "kwargs",
    [
        {"window_size": (0, 100)},
        {"fps": 0},
        {"block_interval": 0.0},
        {"block_min_half": 2.0, "block_max_half": 1.0},
        {"time_step": 0.0},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs).simulation_config()
