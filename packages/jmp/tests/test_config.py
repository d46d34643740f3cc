"""Tests for SimulationConfig defaults and validation."""

import dataclasses

import pytest
from jmp.config import SimulationConfig


def test_defaults():
    cfg = SimulationConfig()
    assert cfg.world_width == 20.0
    assert cfg.gravity == 25.0
    assert abs(cfg.time_step - 1 / 300) < 1e-12
    assert cfg.max_step_delta == 0.25
    assert cfg.velocity_iterations == 6
    assert cfg.position_iterations == 2


def test_frozen():
    cfg = SimulationConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.time_step = 0.1  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"world_width": 0.0},
        {"time_step": 0.0},
        {"time_step": -0.01},
        {"time_step": 0.5, "max_step_delta": 0.25},
        {"velocity_iterations": 0},
        {"position_iterations": -1},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)
