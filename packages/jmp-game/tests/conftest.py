"""Shared fixtures: a headless app with a recording renderer."""
from __future__ import annotations

import os
from typing import Callable

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
import pytest  # noqa: E402
from jmp_game.app import Jmp  # noqa: E402
from jmp_game.config import GameConfig  # noqa: E402
from jmp_game.render import Camera, NullRenderer  # noqa: E402


def _make_app(**overrides) -> Jmp:
    overrides.setdefault("seed", 1)
    config = GameConfig(**overrides)
    renderer = NullRenderer(Camera(config.world_width, config.world_height))
    return Jmp(config, renderer)


def _run(app: Jmp, seconds: float, delta: float = 0.02) -> None:
    for _ in range(round(seconds / delta)):
        app.frame(delta)


@pytest.fixture
def make_app() -> Callable[..., Jmp]:
    return _make_app


@pytest.fixture
def app() -> Jmp:
    return _make_app()


@pytest.fixture
def run() -> Callable[..., None]:
    return _run


@pytest.fixture
def tap() -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
