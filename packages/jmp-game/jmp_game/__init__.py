"""jmp-game - the arcade game built on the jmp simulation core."""
from __future__ import annotations

from jmp_game.app import Jmp
from jmp_game.config import GameConfig
from jmp_game.entities import Background, Block, Ground, Player, Wall
from jmp_game.input import InputMultiplexer, TouchInput, is_tap
from jmp_game.render import BatchQueue, Camera, NullRenderer, Renderer
from jmp_game.screens import GameScreen, Screen, ScreenKind, StartScreen

__all__ = [
    "Background",
    "BatchQueue",
    "Block",
    "Camera",
    "GameConfig",
    "GameScreen",
    "Ground",
    "InputMultiplexer",
    "Jmp",
    "NullRenderer",
    "Player",
    "Renderer",
    "Screen",
    "ScreenKind",
    "StartScreen",
    "TouchInput",
    "Wall",
    "is_tap",
]
