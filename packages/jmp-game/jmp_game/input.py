"""Input routing: pygame events to tap handlers."""
from __future__ import annotations

from typing import Callable, Protocol

import pygame

TAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


class InputProcessor(Protocol):
    def handle(self, event: pygame.event.Event) -> bool: ...


def is_tap(event: pygame.event.Event) -> bool:
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
        return True
    return event.type == pygame.KEYDOWN and event.key in TAP_KEYS


class InputMultiplexer:
    """Offers each event to processors in order until one consumes it."""

    def __init__(self) -> None:
        self._processors: list[InputProcessor] = []

    def add_processor(self, processor: InputProcessor) -> None:
        self._processors.append(processor)

    def remove_processor(self, processor: InputProcessor) -> None:
        try:
            self._processors.remove(processor)
        except ValueError:
            pass

    @property
    def processors(self) -> tuple[InputProcessor, ...]:
        return tuple(self._processors)

    def handle(self, event: pygame.event.Event) -> bool:
        for processor in list(self._processors):
            if processor.handle(event):
                return True
        return False


class TouchInput:
    """Calls ``on_tap`` for tap events; its return value decides consumption."""

    def __init__(self, on_tap: Callable[[], bool]) -> None:
        self._on_tap = on_tap

    def handle(self, event: pygame.event.Event) -> bool:
        if not is_tap(event):
            return False
        return self._on_tap()
