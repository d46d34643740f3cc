"""Camera, deferred draw queue, and pygame rendering."""
from __future__ import annotations

from typing import Callable, Iterable

import pygame

from jmp_physics import Body, Box, Circle

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
DEBUG_COLOR: Color = (0, 255, 100)

TEXT_Z = 10


class Camera:
    """Viewport in world units, centred on ``position``. y points up."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.position = (width / 2, height / 2)

    def reset(self) -> None:
        self.position = (self.width / 2, self.height / 2)

    @property
    def bottom(self) -> float:
        return self.position[1] - self.height / 2

    @property
    def top(self) -> float:
        return self.position[1] + self.height / 2

    @property
    def left(self) -> float:
        return self.position[0] - self.width / 2


class BatchQueue:
    """Draw callbacks run in ascending z order, then cleared.

    Calls with equal z keep their insertion order.
    """

    def __init__(self) -> None:
        self._items: list[tuple[int, int, Callable[[], None]]] = []
        self._seq = 0

    def add(self, z: int, fn: Callable[[], None]) -> None:
        self._items.append((z, self._seq, fn))
        self._seq += 1

    def run(self) -> None:
        items = sorted(self._items, key=lambda item: (item[0], item[1]))
        self._items = []
        for _, _, fn in items:
            fn()

    def __len__(self) -> int:
        return len(self._items)


class Renderer:
    """Draws world-space shapes and queued text onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, camera: Camera) -> None:
        self.surface = surface
        self.camera = camera
        self.queue = BatchQueue()
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def scale(self) -> float:
        """Pixels per metre."""
        return self.surface.get_width() / self.camera.width

    def to_pixels(self, x: float, y: float) -> tuple[int, int]:
        s = self.scale
        px = (x - self.camera.left) * s
        py = self.surface.get_height() - (y - self.camera.bottom) * s
        return round(px), round(py)

    def _rect(self, position: tuple[float, float], half: tuple[float, float]) -> pygame.Rect:
        left, top = self.to_pixels(position[0] - half[0], position[1] + half[1])
        s = self.scale
        return pygame.Rect(left, top, max(round(2 * half[0] * s), 1), max(round(2 * half[1] * s), 1))

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_box(self, position: tuple[float, float], half: tuple[float, float], color: Color) -> None:
        pygame.draw.rect(self.surface, color, self._rect(position, half))

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: int = 24,
        color: Color = WHITE,
        align: str = "center",
    ) -> None:
        """Queue text at world position (x, y). ``x`` is the centre unless align is left/right."""

        def draw() -> None:
            font = self._font(size)
            surf = font.render(text, True, color)
            px, py = self.to_pixels(x, y)
            rect = surf.get_rect()
            if align == "left":
                rect.midleft = (px, py)
            elif align == "right":
                rect.midright = (px, py)
            else:
                rect.center = (px, py)
            self.surface.blit(surf, rect)

        self.queue.add(TEXT_Z, draw)

    def draw_debug(self, bodies: Iterable[Body]) -> None:
        for body in bodies:
            shape = body.shape
            if isinstance(shape, Box):
                rect = self._rect(body.position, (shape.half_width, shape.half_height))
                pygame.draw.rect(self.surface, DEBUG_COLOR, rect, 1)
            elif isinstance(shape, Circle):
                radius = max(round(shape.radius * self.scale), 1)
                pygame.draw.circle(self.surface, DEBUG_COLOR, self.to_pixels(*body.position), radius, 1)

    def flush(self) -> None:
        self.queue.run()

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font


class NullRenderer:
    """Headless renderer that records draw calls instead of drawing."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.calls: list[tuple] = []

    def clear(self, color: Color) -> None:
        self.calls.append(("clear", color))

    def draw_box(self, position: tuple[float, float], half: tuple[float, float], color: Color) -> None:
        self.calls.append(("box", position, half, color))

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: int = 24,
        color: Color = WHITE,
        align: str = "center",
    ) -> None:
        self.calls.append(("text", text))

    def draw_debug(self, bodies: Iterable[Body]) -> None:
        self.calls.append(("debug", len(list(bodies))))

    def flush(self) -> None:
        self.calls.append(("flush",))

    def texts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "text"]
