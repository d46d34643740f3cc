"""Shared protocols and errors for the jmp simulation core."""
from __future__ import annotations

from typing import Protocol, Sequence


class SuspendError(RuntimeError):
    """Raised when a suspend is requested while another one is pending."""


class Body(Protocol):
    """A physics body. Only its stable id is needed for entity lookup."""

    @property
    def id(self) -> int: ...


class Contact(Protocol):
    body_a: Body
    body_b: Body


class PhysicsWorld(Protocol):
    def step(
        self, dt: float, velocity_iterations: int, position_iterations: int
    ) -> None: ...
    def get_bodies(self) -> Sequence[Body]: ...


class Steppable(Protocol):
    """Something advanced once per fixed increment."""

    def step(self, dt: float) -> None: ...


class Screen(Protocol):
    """The active screen as seen by the simulation loop.

    Screens that need per-increment updates return themselves (or a
    helper) from ``steppable``; all others return None.
    """

    @property
    def steppable(self) -> Steppable | None: ...

