"""Entity base class for simulation objects."""
from __future__ import annotations


class Entity:
    """A simulation object attached to a physics body.

    Subclasses override whichever hooks they need; the defaults do
    nothing. ``step`` runs once per fixed increment while the simulation
    is running, ``render`` once per drawn frame.
    """

    def step(self, dt: float) -> None:
        pass

    def render(self, dt: float) -> None:
        pass

    def begin_contact(self, other: Entity) -> None:
        pass

    def end_contact(self, other: Entity) -> None:
        pass

    def dispose(self) -> None:
        pass
