"""Entity registry and contact dispatch."""
from __future__ import annotations

import logging
from typing import Iterator

from jmp.entity import Entity
from jmp.types import Body, Contact

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Maps physics body ids to the entities that own them."""

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}

    def register(self, body: Body, entity: Entity) -> None:
        self._entities[body.id] = entity
        logger.debug("registered %s on body %d", type(entity).__name__, body.id)

    def unregister(self, body: Body) -> None:
        self._entities.pop(body.id, None)

    def lookup(self, body: Body) -> Entity | None:
        return self._entities.get(body.id)

    def clear(self) -> None:
        self._entities.clear()

    def __contains__(self, body: object) -> bool:
        body_id = getattr(body, "id", None)
        return body_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))


class EntityContactListener:
    """Forwards world contact events to both entities involved.

    Contacts where either body has no registered entity (static scenery,
    bodies already unregistered) are ignored.
    """

    def __init__(self, registry: EntityRegistry) -> None:
        self._registry = registry

    def _resolve(self, contact: Contact) -> tuple[Entity, Entity] | None:
        a = self._registry.lookup(contact.body_a)
        if a is None:
            return None
        b = self._registry.lookup(contact.body_b)
        if b is None:
            return None
        return a, b

    def begin_contact(self, contact: Contact) -> None:
        pair = self._resolve(contact)
        if pair is None:
            return
        a, b = pair
        a.begin_contact(b)
        b.begin_contact(a)

    def end_contact(self, contact: Contact) -> None:
        pair = self._resolve(contact)
        if pair is None:
            return
        a, b = pair
        a.end_contact(b)
        b.end_contact(a)
