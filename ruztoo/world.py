"""Entity storage and shared game resources."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

from ruztoo.components import Point
from ruztoo.map import Map

T = TypeVar("T")


@dataclass
class GameLog:
    """Messages shown to the player, oldest first."""

    entries: list[str] = field(default_factory=list)

    def log(self, message: str) -> None:
        self.entries.append(message)


class World:
    """Entities, their components, and the resources the systems share."""

    def __init__(self) -> None:
        self._next_id = 0
        self._alive: set[int] = set()
        self._storages: dict[type, dict[int, Any]] = {}
        self.map = Map(1, 64, 64)
        self.log = GameLog()
        self.rng = random.Random()
        self.player_entity: int | None = None
        self.player_pos = Point(0, 0)
        self.runstate: Any = None
        self.particles: list[Any] = []

    def create_entity(self, *args: Any) -> int:
        """Create an entity holding the given components and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._alive.add(entity)
        for component in args:
            self.insert(entity, component)
        return entity

    def delete_entity(self, entity: int) -> None:
        if entity not in self._alive:
            raise KeyError(f"entity {entity} is not alive")
        self._alive.remove(entity)
        for store in self._storages.values():
            store.pop(entity, None)

    def entities(self) -> list[int]:
        return sorted(self._alive)

    def is_alive(self, entity: int) -> bool:
        return entity in self._alive

    def storage(self, component_type: type[T]) -> dict[int, T]:
        """Return the live mapping of entity to component for a type."""
        return self._storages.setdefault(component_type, {})

    def get(self, entity: int, component_type: type[T]) -> T | None:
        return self._storages.get(component_type, {}).get(entity)

    def insert(self, entity: int, component: Any) -> None:
        if entity not in self._alive:
            raise KeyError(f"entity {entity} is not alive")
        self.storage(type(component))[entity] = component

    def remove(self, entity: int, component_type: type[T]) -> T | None:
        return self._storages.get(component_type, {}).pop(entity, None)

    def join(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, *components)`` for entities holding every given type."""
        stores = [self._storages.get(t, {}) for t in args]
        if stores:
            candidates = sorted(min(stores, key=len))
        else:
            candidates = self.entities()
        for entity in candidates:
            if entity in self._alive and all(entity in s for s in stores):
                yield (entity, *(s[entity] for s in stores))

    def clear(self, component_type: type) -> None:
        self._storages.pop(component_type, None)