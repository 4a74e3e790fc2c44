"""Allocation and recycling of entity identifiers."""

from __future__ import annotations

from collections import deque

MAX_ENTITIES = 5000


class EntityLimitError(RuntimeError):
    """Raised when no entity identifier is left to hand out."""


class EntityManager:
    """Hands out entity IDs and takes them back for reuse, first in first out."""

    def __init__(self) -> None:
        self._available: deque[int] = deque(range(MAX_ENTITIES))
        self._alive: set[int] = set()

    def create_entity(self) -> int:
        """Return a fresh entity ID, reusing recycled ones in the order they came back."""
        if not self._available:
            raise EntityLimitError(f"all {MAX_ENTITIES} entities are in use")
        entity = self._available.popleft()
        self._alive.add(entity)
        return entity

    def destroy_entity(self, entity: int) -> None:
        """Mark an entity as dead and queue its ID for reuse."""
        if not 0 <= entity < MAX_ENTITIES:
            raise ValueError(f"entity {entity} is out of range")
        self._alive.discard(entity)
        self._available.append(entity)

    def is_alive(self, entity: int) -> bool:
        """Return True if the entity has been created and not destroyed."""
        return entity in self._alive