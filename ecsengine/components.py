"""Per-type component storage keyed by entity."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class ComponentNotFoundError(KeyError):
    """Raised when an entity lacks the requested component."""


class ComponentArray(Generic[T]):
    """Components of one type, each mapped to the entity that owns it."""

    def __init__(self) -> None:
        self._components: dict[int, T] = {}

    def insert(self, entity: int, component: T) -> None:
        """Attach a component to an entity, replacing any earlier one."""
        self._components[entity] = component

    def remove(self, entity: int) -> None:
        """Drop the entity's component if it has one."""
        self._components.pop(entity, None)

    def get(self, entity: int) -> T:
        """Return the entity's component."""
        try:
            return self._components[entity]
        except KeyError:
            raise ComponentNotFoundError(entity) from None

    def has(self, entity: int) -> bool:
        """Return True if the entity has a component here."""
        return entity in self._components

    def entity_destroyed(self, entity: int) -> None:
        """Forget the entity's component."""
        self._components.pop(entity, None)


class ComponentManager:
    """Holds one component array per component type."""

    def __init__(self) -> None:
        self._arrays: dict[type, ComponentArray] = {}

    def _array(self, component_type: type[T]) -> ComponentArray[T]:
        return self._arrays.setdefault(component_type, ComponentArray())

    def add_component(self, entity: int, component: object) -> None:
        """Attach a component, stored under its own type."""
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: int, component_type: type) -> None:
        """Remove the entity's component of the given type."""
        self._array(component_type).remove(entity)

    def get_component(self, entity: int, component_type: type[T]) -> T:
        """Return the entity's component of the given type."""
        return self._array(component_type).get(entity)

    def has_component(self, entity: int, component_type: type) -> bool:
        """Return True if the entity has a component of the given type."""
        return self._array(component_type).has(entity)

    def entity_destroyed(self, entity: int) -> None:
        """Remove every component the entity owns."""
        for array in self._arrays.values():
            array.entity_destroyed(entity)