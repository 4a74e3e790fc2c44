"""Systems and the registry that holds one instance of each."""

from __future__ import annotations

from typing import Any, TypeVar


class System:
    """Logic run over a set of entities; subclasses define the behaviour."""

    def __init__(self) -> None:
        self.entities: set[int] = set()


S = TypeVar("S", bound=System)


class SystemAlreadyRegisteredError(ValueError):
    """Raised when a system type is registered twice."""


class SystemNotRegisteredError(KeyError):
    """Raised when asking for a system type that was never registered."""


class SystemManager:
    """Creates systems and looks them up by type."""

    def __init__(self) -> None:
        self._systems: dict[type, System] = {}

    def register_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Build a system of the given type and keep it; each type only once."""
        if system_type in self._systems:
            raise SystemAlreadyRegisteredError(system_type.__name__)
        system = system_type(*args, **kwargs)
        self._systems[system_type] = system
        return system

    def get_system(self, system_type: type[S]) -> S:
        """Return the registered system of the given type."""
        try:
            return self._systems[system_type]  # type: ignore[return-value]
        except KeyError:
            raise SystemNotRegisteredError(system_type.__name__) from None