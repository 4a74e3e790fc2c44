"""Keyboard keys, key events and tracking of which keys are held."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Keyboard keys."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    ESCAPE = auto()
    SPACE = auto()
    ENTER = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class EventKind(Enum):
    """Kinds of window event the engine reacts to."""

    CLOSED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A window event, carrying a key for key presses and releases."""

    kind: EventKind
    key: Optional[Key] = None


class InputManager:
    """Remembers which keys are held, from the events it has seen."""

    def __init__(self) -> None:
        self._key_states: dict[Key, bool] = {}

    def handle_event(self, event: KeyEvent) -> None:
        """Record a key press or release; other events are ignored."""
        if event.kind is EventKind.KEY_PRESSED:
            self._key_states[event.key] = True
        elif event.kind is EventKind.KEY_RELEASED:
            self._key_states[event.key] = False

    def is_key_pressed(self, key: Key) -> bool:
        """Return True if the key was pressed and not released since."""
        return self._key_states.get(key, False)