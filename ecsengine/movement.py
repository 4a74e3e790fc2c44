"""Systems that turn keyboard input into velocity and velocity into movement."""

from __future__ import annotations

from typing import Callable

from .components import ComponentManager
from .data import (
    AnimationComponent,
    Direction,
    DirectionComponent,
    Position,
    SpriteComponent,
    Velocity,
)
from .keyboard import Key
from .systems import System

LEVEL_WIDTH = 2000.0
LEVEL_HEIGHT = 2000.0

# Half of the player's frame size, used to keep the player inside the level.
PLAYER_HALF_WIDTH = 96.0 / 2.0
PLAYER_HALF_HEIGHT = 80.0 / 2.0

PLAYER_SPEED = 300.0

_IDLE_STATES = {
    Direction.UP: "idleUp",
    Direction.DOWN: "idleDown",
    Direction.LEFT: "idle",
    Direction.RIGHT: "idle",
}


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        value = low
    if value > high:
        value = high
    return value


class MovementSystem(System):
    """Applies velocity to position each frame and keeps entities inside the level.

    Requires Position and Velocity on every entity.
    """

    def update(self, components: ComponentManager, dt: float) -> None:
        """Advance every entity by its velocity over dt seconds."""
        for entity in sorted(self.entities):
            pos = components.get_component(entity, Position)
            vel = components.get_component(entity, Velocity)

            pos.x += vel.dx * dt
            pos.y += vel.dy * dt

            pos.x = _clamp(pos.x, PLAYER_HALF_WIDTH, LEVEL_WIDTH - PLAYER_HALF_WIDTH)
            pos.y = _clamp(pos.y, PLAYER_HALF_HEIGHT, LEVEL_HEIGHT - PLAYER_HALF_HEIGHT)


class PlayerInputSystem(System):
    """Sets velocity, facing and animation state of player-controlled entities."""

    def update(
        self,
        components: ComponentManager,
        dt: float,
        is_pressed: Callable[[Key], bool],
    ) -> None:
        """Read the movement keys through is_pressed and steer every entity."""
        move_x = 0.0
        move_y = 0.0
        if is_pressed(Key.A):
            move_x -= 1.0
        if is_pressed(Key.D):
            move_x += 1.0
        if is_pressed(Key.W):
            move_y -= 1.0
        if is_pressed(Key.S):
            move_y += 1.0

        for entity in sorted(self.entities):
            if components.has_component(entity, AnimationComponent):
                direction = components.get_component(entity, DirectionComponent)
                anim = components.get_component(entity, AnimationComponent)
                if move_y < 0:
                    direction.current = Direction.UP
                    anim.current_state = "up"
                elif move_y > 0:
                    direction.current = Direction.DOWN
                    anim.current_state = "down"
                elif move_x != 0:
                    direction.current = Direction.RIGHT
                    anim.current_state = "walk"
                else:
                    anim.current_state = _IDLE_STATES[direction.current]

            velocity = components.get_component(entity, Velocity)
            sprite_comp = components.get_component(entity, SpriteComponent)
            velocity.dx = move_x * PLAYER_SPEED
            velocity.dy = move_y * PLAYER_SPEED
            if velocity.dx < 0:
                sprite_comp.flip_x = True
            elif velocity.dx > 0:
                sprite_comp.flip_x = False