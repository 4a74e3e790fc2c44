"""Drawing of tiles, sprites and debug collider outlines."""

from __future__ import annotations

from typing import Protocol

from .components import ComponentManager
from .data import ColliderComponent, Position, Rect, Sprite, SpriteComponent, TileComponent
from .systems import System

DEBUG_OUTLINE_COLOR = (255, 0, 0)
DEBUG_OUTLINE_THICKNESS = 1.0


class Canvas(Protocol):
    """Something sprites and outlines can be drawn onto."""

    def draw_sprite(self, sprite: Sprite) -> None:
        """Draw a sprite at its position."""

    def draw_outline(
        self, rect: Rect, color: tuple[int, int, int], thickness: float
    ) -> None:
        """Draw the unfilled outline of a rectangle."""


class RenderSystem(System):
    """Draws tiles first, then collider outlines in debug mode, then other sprites."""

    def update(
        self, window: Canvas, components: ComponentManager, debug_mode: bool
    ) -> None:
        """Draw every entity of this system onto the window."""
        ordered = sorted(self.entities)

        for entity in ordered:
            if components.has_component(entity, TileComponent):
                pos = components.get_component(entity, Position)
                tile = components.get_component(entity, TileComponent)
                tile.sprite.position = (pos.x, pos.y)
                window.draw_sprite(tile.sprite)

        if debug_mode:
            for entity in ordered:
                if components.has_component(entity, ColliderComponent):
                    collider = components.get_component(entity, ColliderComponent)
                    pos = components.get_component(entity, Position)
                    window.draw_outline(
                        collider.bounds.translated(pos.x, pos.y),
                        DEBUG_OUTLINE_COLOR,
                        DEBUG_OUTLINE_THICKNESS,
                    )

        for entity in ordered:
            if components.has_component(
                entity, SpriteComponent
            ) and not components.has_component(entity, TileComponent):
                sprite_comp = components.get_component(entity, SpriteComponent)
                pos = components.get_component(entity, Position)
                sprite_comp.sprite.position = (pos.x, pos.y)
                window.draw_sprite(sprite_comp.sprite)