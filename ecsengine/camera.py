"""A camera that follows the player within the level bounds."""

from __future__ import annotations

from dataclasses import dataclass

from .components import ComponentManager
from .data import Position
from .movement import LEVEL_HEIGHT, LEVEL_WIDTH
from .systems import System


@dataclass
class View:
    """The visible region of the world: its size and where it is centred."""

    size: tuple[float, float] = (0.0, 0.0)
    center: tuple[float, float] = (0.0, 0.0)


class CameraSystem(System):
    """Centres the view on the first tracked entity, kept inside the level."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__()
        self.view = View(size=(float(width), float(height)), center=(0.0, 0.0))

    def update(self, components: ComponentManager, dt: float) -> None:
        """Move the view to follow the first entity that has a position."""
        for entity in sorted(self.entities):
            if not components.has_component(entity, Position):
                continue
            pos = components.get_component(entity, Position)
            half_width = self.view.size[0] / 2.0
            half_height = self.view.size[1] / 2.0

            target_x = pos.x
            if target_x < half_width:
                target_x = half_width
            if target_x > LEVEL_WIDTH - half_width:
                target_x = LEVEL_WIDTH - half_width

            target_y = pos.y
            if target_y < half_height:
                target_y = half_height
            if target_y > LEVEL_HEIGHT - half_height:
                target_y = LEVEL_HEIGHT - half_height

            self.view.center = (target_x, target_y)
            break