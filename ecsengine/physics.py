"""Collision resolution and trigger detection between colliders."""

from __future__ import annotations

from .components import ComponentManager
from .data import ColliderComponent, Position, Rect
from .systems import System


def _world_bounds(collider: ColliderComponent, pos: Position) -> Rect:
    return collider.bounds.translated(pos.x, pos.y)


def _has_body(components: ComponentManager, entity: int) -> bool:
    return components.has_component(entity, ColliderComponent) and components.has_component(
        entity, Position
    )


class CollisionSystem(System):
    """Pushes overlapping solid colliders apart along the axis of least overlap."""

    def update(self, components: ComponentManager, dt: float) -> None:
        """Resolve collisions among this system's entities."""
        ordered = sorted(self.entities)
        for a in ordered:
            if not _has_body(components, a):
                continue
            a_collider = components.get_component(a, ColliderComponent)
            a_pos = components.get_component(a, Position)
            a_bounds = _world_bounds(a_collider, a_pos)

            for b in ordered:
                if a == b or not _has_body(components, b):
                    continue
                b_collider = components.get_component(b, ColliderComponent)
                b_pos = components.get_component(b, Position)
                b_bounds = _world_bounds(b_collider, b_pos)

                overlap = a_bounds.intersection(b_bounds)
                if overlap is None or a_collider.is_trigger or b_collider.is_trigger:
                    continue

                if overlap.width < overlap.height:
                    if a_bounds.left < b_bounds.left:
                        a_pos.x -= overlap.width
                    else:
                        a_pos.x += overlap.width
                else:
                    if a_bounds.top < b_bounds.top:
                        a_pos.y -= overlap.height
                    else:
                        a_pos.y += overlap.height


class TriggerSystem(System):
    """Deactivates trigger colliders that a solid collider touches."""

    def update(self, components: ComponentManager, dt: float) -> None:
        """Check every trigger against every non-trigger collider."""
        ordered = sorted(self.entities)
        for a in ordered:
            if not _has_body(components, a):
                continue
            a_col = components.get_component(a, ColliderComponent)
            a_pos = components.get_component(a, Position)
            if not a_col.is_trigger:
                continue
            a_bounds = _world_bounds(a_col, a_pos)

            for b in ordered:
                if a == b or not _has_body(components, b):
                    continue
                b_col = components.get_component(b, ColliderComponent)
                b_pos = components.get_component(b, Position)
                if b_col.is_trigger:
                    continue
                if a_bounds.intersects(_world_bounds(b_col, b_pos)):
                    a_col.active = False