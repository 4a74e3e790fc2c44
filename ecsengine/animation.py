"""Sprite-sheet animation playback."""

from __future__ import annotations

import logging

from .components import ComponentManager
from .data import AnimationComponent, SpriteComponent
from .systems import System

logger = logging.getLogger(__name__)

SPRITE_SCALE = 3.0


class AnimationSystem(System):
    """Cycles each entity's sprite through the frames of its current animation."""

    def update(self, components: ComponentManager, dt: float) -> None:
        """Advance animations by dt seconds and update the sprites to match."""
        for entity in sorted(self.entities):
            anim = components.get_component(entity, AnimationComponent)
            sprite_comp = components.get_component(entity, SpriteComponent)
            sprite = sprite_comp.sprite

            data = anim.animations.get(anim.current_state)
            if data is None:
                logger.warning("Missing animation state: %s", anim.current_state)
                continue

            if anim.current_state != anim.previous_state:
                anim.previous_state = anim.current_state
                anim.current_frame = 0
                anim.elapsed_time = 0.0
                sprite.texture = data.texture

            anim.elapsed_time += dt
            if anim.elapsed_time >= data.frame_time:
                anim.elapsed_time = 0.0
                anim.current_frame = (anim.current_frame + 1) % data.frame_count

            # Sprite sheets are a single row of frames.
            sprite.texture_rect = (
                anim.current_frame * data.frame_width,
                0,
                data.frame_width,
                data.frame_height,
            )

            x_scale = -SPRITE_SCALE if sprite_comp.flip_x else SPRITE_SCALE
            sprite.scale = (x_scale, SPRITE_SCALE)
            sprite.origin = (data.frame_width / 2.0, data.frame_height / 2.0)