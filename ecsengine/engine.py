"""The game engine: wires managers and systems together and runs the main loop."""

from __future__ import annotations

import argparse
import logging
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import pygame

from .animation import AnimationSystem
from .camera import CameraSystem, View
from .components import ComponentManager
from .data import (
    AnimationComponent,
    AnimationData,
    ColliderComponent,
    DirectionComponent,
    Position,
    Rect,
    Sprite,
    SpriteComponent,
    Velocity,
)
from .entities import EntityManager
from .keyboard import EventKind, InputManager, Key, KeyEvent
from .movement import MovementSystem, PlayerInputSystem
from .physics import CollisionSystem, TriggerSystem
from .render import RenderSystem
from .systems import SystemManager
from .tilemap import TileMapSystem
from .tilesets import TilesetManager

logger = logging.getLogger(__name__)

StrPath = Union[str, PathLike]

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "ECS Engine"
BACKGROUND_COLOR = (155, 212, 195)

PLAYER_START = (400.0, 300.0)
FRAME_WIDTH = 96
FRAME_HEIGHT = 80
FRAME_COUNT = 8
PLAYER_SCALE = 3.0

# (state name, texture file, seconds per frame)
_PLAYER_ANIMATIONS = (
    ("idle", "player.png", 0.2),
    ("idleDown", "idle_down.png", 0.2),
    ("idleUp", "idle_up.png", 0.2),
    ("walk", "walk.png", 0.1),
    ("up", "walk_up.png", 0.1),
    ("down", "walk_down.png", 0.1),
)

# (tileset name, image file), all cut into 16x16 tiles
_TILESETS = (
    ("grass", "grassSheet.png"),
    ("water", "Water.png"),
    ("dirt", "dirtSheet.png"),
    ("ncWater", "NCWater.png"),
)
TILE_SIZE = 16
MAP_FILE = Path("maps") / "level1.txt"

_NAMED_KEYS = {
    Key.ESCAPE: "K_ESCAPE",
    Key.SPACE: "K_SPACE",
    Key.ENTER: "K_RETURN",
    Key.LEFT: "K_LEFT",
    Key.RIGHT: "K_RIGHT",
    Key.UP: "K_UP",
    Key.DOWN: "K_DOWN",
}


def _pygame_key_map() -> dict[int, Key]:
    mapping: dict[int, Key] = {}
    for key in Key:
        attr = _NAMED_KEYS.get(key, f"K_{key.name.lower()}")
        mapping[getattr(pygame, attr)] = key
    return mapping


def _parse_debug_answer(answer: str) -> bool:
    """Return True when the first non-blank character of the answer is 'y'."""
    stripped = answer.strip()
    return stripped[:1] == "y"


class _PygameCanvas:
    """Draws sprites and outlines onto a pygame surface as seen through a view."""

    def __init__(self, surface: Any, view: View) -> None:
        self._surface = surface
        self._offset_x = view.center[0] - view.size[0] / 2.0
        self._offset_y = view.center[1] - view.size[1] / 2.0

    def draw_sprite(self, sprite: Sprite) -> None:
        texture = sprite.texture
        if texture is None:
            return
        area = pygame.Rect(*sprite.texture_rect).clip(texture.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        sx, sy = sprite.scale
        width = int(abs(sx) * area.width)
        height = int(abs(sy) * area.height)
        if width <= 0 or height <= 0:
            return
        image = pygame.transform.scale(texture.subsurface(area), (width, height))
        if sx < 0 or sy < 0:
            image = pygame.transform.flip(image, sx < 0, sy < 0)
        ox, oy = sprite.origin
        px, py = sprite.position
        left = px + min(-ox * sx, (area.width - ox) * sx)
        top = py + min(-oy * sy, (area.height - oy) * sy)
        self._surface.blit(image, (left - self._offset_x, top - self._offset_y))

    def draw_outline(
        self, rect: Rect, color: tuple[int, int, int], thickness: float
    ) -> None:
        left = min(rect.left, rect.left + rect.width) - self._offset_x
        top = min(rect.top, rect.top + rect.height) - self._offset_y
        box = pygame.Rect(int(left), int(top), int(abs(rect.width)), int(abs(rect.height)))
        pygame.draw.rect(self._surface, color, box, max(1, round(thickness)))


class Engine:
    """Owns the ECS managers and systems, the player and the game loop."""

    def __init__(
        self,
        asset_dir: StrPath = "assets",
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.asset_dir = Path(asset_dir)
        self.width = width
        self.height = height
        self.input = InputManager()

        self.entity_manager: Optional[EntityManager] = None
        self.component_manager: Optional[ComponentManager] = None
        self.system_manager: Optional[SystemManager] = None
        self.tileset_manager: Optional[TilesetManager] = None

        self.render_system: Optional[RenderSystem] = None
        self.movement_system: Optional[MovementSystem] = None
        self.input_system: Optional[PlayerInputSystem] = None
        self.animation_system: Optional[AnimationSystem] = None
        self.collision_system: Optional[CollisionSystem] = None
        self.trigger_system: Optional[TriggerSystem] = None
        self.camera_system: Optional[CameraSystem] = None
        self.tile_map_system: Optional[TileMapSystem] = None

        self.player: Optional[int] = None

    def _load_texture(self, filename: str) -> Any:
        path = self.asset_dir / filename
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            logger.error("Failed to load texture %s: %s", path, exc)
            return None

    def setup(self) -> int:
        """Build managers and systems, create the player and load the map.

        Returns the player's entity ID.
        """
        self.entity_manager = EntityManager()
        self.component_manager = ComponentManager()
        self.system_manager = SystemManager()
        self.tileset_manager = TilesetManager()

        systems = self.system_manager
        self.render_system = systems.register_system(RenderSystem)
        self.movement_system = systems.register_system(MovementSystem)
        self.input_system = systems.register_system(PlayerInputSystem)
        self.animation_system = systems.register_system(AnimationSystem)
        self.collision_system = systems.register_system(CollisionSystem)
        self.trigger_system = systems.register_system(TriggerSystem)
        self.camera_system = systems.register_system(
            CameraSystem, float(self.width), float(self.height)
        )
        self.tile_map_system = systems.register_system(TileMapSystem)

        animations = {
            state: AnimationData(
                texture=self._load_texture(filename),
                frame_count=FRAME_COUNT,
                frame_width=FRAME_WIDTH,
                frame_height=FRAME_HEIGHT,
                frame_time=frame_time,
            )
            for state, filename, frame_time in _PLAYER_ANIMATIONS
        }
        anim = AnimationComponent(animations=animations, current_state="idle")

        player_sprite = Sprite(
            texture=animations["idle"].texture,
            texture_rect=(0, 0, FRAME_WIDTH, FRAME_HEIGHT),
            origin=(FRAME_WIDTH / 2.0, FRAME_HEIGHT / 2.0),
            scale=(PLAYER_SCALE, PLAYER_SCALE),
        )

        cm = self.component_manager
        player = self.entity_manager.create_entity()
        cm.add_component(player, Position(*PLAYER_START))
        cm.add_component(player, Velocity(0.0, 0.0))
        cm.add_component(player, SpriteComponent(sprite=player_sprite))
        cm.add_component(player, anim)
        cm.add_component(player, DirectionComponent())
        cm.add_component(
            player,
            ColliderComponent(bounds=Rect(-80 / 2.0, -70 / 2.0, 80, 96), is_static=False),
        )

        for system in (
            self.movement_system,
            self.render_system,
            self.input_system,
            self.animation_system,
            self.collision_system,
            self.trigger_system,
            self.camera_system,
        ):
            system.entities.add(player)

        for name, filename in _TILESETS:
            self.tileset_manager.add_tileset(
                name, self.asset_dir / filename, TILE_SIZE, TILE_SIZE
            )

        map_path = self.asset_dir / MAP_FILE
        try:
            self.tile_map_system.load_map(
                map_path,
                cm,
                self.entity_manager,
                self.tileset_manager,
                self.render_system,
                self.collision_system,
            )
        except OSError as exc:
            logger.error("Failed to open map file: %s (%s)", map_path, exc)

        self.player = player
        return player

    def update(self, dt: float) -> None:
        """Run one simulation step of dt seconds."""
        if self.component_manager is None:
            raise RuntimeError("engine is not set up")
        cm = self.component_manager
        self.input_system.update(cm, dt, self.input.is_key_pressed)
        self.movement_system.update(cm, dt)
        self.animation_system.update(cm, dt)
        self.collision_system.update(cm, dt)
        self.trigger_system.update(cm, dt)
        self.camera_system.update(cm, dt)

    def _process_events(self, key_map: dict[int, Key]) -> bool:
        """Feed window events to the input manager; return False once closed."""
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                key = key_map.get(event.key)
                if key is None:
                    continue
                kind = (
                    EventKind.KEY_PRESSED
                    if event.type == pygame.KEYDOWN
                    else EventKind.KEY_RELEASED
                )
                self.input.handle_event(KeyEvent(kind, key))
        return running

    def _render(self, window: Any, debug_mode: bool) -> None:
        window.fill(BACKGROUND_COLOR)
        canvas = _PygameCanvas(window, self.camera_system.view)
        self.render_system.update(canvas, self.component_manager, debug_mode)
        pygame.display.flip()

    def run(self, debug_mode: bool) -> None:
        """Set up the world, open the window and loop until it is closed."""
        self.setup()
        pygame.init()
        try:
            window = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            key_map = _pygame_key_map()
            while True:
                dt = clock.tick() / 1000.0
                if not self._process_events(key_map):
                    break
                self.update(dt)
                self._render(window, debug_mode)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game; asks whether to draw collider outlines unless told."""
    parser = argparse.ArgumentParser(description="Run the game.")
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="draw collider outlines",
    )
    parser.add_argument("--assets", default="assets", help="asset directory")
    args = parser.parse_args(argv)

    debug_mode = args.debug
    if debug_mode is None:
        try:
            answer = input("Run in Debug Mode(y/n): ")
        except EOFError:
            answer = ""
        debug_mode = _parse_debug_answer(answer)

    Engine(asset_dir=args.assets).run(debug_mode)
    return 0