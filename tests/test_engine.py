import io

import pygame
import pytest

from ecsengine.data import (
    AnimationComponent,
    ColliderComponent,
    Direction,
    DirectionComponent,
    Position,
    Rect,
    SpriteComponent,
    TileComponent,
    TileType,
    Velocity,
)
from ecsengine.engine import Engine, _parse_debug_answer, main
from ecsengine.keyboard import EventKind, Key, KeyEvent
from ecsengine.tilesets import TilesetLoadError

ANIMATION_FILES = [
    "player.png",
    "idle_down.png",
    "idle_up.png",
    "walk.png",
    "walk_up.png",
    "walk_down.png",
]
TILESET_FILES = ["grassSheet.png", "Water.png", "dirtSheet.png", "NCWater.png"]


def make_assets(root, map_text="grass:0 water:1\n", skip=()):
    root.mkdir(parents=True, exist_ok=True)
    for name in ANIMATION_FILES:
        if name not in skip:
            pygame.image.save(pygame.Surface((768, 80)), str(root / name))
    for name in TILESET_FILES:
        if name not in skip:
            pygame.image.save(pygame.Surface((64, 32)), str(root / name))
    if map_text is not None:
        (root / "maps").mkdir(exist_ok=True)
        (root / "maps" / "level1.txt").write_text(map_text)
    return root


@pytest.fixture
def engine(tmp_path):
    eng = Engine(asset_dir=make_assets(tmp_path / "assets"))
    eng.setup()
    return eng


def test_setup_creates_player_at_start(engine):
    cm = engine.component_manager
    assert engine.player == 0
    assert cm.get_component(engine.player, Position) == Position(400.0, 300.0)
    assert cm.get_component(engine.player, Velocity) == Velocity(0.0, 0.0)
    assert cm.get_component(engine.player, DirectionComponent).current is Direction.DOWN


def test_player_collider_and_sprite(engine):
    cm = engine.component_manager
    collider = cm.get_component(engine.player, ColliderComponent)
    assert collider.bounds == Rect(-40.0, -35.0, 80.0, 96.0)
    assert collider.is_static is False
    sprite = cm.get_component(engine.player, SpriteComponent).sprite
    assert sprite.texture_rect == (0, 0, 96, 80)
    assert sprite.scale == (3.0, 3.0)


def test_player_animations_loaded(engine):
    anim = engine.component_manager.get_component(engine.player, AnimationComponent)
    assert set(anim.animations) == {"idle", "idleDown", "idleUp", "walk", "up", "down"}
    assert anim.animations["walk"].frame_time == pytest.approx(0.1)
    assert anim.animations["idle"].frame_time == pytest.approx(0.2)
    assert all(data.texture is not None for data in anim.animations.values())


def test_player_registered_with_systems(engine):
    for system in (
        engine.movement_system,
        engine.input_system,
        engine.animation_system,
        engine.trigger_system,
        engine.camera_system,
    ):
        assert engine.player in system.entities
    assert engine.player not in engine.tile_map_system.entities


def test_map_tiles_created(engine):
    cm = engine.component_manager
    tiles = sorted(engine.render_system.entities - {engine.player})
    assert len(tiles) == 2
    grass, water = tiles
    assert cm.get_component(grass, TileComponent).type is TileType.GRASS
    assert cm.get_component(water, TileComponent).type is TileType.WATER
    assert water in engine.collision_system.entities
    assert grass not in engine.collision_system.entities


def test_missing_map_leaves_only_player(tmp_path):
    eng = Engine(asset_dir=make_assets(tmp_path / "assets", map_text=None))
    player = eng.setup()
    assert eng.render_system.entities == {player}


def test_missing_tileset_raises(tmp_path):
    eng = Engine(asset_dir=make_assets(tmp_path / "assets", skip={"Water.png"}))
    with pytest.raises(TilesetLoadError):
        eng.setup()


def test_missing_animation_texture_tolerated(tmp_path):
    eng = Engine(asset_dir=make_assets(tmp_path / "assets", skip={"walk_up.png"}))
    player = eng.setup()
    anim = eng.component_manager.get_component(player, AnimationComponent)
    assert anim.animations["up"].texture is None
    assert anim.animations["down"].texture is not None


def test_update_without_input_idles(engine):
    engine.update(0.1)
    cm = engine.component_manager
    assert cm.get_component(engine.player, Position) == Position(400.0, 300.0)
    anim = cm.get_component(engine.player, AnimationComponent)
    assert anim.current_state == "idleDown"
    assert anim.previous_state == "idleDown"


def test_update_moves_right_when_d_held(engine):
    engine.input.handle_event(KeyEvent(EventKind.KEY_PRESSED, Key.D))
    engine.update(0.1)
    cm = engine.component_manager
    pos = cm.get_component(engine.player, Position)
    assert pos.x > 400.0
    assert pos.y == 300.0
    assert cm.get_component(engine.player, AnimationComponent).current_state == "walk"
    assert cm.get_component(engine.player, DirectionComponent).current is Direction.RIGHT


def test_update_left_flips_sprite_and_release_stops(engine):
    cm = engine.component_manager
    engine.input.handle_event(KeyEvent(EventKind.KEY_PRESSED, Key.A))
    engine.update(0.1)
    assert cm.get_component(engine.player, SpriteComponent).flip_x is True
    moved_x = cm.get_component(engine.player, Position).x
    assert moved_x < 400.0

    engine.input.handle_event(KeyEvent(EventKind.KEY_RELEASED, Key.A))
    engine.update(0.1)
    assert cm.get_component(engine.player, Velocity) == Velocity(0.0, 0.0)
    assert cm.get_component(engine.player, Position).x == moved_x


def test_camera_follows_player_inside_level(engine):
    engine.update(0.0)
    assert engine.camera_system.view.center == (400.0, 300.0)
    assert engine.camera_system.view.size == (800.0, 600.0)


def test_update_before_setup_raises(tmp_path):
    with pytest.raises(RuntimeError):
        Engine(asset_dir=tmp_path).update(0.1)


def test_main_with_missing_assets_raises(tmp_path):
    with pytest.raises(TilesetLoadError):
        main(["--debug", "--assets", str(tmp_path / "nowhere")])


def test_main_prompts_when_debug_not_given(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    with pytest.raises(TilesetLoadError):
        main(["--assets", str(tmp_path / "nowhere")])


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("  y", True), ("yes", True), ("n", False), ("", False), ("Y", False)],
)
def test_parse_debug_answer(answer, expected):
    assert _parse_debug_answer(answer) is expected