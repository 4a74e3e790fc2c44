# ecsengine

A small 2D game engine built around an entity-component-system design,
drawn with pygame. A player character walks around a tile map with the
W, A, S and D keys, plays directional walk and idle animations, is pushed
back by solid water tiles and is followed by a camera that stays inside a
2000 by 2000 level.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the game

```
ecsengine
```

Without options the command asks `Run in Debug Mode(y/n): `. An answer
starting with `y` turns debug mode on, and any other answer turns it off. In
debug mode every collider is drawn as a red outline. You can skip the
question with `--debug` or `--no-debug`.

`--assets DIR` sets the asset directory. It defaults to `assets` in the
working directory. The directory holds:

- the player sprite sheets `player.png`, `idle_down.png`, `idle_up.png`,
  `walk.png`, `walk_up.png` and `walk_down.png`. Each is a single row of
  eight 96x80 frames. A sheet that fails to load is logged, and that
  animation draws nothing.
- the tilesets `grassSheet.png`, `Water.png`, `dirtSheet.png` and
  `NCWater.png`, cut into 16x16 tiles. A tileset that fails to load stops
  start-up with `TilesetLoadError`.
- the level `maps/level1.txt`. If the level is missing, the error is logged
  and the game starts without tiles.

Close the window to quit.

## Map files

A map is a UTF-8 text file. Each line is one row of tiles, and tokens are
separated by single spaces. A token has the form `tileset:id`, for example
`grass:3` or `water:1`.

- Tiles are numbered row by row across the tileset image.
- Empty tokens, `-` and `-1` leave a cell empty.
- Tokens without a colon, with a non-numeric id or naming an unknown tileset
  are logged and skipped.
- A tile with id 1 is a water tile. It is solid and gets a collider tagged
  `"Tile"`.

`TileMapSystem.load_map(...)` returns the created tile entities in map
order. It raises `OSError` if the file cannot be opened.

## Using the engine as a library

The building blocks work without a window:

```python
from ecsengine.entities import EntityManager
from ecsengine.components import ComponentManager
from ecsengine.data import Position, Velocity
from ecsengine.movement import MovementSystem

entities = EntityManager()
components = ComponentManager()

player = entities.create_entity()
components.add_component(player, Position(100.0, 100.0))
components.add_component(player, Velocity(300.0, 0.0))

movement = MovementSystem()
movement.entities.add(player)
movement.update(components, 0.5)

print(components.get_component(player, Position))  # Position(x=250.0, y=100.0)
```

### Modules

**`ecsengine.data`**
- Component dataclasses: `Position`, `Velocity`, `DirectionComponent`,
  `ColliderComponent`, `AnimationData`, `AnimationComponent`,
  `SpriteComponent` and `TileComponent`.
- The enums `Direction` and `TileType`.
- `Sprite`, which holds a texture, a texture region, an origin, a scale and
  a position.
- `Rect`, with `intersects`, `intersection` and `translated`.

**`ecsengine.entities`**
- `EntityManager` hands out ids 0 to 4999 and reuses destroyed ids first in,
  first out.
- It raises `EntityLimitError` when every id is in use.

**`ecsengine.components`**
- `ComponentManager` stores one component of each type per entity, keyed by
  the component's type.
- `get_component` raises `ComponentNotFoundError` when the entity has no
  component of that type.

**`ecsengine.systems`**
- `System` is the base class. It holds the set of entities a system acts on.
- `SystemManager` registers each system type once and returns it from
  `get_system`.
- Registering a type twice raises `SystemAlreadyRegisteredError`.
  Asking for an unregistered type raises `SystemNotRegisteredError`.

**`ecsengine.keyboard`**
- `Key`, `EventKind` and `KeyEvent`.
- `InputManager` tracks held keys through `handle_event` and
  `is_key_pressed`.

**`ecsengine.movement`**
- `MovementSystem` applies velocity and clamps positions to the level.
- `PlayerInputSystem.update(components, dt, is_pressed)` reads W/A/S/D
  through the given callable. It sets velocity (300 units per second),
  facing, animation state and horizontal flipping.

**`ecsengine.animation`**
- `AnimationSystem` steps sprite-sheet frames.

**`ecsengine.physics`**
- `CollisionSystem` pushes overlapping non-trigger colliders apart along the
  axis of least overlap.
- `TriggerSystem` sets `active = False` on trigger colliders touched by a
  non-trigger collider.

**`ecsengine.camera`**
- `CameraSystem` centres its `View` on the first positioned entity, kept
  inside the level.

**`ecsengine.render`**
- `RenderSystem.update(window, components, debug_mode)` draws onto any
  object with `draw_sprite(sprite)` and `draw_outline(rect, color, thickness)`.
- It draws tiles first, then collider outlines when `debug_mode` is set, then
  the other sprites.

**`ecsengine.tilesets`**
- `Tileset.load` reads an image with pygame.
- `TilesetManager` stores tilesets by name. Adding a name that is already
  taken keeps the first tileset.
- Asking for an unknown name raises `TilesetNotFoundError`.

**`ecsengine.tilemap`**
- `TileMapSystem` turns map files into tile entities.

**`ecsengine.engine`**
- `Engine.setup()` builds everything and returns the player's id.
- `Engine.update(dt)` advances one frame.
- `Engine.run(debug_mode)` opens the window and runs the loop.
- `main()` is the command above.

## What it does not do

The engine has:
- no sound;
- no enemies or other characters besides the player;
- no saving or loading of game state;
- no menus.

Trigger colliders only switch off; nothing else reacts to them. There is
only one level, read from `maps/level1.txt`.