"""Component data types and the small geometry helpers they rely on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _extent(self) -> tuple[float, float, float, float]:
        """Return (min_x, max_x, min_y, max_y), tolerating negative sizes."""
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            max(self.left, right),
            min(self.top, bottom),
            max(self.top, bottom),
        )

    def intersection(self, other: Rect) -> Optional[Rect]:
        """Return the overlapping rectangle, or None when the two do not overlap."""
        a_min_x, a_max_x, a_min_y, a_max_y = self._extent()
        b_min_x, b_max_x, b_min_y, b_max_y = other._extent()
        left = max(a_min_x, b_min_x)
        top = max(a_min_y, b_min_y)
        right = min(a_max_x, b_max_x)
        bottom = min(a_max_y, b_max_y)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap with a non-empty area."""
        return self.intersection(other) is not None

    def translated(self, dx: float, dy: float) -> Rect:
        """Return a copy of this rectangle moved by (dx, dy)."""
        return Rect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass
class Sprite:
    """Drawable state: texture, the region of it shown, and its transform."""

    texture: Any = None
    texture_rect: tuple[int, int, int, int] = (0, 0, 0, 0)
    origin: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)
    position: tuple[float, float] = (0.0, 0.0)


@dataclass
class Position:
    """World position of an entity."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    """Velocity of an entity in units per second."""

    dx: float = 0.0
    dy: float = 0.0


class Direction(Enum):
    """Facing direction of an entity."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass
class DirectionComponent:
    """The direction an entity currently faces; down by default."""

    current: Direction = Direction.DOWN


@dataclass
class ColliderComponent:
    """Collision box, local to the entity's position."""

    bounds: Rect = field(default_factory=Rect)
    is_static: bool = False
    is_trigger: bool = False
    tag: str = ""
    active: bool = True


class TileType(Enum):
    """Kinds of map tile."""

    EMPTY = auto()
    GRASS = auto()
    WATER = auto()
    NC_WATER = auto()
    WALL = auto()


@dataclass
class AnimationData:
    """One animation: a single-row sprite sheet cycled frame by frame."""

    texture: Any
    frame_count: int
    frame_width: int
    frame_height: int
    frame_time: float
    current_frame: int = 0


@dataclass
class AnimationComponent:
    """Named animations of an entity and the playback state."""

    animations: dict[str, AnimationData] = field(default_factory=dict)
    current_state: str = "idle"
    previous_state: str = "idle"
    current_frame: int = 0
    elapsed_time: float = 0.0


@dataclass
class SpriteComponent:
    """A sprite to draw at the entity's position."""

    sprite: Sprite = field(default_factory=Sprite)
    flip_x: bool = False


@dataclass
class TileComponent:
    """A map tile's sprite and properties."""

    sprite: Sprite = field(default_factory=Sprite)
    type: TileType = TileType.EMPTY
    is_solid: bool = False
    is_animated: bool = False
    tile_id: int = -1