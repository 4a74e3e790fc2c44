"""Loading of tile maps from text files into tile entities."""

from __future__ import annotations

import logging
import re
from os import PathLike
from typing import Union

from .components import ComponentManager
from .data import ColliderComponent, Position, Rect, Sprite, TileComponent, TileType
from .entities import EntityManager
from .physics import CollisionSystem
from .render import RenderSystem
from .systems import System
from .tilesets import TilesetManager

logger = logging.getLogger(__name__)

StrPath = Union[str, PathLike]

_EMPTY_TOKENS = {"", "-", "-1"}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TILE_TYPES = {
    0: TileType.GRASS,
    1: TileType.WATER,
    2: TileType.WALL,
}


def _parse_tile_id(text: str) -> int:
    """Read the integer at the start of text; anything after it is ignored."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{value} is out of range")
    return value


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient and remainder with the quotient rounded toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


class TileMapSystem(System):
    """Builds tile entities from a map file of "tileset:id" tokens."""

    def __init__(self) -> None:
        super().__init__()
        self.max_tile_count = 1000

    @staticmethod
    def tile_type_from_id(tile_id: int) -> TileType:
        """Return the kind of tile a tile ID stands for."""
        return _TILE_TYPES.get(tile_id, TileType.EMPTY)

    def load_map(
        self,
        filename: StrPath,
        components: ComponentManager,
        entity_manager: EntityManager,
        tileset_manager: TilesetManager,
        render_system: RenderSystem,
        collision_system: CollisionSystem,
        tile_scale: float = 3.0,
    ) -> list[int]:
        """Create a tile entity for every valid token and return them in map order.

        Tokens are separated by single spaces, one map row per line. Empty
        tokens, "-" and "-1" leave a cell blank; malformed tokens are logged
        and skipped. Raises OSError if the file cannot be opened.
        """
        created: list[int] = []
        with open(filename, encoding="utf-8") as file:
            for y, line in enumerate(file):
                for x, token in enumerate(line.rstrip("\r\n").split(" ")):
                    tile = self._load_token(
                        token,
                        x,
                        y,
                        components,
                        entity_manager,
                        tileset_manager,
                        render_system,
                        collision_system,
                        tile_scale,
                    )
                    if tile is not None:
                        created.append(tile)
        logger.info("Map loaded: %s", filename)
        return created

    def _load_token(
        self,
        token: str,
        x: int,
        y: int,
        components: ComponentManager,
        entity_manager: EntityManager,
        tileset_manager: TilesetManager,
        render_system: RenderSystem,
        collision_system: CollisionSystem,
        tile_scale: float,
    ) -> int | None:
        if token in _EMPTY_TOKENS:
            return None
        tileset_name, sep, id_text = token.partition(":")
        if not sep:
            logger.error("Invalid token format: %s", token)
            return None
        try:
            tile_id = _parse_tile_id(id_text)
        except ValueError as exc:
            logger.error("Invalid token: %s (%s)", token, exc)
            return None
        if not tileset_manager.has_tileset(tileset_name):
            logger.error("Tileset not found: %s", tileset_name)
            return None

        ts = tileset_manager.get_tileset(tileset_name)
        tile = entity_manager.create_entity()

        ty, tx = _trunc_divmod(tile_id, ts.tiles_per_row)
        sprite = Sprite(
            texture=ts.texture,
            texture_rect=(
                tx * ts.tile_width,
                ty * ts.tile_height,
                ts.tile_width,
                ts.tile_height,
            ),
            origin=(ts.tile_width / 2.0, ts.tile_height / 2.0),
            scale=(tile_scale, tile_scale),
            position=(
                x * ts.tile_width * tile_scale + ts.tile_width / 2.0,
                y * ts.tile_height * tile_scale + ts.tile_height / 2.0,
            ),
        )

        tile_type = self.tile_type_from_id(tile_id)
        tile_comp = TileComponent(
            sprite=sprite,
            type=tile_type,
            is_solid=tile_type is TileType.WATER,
            tile_id=tile_id,
        )

        if tile_comp.is_solid:
            collider = ColliderComponent(
                bounds=Rect(
                    -ts.tile_width * tile_scale / 2.0,
                    -ts.tile_height - 50.0,
                    ts.tile_width * tile_scale,
                    ts.tile_height * tile_scale,
                ),
                is_static=True,
                tag="Tile",
            )
            components.add_component(tile, collider)
            collision_system.entities.add(tile)

        components.add_component(tile, tile_comp)
        components.add_component(tile, Position(*sprite.position))
        render_system.entities.add(tile)
        return tile