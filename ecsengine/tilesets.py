"""Tile sheets: textures cut into a grid of equally sized tiles."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Any, Union

import pygame

StrPath = Union[str, PathLike]


class TilesetLoadError(RuntimeError):
    """Raised when a tileset's image cannot be loaded."""


class TilesetNotFoundError(LookupError):
    """Raised when asking for a tileset that was never added."""


@dataclass
class Tileset:
    """A named texture divided into tiles, read row by row."""

    name: str
    texture: Any
    tile_width: int
    tile_height: int
    tiles_per_row: int

    @classmethod
    def load(
        cls, name: str, filepath: StrPath, tile_width: int, tile_height: int
    ) -> Tileset:
        """Load the tileset image from a file."""
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("tile width and height must be positive")
        try:
            texture = pygame.image.load(str(filepath))
        except (pygame.error, OSError) as exc:
            raise TilesetLoadError(f"Failed to load tileset: {filepath}") from exc
        return cls(
            name=name,
            texture=texture,
            tile_width=tile_width,
            tile_height=tile_height,
            tiles_per_row=texture.get_width() // tile_width,
        )


class TilesetManager:
    """Keeps tilesets by name."""

    def __init__(self) -> None:
        self._tilesets: dict[str, Tileset] = {}

    def add_tileset(
        self, name: str, filepath: StrPath, tile_width: int, tile_height: int
    ) -> None:
        """Load a tileset and store it; a name already taken keeps its first tileset."""
        tileset = Tileset.load(name, filepath, tile_width, tile_height)
        self._tilesets.setdefault(name, tileset)

    def get_tileset(self, name: str) -> Tileset:
        """Return the tileset stored under the name."""
        try:
            return self._tilesets[name]
        except KeyError:
            raise TilesetNotFoundError(f"Tileset not found: {name}") from None

    def has_tileset(self, name: str) -> bool:
        """Return True if a tileset is stored under the name."""
        return name in self._tilesets