"""A small entity-component-system 2D game engine drawn with pygame."""

__version__ = "1.0.0"