"""A small 2D game engine on pygame: game objects, components, scenes, physics and a demo."""

__version__ = "0.1.0"