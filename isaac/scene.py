"""Scenes and the manager holding the one being played."""

from __future__ import annotations

from isaac.game_object import GameObject


class Scene:
    """A tree of game objects hanging from a single root."""

    def __init__(self) -> None:
        self._root = GameObject()

    @property
    def root(self) -> GameObject:
        """The root object; top-level objects are its children."""
        return self._root


class SceneManager:
    """Owns the current scene."""

    def __init__(self) -> None:
        self._current_scene: Scene | None = None

    def create_default_scene(self) -> Scene:
        """Replace the current scene with an empty one and return it."""
        self._current_scene = Scene()
        return self._current_scene

    def set_scene(self, scene: Scene | None) -> None:
        self._current_scene = scene

    @property
    def current_scene(self) -> Scene | None:
        """The scene being played, or None if none was set."""
        return self._current_scene