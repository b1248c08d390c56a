"""Behaviour attached to a game object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isaac.base_object import BaseObject

if TYPE_CHECKING:
    from isaac.game_object import GameObject


class Component(BaseObject):
    """A piece of behaviour owned by one game object.

    The owning object calls ``start``, ``update`` and ``draw`` on it; all
    three do nothing unless overridden.
    """

    def __init__(self) -> None:
        super().__init__()
        self._parent: GameObject | None = None

    def _attach(self, parent: GameObject) -> None:
        self._parent = parent

    @property
    def game_object(self) -> GameObject | None:
        """The game object this component belongs to, once attached."""
        return self._parent

    def start(self, game_object: GameObject) -> None:
        """Called when the component is added and when its owner starts."""

    def update(self, game_object: GameObject) -> None:
        """Called once per frame after the owner's own update."""

    def draw(self, game_object: GameObject, window: Any) -> None:
        """Called once per frame to render onto ``window``."""