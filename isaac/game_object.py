"""Game objects: a tree of positioned nodes carrying components."""

from __future__ import annotations

from typing import Any, TypeVar

from isaac.base_object import BaseObject
from isaac.component import Component
from isaac.transform import Transform, Vector2

GameObjectT = TypeVar("GameObjectT", bound="GameObject")
ComponentT = TypeVar("ComponentT", bound=Component)


class GameObject(BaseObject):
    """A node in the scene tree with a local and a global position."""

    def __init__(self) -> None:
        super().__init__()
        self._transform = Transform()
        self._enabled = True
        self._children: list[GameObject] = []
        self._components: list[Component] = []
        self._child_ids_to_erase: set[int] = set()
        self._parent: GameObject | None = None

    # lifecycle driven by the world

    def start(self) -> None:
        """Run ``on_start``, then start every component and child."""
        self.on_start()
        for component in self._components:
            component.start(self)
        for child in self._children:
            child.start()

    def update(self, delta: float) -> None:
        """Run ``on_update``, then update components and children."""
        self.on_update(delta)
        self.update_children_positions()
        for component in self._components:
            component.update(self)
        for child in self._children:
            child.update(delta)

    def draw(self, window: Any) -> None:
        """Run ``on_draw``, then draw components and children."""
        self.on_draw(window)
        for component in self._components:
            component.draw(self, window)
        for child in self._children:
            child.draw(window)

    def destroy_queued(self) -> None:
        """Remove the children queued by ``destroy``, recursively."""
        for child in self._children:
            child.destroy_queued()
        doomed = [c for c in self._children if c.id in self._child_ids_to_erase]
        for child in doomed:
            child.on_destroy()
        self._children[:] = [
            c for c in self._children if c.id not in self._child_ids_to_erase
        ]
        self._child_ids_to_erase.clear()

    # state

    def enable(self) -> None:
        for child in self._children:
            child.enable()
        self._enabled = True

    def disable(self) -> None:
        for child in self._children:
            child.disable()
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def destroy(self) -> None:
        """Queue this object for removal from its parent at the end of the frame."""
        if self._parent is None:
            raise RuntimeError("cannot destroy an object without a parent")
        self._parent._child_ids_to_erase.add(self.id)

    # positions

    @property
    def position(self) -> Vector2:
        """Position relative to the parent."""
        return self._transform.position

    @position.setter
    def position(self, value: Vector2) -> None:
        value = Vector2(*value)
        if self._parent is not None:
            self._transform.global_position = self._parent.global_position + value
        else:
            self._transform.global_position = value
        self._transform.position = value
        self.update_children_positions()

    @property
    def global_position(self) -> Vector2:
        """Position in world coordinates."""
        return self._transform.global_position

    @global_position.setter
    def global_position(self, value: Vector2) -> None:
        self._transform.global_position = Vector2(*value)
        self.update_children_positions()

    def update_children_positions(self) -> None:
        """Place every child at this object's global position plus its own."""
        for child in self._children:
            child.global_position = self._transform.global_position + child.position

    # tree

    @property
    def children(self) -> list[GameObject]:
        """The live list of children."""
        return self._children

    def make_child(self, cls: type[GameObjectT], *args: Any, **kwargs: Any) -> GameObjectT:
        """Create a child of type ``cls``, attach it, start it and return it."""
        child = cls(*args, **kwargs)
        self._children.append(child)
        child._parent = self
        child.start()
        return child

    def make_component(self, cls: type[ComponentT], *args: Any, **kwargs: Any) -> ComponentT:
        """Create a component of type ``cls``, attach it, start it and return it."""
        component = cls(*args, **kwargs)
        self._components.append(component)
        component._attach(self)
        component.start(self)
        return component

    # hooks for subclasses

    def on_start(self) -> None:
        """Called when the object starts."""

    def on_update(self, delta: float) -> None:
        """Called every frame with the elapsed seconds."""

    def on_draw(self, window: Any) -> None:
        """Called every frame before components and children draw."""

    def on_destroy(self) -> None:
        """Called just before the object is removed from its parent."""

    def on_collision_2d(self, collision: Any) -> None:
        """Called when a collision involving this object is reported."""