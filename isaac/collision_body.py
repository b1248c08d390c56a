"""Base of the components backed by a physics body."""

from __future__ import annotations

from isaac.collision_shape import Box2DShape, Circle2DShape, CollisionShape
from isaac.component import Component
from isaac.physics import Body, BodyDef
from isaac.transform import Vector2


class CollisionBody2D(Component):
    """A component owning a collision shape and, once created, a body.

    The body sits at the centre of the shape, while the game object's
    position marks its top-left corner; ``shape_offset`` links the two.
    """

    def __init__(self, collision_shape: CollisionShape):
        super().__init__()
        self._collision_shape = collision_shape
        self._body_def = BodyDef(user_data=self)
        self._body: Body | None = None
        if isinstance(collision_shape, Box2DShape):
            self._offset = collision_shape.size * 0.5
        elif isinstance(collision_shape, Circle2DShape):
            self._offset = Vector2(collision_shape.radius, collision_shape.radius)
        else:
            raise TypeError(f"unsupported collision shape: {type(collision_shape).__name__}")

    @property
    def body_def(self) -> BodyDef:
        return self._body_def

    @property
    def shape_offset(self) -> Vector2:
        """Distance from the object's top-left corner to the body centre."""
        return self._offset

    @property
    def body(self) -> Body | None:
        """The physics body, once a subclass has created it."""
        return self._body