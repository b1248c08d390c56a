"""Static collision bodies that follow their game object."""

from __future__ import annotations

from typing import TYPE_CHECKING

from isaac.collision_body import CollisionBody2D
from isaac.collision_shape import CollisionShape
from isaac.physics import PhysicsServer2D
from isaac.service_locator import ServiceLocator

if TYPE_CHECKING:
    from isaac.game_object import GameObject


class CollisionObject2D(CollisionBody2D):
    """A static body with its shape attached, moved to track its object."""

    def __init__(self, collision_shape: CollisionShape):
        super().__init__(collision_shape)
        server = ServiceLocator.get_service(PhysicsServer2D)
        self._body = server.create_body(self.body_def)
        self._collision_shape.make_shape(self._body)

    def update(self, game_object: GameObject) -> None:
        body = self._body
        body.set_transform(game_object.global_position + self.shape_offset, body.rotation)