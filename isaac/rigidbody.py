"""Dynamic bodies that drive their game object's position."""

from __future__ import annotations

from typing import TYPE_CHECKING

from isaac.collision_body import CollisionBody2D
from isaac.collision_shape import CollisionShape
from isaac.physics import BodyType, Fixture, PhysicsServer2D
from isaac.service_locator import ServiceLocator

if TYPE_CHECKING:
    from isaac.game_object import GameObject


class RigidBody2D(CollisionBody2D):
    """A dynamic body simulated by the physics server.

    The object is placed from the body each frame. The shape becomes a
    fixture only when ``set_restitution`` is called.
    """

    def __init__(self, collision_shape: CollisionShape):
        super().__init__(collision_shape)
        self.body_def.type = BodyType.DYNAMIC
        server = ServiceLocator.get_service(PhysicsServer2D)
        self._body = server.create_body(self.body_def)

    def start(self, game_object: GameObject) -> None:
        body = self._body
        body.set_transform(game_object.global_position + self.shape_offset, body.rotation)

    def update(self, game_object: GameObject) -> None:
        game_object.global_position = self._body.position - self.shape_offset

    def set_restitution(self, restitution: float) -> Fixture:
        """Attach a fixture of the shape with ``restitution`` and return it."""
        fixture = self._collision_shape.make_shape(self._body)
        fixture.restitution = float(restitution)
        return fixture