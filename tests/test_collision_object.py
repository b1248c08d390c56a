import io

import pytest

from isaac.collision_object import CollisionObject2D
from isaac.collision_shape import Box2DShape, Circle2DShape
from isaac.game_object import GameObject
from isaac.logger import Logger
from isaac.physics import BodyType, PhysicsServer2D
from isaac.service_locator import ServiceLocator, ServiceNotFoundError
from isaac.transform import Vector2


@pytest.fixture
def physics():
    ServiceLocator.register_service(Logger, stream=io.StringIO())
    server = ServiceLocator.register_service(PhysicsServer2D)
    yield server
    ServiceLocator.unregister_service(PhysicsServer2D)
    ServiceLocator.unregister_service(Logger)


def test_creates_static_body_with_fixture(physics):
    shape = Box2DShape(Vector2(15, 15))
    component = CollisionObject2D(shape)
    assert component.body in physics.bodies
    assert component.body.type is BodyType.STATIC
    assert [f.shape for f in component.body.fixtures] == [shape]


def test_update_places_box_body_at_centre(physics):
    owner = GameObject()
    component = owner.make_component(CollisionObject2D, Box2DShape(Vector2(10, 20)))
    owner.position = Vector2(100, 50)
    owner.update(0.0)
    assert component.body.position == owner.global_position + component.shape_offset


def test_update_places_circle_body_at_centre(physics):
    owner = GameObject()
    component = owner.make_component(CollisionObject2D, Circle2DShape(4.0))
    owner.position = Vector2(8, 9)
    component.update(owner)
    assert component.body.position == Vector2(8, 9) + Vector2(4.0, 4.0)


def test_update_keeps_rotation(physics):
    owner = GameObject()
    component = owner.make_component(CollisionObject2D, Circle2DShape(4.0))
    component.body.set_transform(Vector2(), 0.5)
    component.update(owner)
    assert component.body.rotation == 0.5


def test_requires_physics_server():
    with pytest.raises(ServiceNotFoundError):
        CollisionObject2D(Circle2DShape(1.0))