import pytest

from isaac.collision_body import CollisionBody2D
from isaac.collision_shape import Box2DShape, Circle2DShape
from isaac.physics import BodyType
from isaac.transform import Vector2


def test_box_offset_is_half_size():
    shape = Box2DShape(Vector2(10, 20))
    body = CollisionBody2D(shape)
    assert body.shape_offset == shape.half_extents


def test_circle_offset_is_radius_on_both_axes():
    body = CollisionBody2D(Circle2DShape(7.0))
    assert body.shape_offset == Vector2(7.0, 7.0)


def test_default_body_def_is_static_and_refers_back():
    component = CollisionBody2D(Circle2DShape(1.0))
    assert component.body_def.type is BodyType.STATIC
    assert component.body_def.user_data is component


def test_body_absent_until_created():
    assert CollisionBody2D(Circle2DShape(1.0)).body is None


def test_unknown_shape_rejected():
    with pytest.raises(TypeError):
        CollisionBody2D(object())