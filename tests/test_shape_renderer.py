import pygame

from isaac.game_object import GameObject
from isaac.shape_renderer import CircleShape, ConvexShape, RectangleShape, ShapeRenderer
from isaac.transform import Vector2


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_make_shape_keeps_shape():
    renderer = ShapeRenderer()
    circle = renderer.make_shape(CircleShape, 5.0)
    rect = renderer.make_shape(RectangleShape, Vector2(2, 3))
    assert renderer.shapes == (circle, rect)
    assert circle.radius == 5.0
    assert rect.size == Vector2(2, 3)


def test_update_moves_shapes_to_global_position():
    owner = GameObject()
    renderer = owner.make_component(ShapeRenderer)
    shape = renderer.make_shape(RectangleShape, Vector2(4, 4))
    owner.position = Vector2(30, 40)
    owner.update(0.0)
    assert shape.position == owner.global_position


def test_circle_point_count():
    circle = CircleShape(10.0, 4)
    assert len(circle.local_points()) == 4


def test_circle_draws_from_top_left():
    surface = pygame.Surface((40, 40))
    circle = CircleShape(10.0)
    circle.fill_color = (255, 255, 0)
    circle.draw(surface)
    assert rgb(surface, (10, 10)) == (255, 255, 0)
    assert rgb(surface, (35, 35)) == (0, 0, 0)


def test_rectangle_draws_at_position():
    surface = pygame.Surface((30, 30))
    rect = RectangleShape(Vector2(10, 10))
    rect.position = Vector2(5, 5)
    rect.fill_color = (255, 0, 0)
    rect.draw(surface)
    assert rgb(surface, (10, 10)) == (255, 0, 0)
    assert rgb(surface, (1, 1)) == (0, 0, 0)


def test_convex_shape_draws_points():
    surface = pygame.Surface((30, 30))
    shape = ConvexShape([Vector2(0, 0), Vector2(20, 0), Vector2(20, 20), Vector2(0, 20)])
    shape.fill_color = (0, 0, 255)
    shape.draw(surface)
    assert rgb(surface, (10, 10)) == (0, 0, 255)


def test_empty_convex_shape_draws_nothing():
    surface = pygame.Surface((10, 10))
    ConvexShape().draw(surface)
    assert rgb(surface, (5, 5)) == (0, 0, 0)


def test_transparent_fill_draws_nothing():
    surface = pygame.Surface((20, 20))
    rect = RectangleShape(Vector2(10, 10))
    rect.fill_color = (255, 255, 255, 0)
    rect.draw(surface)
    assert rgb(surface, (5, 5)) == (0, 0, 0)


def test_renderer_draws_all_shapes():
    surface = pygame.Surface((60, 60))
    owner = GameObject()
    renderer = owner.make_component(ShapeRenderer)
    first = renderer.make_shape(RectangleShape, Vector2(5, 5))
    second = renderer.make_shape(RectangleShape, Vector2(5, 5))
    renderer.update(owner)
    second.position = Vector2(40, 40)
    owner.draw(surface)
    assert rgb(surface, (2, 2)) == tuple(first.fill_color[:3])
    assert rgb(surface, (42, 42)) == tuple(second.fill_color[:3])