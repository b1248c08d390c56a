"""Drawable shapes and the component that keeps them on their object."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable, TypeVar

import pygame

from isaac.component import Component
from isaac.transform import Vector2

if TYPE_CHECKING:
    from isaac.game_object import GameObject

WHITE = (255, 255, 255, 255)

ShapeT = TypeVar("ShapeT", bound="_Shape")


def _draw_polygon(surface: pygame.Surface, color: Any, points: list, width: int) -> None:
    if len(points) < 3:
        return
    rgba = pygame.Color(*color)
    if rgba.a == 0:
        return
    if rgba.a == 255:
        pygame.draw.polygon(surface, rgba, points, width)
        return
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    pygame.draw.polygon(overlay, rgba, points, width)
    surface.blit(overlay, (0, 0))


class _Shape:
    """A filled polygon whose local points are offset by ``position``."""

    def __init__(self) -> None:
        self.position = Vector2()
        self.fill_color: tuple[int, ...] = WHITE
        self.outline_color: tuple[int, ...] = WHITE
        self.outline_thickness = 0.0

    def local_points(self) -> list[Vector2]:
        raise NotImplementedError

    def draw(self, surface: pygame.Surface) -> None:
        """Render the shape onto ``surface``."""
        points = [(self.position.x + p.x, self.position.y + p.y) for p in self.local_points()]
        _draw_polygon(surface, self.fill_color, points, 0)
        if self.outline_thickness > 0:
            width = max(1, round(self.outline_thickness))
            _draw_polygon(surface, self.outline_color, points, width)


class CircleShape(_Shape):
    """A circle approximated by ``point_count`` points; ``position`` is its top-left."""

    def __init__(self, radius: float = 0.0, point_count: int = 30):
        super().__init__()
        self.radius = float(radius)
        self.point_count = int(point_count)

    def local_points(self) -> list[Vector2]:
        r = self.radius
        step = 2 * math.pi / self.point_count if self.point_count else 0.0
        return [
            Vector2(r + math.cos(i * step - math.pi / 2) * r, r + math.sin(i * step - math.pi / 2) * r)
            for i in range(self.point_count)
        ]

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)


class RectangleShape(_Shape):
    """An axis-aligned rectangle of ``size`` with ``position`` at its top-left."""

    def __init__(self, size: Vector2 = Vector2()):
        super().__init__()
        self.size = Vector2(*size)

    def local_points(self) -> list[Vector2]:
        w, h = self.size.x, self.size.y
        return [Vector2(0, 0), Vector2(w, 0), Vector2(w, h), Vector2(0, h)]

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)


class ConvexShape(_Shape):
    """A convex polygon given by its points relative to ``position``."""

    def __init__(self, points: Iterable[Vector2] = ()):
        super().__init__()
        self.vertices = [Vector2(*p) for p in points]

    def local_points(self) -> list[Vector2]:
        return list(self.vertices)

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)


class ShapeRenderer(Component):
    """Draws its shapes at the global position of its game object."""

    def __init__(self) -> None:
        super().__init__()
        self._shapes: list[_Shape] = []
        self._last_position = Vector2()

    @property
    def shapes(self) -> tuple[_Shape, ...]:
        return tuple(self._shapes)

    def make_shape(self, shape_type: type[ShapeT], *args: Any, **kwargs: Any) -> ShapeT:
        """Create a shape of ``shape_type``, keep it and return it."""
        shape = shape_type(*args, **kwargs)
        self._shapes.append(shape)
        return shape

    def update(self, game_object: GameObject) -> None:
        position = game_object.global_position
        for shape in self._shapes:
            shape.position = position
        self._last_position = position

    def draw(self, game_object: GameObject, window: pygame.Surface) -> None:
        for shape in self._shapes:
            shape.draw(window)