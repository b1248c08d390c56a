"""Collision shapes that can be attached to physics bodies."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from isaac.transform import Vector2

if TYPE_CHECKING:
    from isaac.physics import Body, Fixture


@dataclass
class ShapeDef:
    """Material properties copied onto a fixture when a shape is attached."""

    density: float = 1.0
    friction: float = 0.6
    restitution: float = 0.0


class CollisionShape(ABC):
    """Geometry centred on the body origin, with its own material definition."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._shape_def = ShapeDef()

    @property
    def shape_def(self) -> ShapeDef:
        """The material used for fixtures made from this shape."""
        return self._shape_def

    @property
    @abstractmethod
    def area(self) -> float:
        """Area of the shape, used to derive body mass."""

    @abstractmethod
    def make_shape(self, body: Body) -> Fixture:
        """Attach a new fixture of this shape to ``body`` and return it."""


class Box2DShape(CollisionShape):
    """An axis-aligned box of ``size`` centred on the body origin."""

    def __init__(self, size: Vector2):
        super().__init__()
        self._size = Vector2(*size)
        hx, hy = self._size.x / 2.0, self._size.y / 2.0
        self._vertices = (
            Vector2(-hx, -hy),
            Vector2(hx, -hy),
            Vector2(hx, hy),
            Vector2(-hx, hy),
        )

    @property
    def size(self) -> Vector2:
        """Full width and height of the box."""
        return self._size

    @property
    def half_extents(self) -> Vector2:
        return self._size * 0.5

    @property
    def vertices(self) -> tuple[Vector2, ...]:
        """Corners in body-local coordinates, counter-clockwise."""
        return self._vertices

    @property
    def area(self) -> float:
        return self._size.x * self._size.y

    def make_shape(self, body: Body) -> Fixture:
        return body.add_fixture(self, self.shape_def)


class Circle2DShape(CollisionShape):
    """A circle of ``radius`` centred on the body origin."""

    def __init__(self, radius: float):
        super().__init__()
        self._radius = float(radius)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def area(self) -> float:
        return math.pi * self._radius * self._radius

    def make_shape(self, body: Body) -> Fixture:
        return body.add_fixture(self, self.shape_def)