"""2D vectors and object transforms."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Transform:
    """Local position relative to the parent and the resulting global one."""

    position: Vector2 = field(default_factory=Vector2)
    global_position: Vector2 = field(default_factory=Vector2)