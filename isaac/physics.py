"""A small 2D rigid-body physics world with debug drawing."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pygame

from isaac.collision_shape import Box2DShape, Circle2DShape, CollisionShape, ShapeDef
from isaac.logger import Logger
from isaac.service_locator import ServiceLocator
from isaac.transform import Vector2

K_GRAVITY = 9.81 * 100
DEFAULT_GRAVITY = Vector2(0.0, K_GRAVITY)
SUB_STEPS = 4
RESTITUTION_THRESHOLD = 1.0
LINEAR_SLOP = 0.5
BAUMGARTE = 0.8

OUTLINE_COLOR = (147, 115, 165)
SOLID_POLYGON_COLOR = (147, 115, 165, 75)
CIRCLE_COLOR = (255, 255, 255)


class BodyType(Enum):
    STATIC = "static"
    KINEMATIC = "kinematic"
    DYNAMIC = "dynamic"


@dataclass
class BodyDef:
    """Initial state of a body."""

    type: BodyType = BodyType.STATIC
    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    linear_velocity: Vector2 = field(default_factory=Vector2)
    gravity_scale: float = 1.0
    user_data: Any = None


@dataclass(eq=False)
class Fixture:
    """A shape attached to a body, with its own copy of the material."""

    body: Body
    shape: CollisionShape
    density: float
    friction: float
    restitution: float

    def world_vertices(self) -> list[Vector2]:
        """Corners of a box fixture in world coordinates."""
        if not isinstance(self.shape, Box2DShape):
            raise TypeError("only box fixtures have vertices")
        origin, angle = self.body.position, self.body.rotation
        return [origin + _rotate(v, angle) for v in self.shape.vertices]

    def aabb(self) -> tuple[Vector2, Vector2]:
        """Lower and upper corners of the world-space bounding box."""
        if isinstance(self.shape, Circle2DShape):
            r = Vector2(self.shape.radius, self.shape.radius)
            return self.body.position - r, self.body.position + r
        points = self.world_vertices()
        return (
            Vector2(min(p.x for p in points), min(p.y for p in points)),
            Vector2(max(p.x for p in points), max(p.y for p in points)),
        )


class Body:
    """A rigid body: position, rotation, velocity and attached fixtures."""

    def __init__(self, body_def: BodyDef):
        self.type = body_def.type
        self.position = Vector2(*body_def.position)
        self.rotation = float(body_def.rotation)
        self.linear_velocity = Vector2(*body_def.linear_velocity)
        self.gravity_scale = body_def.gravity_scale
        self.user_data = body_def.user_data
        self._fixtures: list[Fixture] = []

    @property
    def fixtures(self) -> tuple[Fixture, ...]:
        return tuple(self._fixtures)

    @property
    def mass(self) -> float:
        return sum(f.density * f.shape.area for f in self._fixtures)

    @property
    def inverse_mass(self) -> float:
        """Zero for non-dynamic bodies; a massless dynamic body weighs one."""
        if self.type is not BodyType.DYNAMIC:
            return 0.0
        mass = self.mass
        return 1.0 / mass if mass > 0 else 1.0

    def set_transform(self, position: Vector2, rotation: float) -> None:
        self.position = Vector2(*position)
        self.rotation = float(rotation)

    def add_fixture(self, shape: CollisionShape, shape_def: ShapeDef) -> Fixture:
        """Attach ``shape`` using a copy of the material in ``shape_def``."""
        fixture = Fixture(
            body=self,
            shape=shape,
            density=shape_def.density,
            friction=shape_def.friction,
            restitution=shape_def.restitution,
        )
        self._fixtures.append(fixture)
        return fixture


@dataclass(frozen=True)
class Collision2D:
    """A contact between two fixtures during a step."""

    collider: Fixture
    other: Fixture


def _dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def _rotate(v: Vector2, angle: float) -> Vector2:
    c, s = math.cos(angle), math.sin(angle)
    return Vector2(c * v.x - s * v.y, s * v.x + c * v.y)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _circle_circle(ca: Vector2, ra: float, cb: Vector2, rb: float):
    d = cb - ca
    dist = math.hypot(d.x, d.y)
    if dist >= ra + rb:
        return None
    normal = d * (1.0 / dist) if dist > 0 else Vector2(1.0, 0.0)
    return normal, ra + rb - dist


def _box_circle(box_pos: Vector2, angle: float, half: Vector2, centre: Vector2, radius: float):
    """Contact normal from the box towards the circle, and depth."""
    local = _rotate(centre - box_pos, -angle)
    clamped = Vector2(_clamp(local.x, -half.x, half.x), _clamp(local.y, -half.y, half.y))
    if clamped == local:
        dx = half.x - abs(local.x)
        dy = half.y - abs(local.y)
        if dx < dy:
            normal, depth = Vector2(math.copysign(1.0, local.x), 0.0), dx + radius
        else:
            normal, depth = Vector2(0.0, math.copysign(1.0, local.y)), dy + radius
    else:
        diff = local - clamped
        dist = math.hypot(diff.x, diff.y)
        if dist >= radius:
            return None
        normal, depth = diff * (1.0 / dist), radius - dist
    return _rotate(normal, angle), depth


def _box_box(pa: Vector2, angle_a: float, ha: Vector2, pb: Vector2, angle_b: float, hb: Vector2):
    axes_a = (_rotate(Vector2(1, 0), angle_a), _rotate(Vector2(0, 1), angle_a))
    axes_b = (_rotate(Vector2(1, 0), angle_b), _rotate(Vector2(0, 1), angle_b))
    d = pb - pa
    best = None
    for axis in (*axes_a, *axes_b):
        extent_a = ha.x * abs(_dot(axes_a[0], axis)) + ha.y * abs(_dot(axes_a[1], axis))
        extent_b = hb.x * abs(_dot(axes_b[0], axis)) + hb.y * abs(_dot(axes_b[1], axis))
        distance = _dot(d, axis)
        overlap = extent_a + extent_b - abs(distance)
        if overlap <= 0:
            return None
        if best is None or overlap < best[1]:
            best = (axis if distance >= 0 else axis * -1.0, overlap)
    return best


def _collide(fa: Fixture, fb: Fixture):
    """Normal pointing from ``fa`` to ``fb`` and penetration depth, or None."""
    a, b = fa.body, fb.body
    sa, sb = fa.shape, fb.shape
    if isinstance(sa, Circle2DShape) and isinstance(sb, Circle2DShape):
        return _circle_circle(a.position, sa.radius, b.position, sb.radius)
    if isinstance(sa, Box2DShape) and isinstance(sb, Circle2DShape):
        return _box_circle(a.position, a.rotation, sa.half_extents, b.position, sb.radius)
    if isinstance(sa, Circle2DShape) and isinstance(sb, Box2DShape):
        hit = _box_circle(b.position, b.rotation, sb.half_extents, a.position, sa.radius)
        return None if hit is None else (hit[0] * -1.0, hit[1])
    return _box_box(a.position, a.rotation, sa.half_extents, b.position, b.rotation, sb.half_extents)


def _resolve(fa: Fixture, fb: Fixture, normal: Vector2, depth: float) -> None:
    a, b = fa.body, fb.body
    inv_a, inv_b = a.inverse_mass, b.inverse_mass
    inv_sum = inv_a + inv_b
    if inv_sum == 0:
        return
    relative = b.linear_velocity - a.linear_velocity
    vn = _dot(relative, normal)
    if vn < 0:
        restitution = max(fa.restitution, fb.restitution)
        if -vn < RESTITUTION_THRESHOLD:
            restitution = 0.0
        j = -(1.0 + restitution) * vn / inv_sum
        impulse = normal * j
        a.linear_velocity = a.linear_velocity - impulse * inv_a
        b.linear_velocity = b.linear_velocity + impulse * inv_b

        relative = b.linear_velocity - a.linear_velocity
        tangent = relative - normal * _dot(relative, normal)
        length = math.hypot(tangent.x, tangent.y)
        if length > 1e-9:
            tangent = tangent * (1.0 / length)
            mu = math.sqrt(fa.friction * fb.friction)
            jt = _clamp(-_dot(relative, tangent) / inv_sum, -j * mu, j * mu)
            a.linear_velocity = a.linear_velocity - tangent * (jt * inv_a)
            b.linear_velocity = b.linear_velocity + tangent * (jt * inv_b)

    correction = max(depth - LINEAR_SLOP, 0.0) / inv_sum * BAUMGARTE
    a.position = a.position - normal * (correction * inv_a)
    b.position = b.position + normal * (correction * inv_b)


class PhysicsServer2D:
    """Owns every body and advances the simulation."""

    def __init__(self, gravity: Vector2 = DEFAULT_GRAVITY):
        self._logger = ServiceLocator.get_service(Logger)
        self.gravity = Vector2(*gravity)
        self.draw_shapes = True
        self.draw_bounds = True
        self._bodies: list[Body] = []
        self._logger.debug("PhysicsServer2D initialized")

    def create_body(self, body_def: BodyDef) -> Body:
        body = Body(body_def)
        self._bodies.append(body)
        return body

    def destroy_body(self, body: Body) -> None:
        """Remove ``body``; raises ValueError if it is not in this world."""
        self._bodies.remove(body)

    @property
    def bodies(self) -> tuple[Body, ...]:
        return tuple(self._bodies)

    def update(self, delta: float) -> list[Collision2D]:
        """Advance by ``delta`` seconds and return the contacts met."""
        if delta <= 0:
            return []
        h = delta / SUB_STEPS
        contacts: dict[tuple[int, int], Collision2D] = {}
        for _ in range(SUB_STEPS):
            self._integrate(h)
            for fa, fb in self._fixture_pairs():
                hit = _collide(fa, fb)
                if hit is None:
                    continue
                _resolve(fa, fb, *hit)
                contacts.setdefault((id(fa), id(fb)), Collision2D(fa, fb))
        return list(contacts.values())

    def _integrate(self, h: float) -> None:
        for body in self._bodies:
            if body.type is BodyType.DYNAMIC:
                body.linear_velocity = body.linear_velocity + self.gravity * (body.gravity_scale * h)
            if body.type is not BodyType.STATIC:
                body.position = body.position + body.linear_velocity * h

    def _fixture_pairs(self):
        for a, b in itertools.combinations(self._bodies, 2):
            if BodyType.DYNAMIC not in (a.type, b.type):
                continue
            yield from itertools.product(a.fixtures, b.fixtures)

    def debug_draw(self, surface: pygame.Surface) -> None:
        """Draw every fixture and, if enabled, its bounds onto ``surface``."""
        fixtures = [f for body in self._bodies for f in body.fixtures]
        if self.draw_shapes:
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            for fixture in fixtures:
                if isinstance(fixture.shape, Box2DShape):
                    points = [(v.x, v.y) for v in fixture.world_vertices()]
                    pygame.draw.polygon(overlay, SOLID_POLYGON_COLOR, points)
            surface.blit(overlay, (0, 0))
            for fixture in fixtures:
                if isinstance(fixture.shape, Circle2DShape):
                    centre = fixture.body.position
                    pygame.draw.circle(surface, CIRCLE_COLOR, (centre.x, centre.y), fixture.shape.radius)
        if self.draw_bounds:
            for fixture in fixtures:
                low, high = fixture.aabb()
                rect = pygame.Rect(
                    round(low.x), round(low.y), round(high.x - low.x), round(high.y - low.y)
                )
                pygame.draw.rect(surface, OUTLINE_COLOR, rect, 1)