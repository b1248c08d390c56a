"""Demo objects: falling particles, their spawner and an inspector HUD."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

import pygame

from isaac.collision_shape import Circle2DShape
from isaac.game_object import GameObject
from isaac.observer import Observable, Observer
from isaac.rigidbody import RigidBody2D
from isaac.shape_renderer import CircleShape, ShapeRenderer
from isaac.transform import Vector2

PARTICLE_RADIUS = 10.0
SPAWN_RATE_RANGE = (1.0, 25.0)
RESTITUTION_RANGE = (0.0, 2.0)
CHANGE_THRESHOLD = 0.01

_PANEL_COLOR = (40, 40, 40)
_TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 18


class HudEventType(Enum):
    SPAWN_RATE_CHANGED = "spawn_rate_changed"
    RESTITUTION_CHANGED = "restitution_changed"


@dataclass(frozen=True)
class HudEvent:
    """A setting changed in the HUD."""

    type: HudEventType
    value: float


@dataclass(frozen=True)
class ParticleEvent:
    """A particle was spawned."""


def random_color() -> tuple[int, int, int, int]:
    """An opaque colour with random red, green and blue channels."""
    return (random.randrange(256), random.randrange(256), random.randrange(256), 255)


class Particle(GameObject):
    """A small coloured ball simulated by a rigid body."""

    def __init__(self) -> None:
        super().__init__()
        self._rigid_body: RigidBody2D | None = None

    def on_start(self) -> None:
        self._rigid_body = self.make_component(RigidBody2D, Circle2DShape(PARTICLE_RADIUS))
        renderer = self.make_component(ShapeRenderer)
        shape = renderer.make_shape(CircleShape, PARTICLE_RADIUS)
        shape.fill_color = random_color()
        self.position = Vector2(_jitter(), _jitter())

    @property
    def rigid_body(self) -> RigidBody2D:
        """The particle's rigid body; only available once started."""
        if self._rigid_body is None:
            raise RuntimeError("particle has not been started")
        return self._rigid_body


def _jitter() -> float:
    return float(random.randrange(100) - 50)


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, float(value)))


class Hud(GameObject, Observer[ParticleEvent], Observable[HudEvent]):
    """Counts spawned particles and publishes changes to its settings."""

    def __init__(self) -> None:
        super().__init__()
        self._counter = 0
        self._spawn_rate = 1.0
        self._restitution = 0.0
        self._font: pygame.font.Font | None = None

    @property
    def counter(self) -> int:
        """Number of particles reported so far."""
        return self._counter

    def set_spawn_rate(self, value: float) -> None:
        """Set particles per second, within 1 to 25, notifying on a real change."""
        value = _clamp(value, SPAWN_RATE_RANGE)
        if abs(value - self._spawn_rate) > CHANGE_THRESHOLD:
            self._spawn_rate = value
            self.notify(HudEvent(HudEventType.SPAWN_RATE_CHANGED, value))

    def set_restitution(self, value: float) -> None:
        """Set particle restitution, within 0 to 2, notifying on a real change."""
        value = _clamp(value, RESTITUTION_RANGE)
        if abs(value - self._restitution) > CHANGE_THRESHOLD:
            self._restitution = value
            self.notify(HudEvent(HudEventType.RESTITUTION_CHANGED, value))

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font

    def on_draw(self, window: pygame.Surface) -> None:
        font = self._get_font()
        lines = [
            "Inspector",
            f"Particles: {self._counter}",
            f"spawning rate: {self._spawn_rate:.2f}",
            f"restitution: {self._restitution:.2f}",
        ]
        rendered = [font.render(line, True, _TEXT_COLOR) for line in lines]
        width = max(text.get_width() for text in rendered) + 12
        height = sum(text.get_height() for text in rendered) + 12
        pygame.draw.rect(window, _PANEL_COLOR, pygame.Rect(0, 0, width, height))
        y = 6
        for text in rendered:
            window.blit(text, (6, y))
            y += text.get_height()

    def on_notify(self, subject: Any, event: ParticleEvent) -> None:
        self._counter += 1


class Spawner(GameObject, Observable[ParticleEvent], Observer[HudEvent]):
    """Spawns particles at a steady rate and reports each one."""

    def __init__(self) -> None:
        super().__init__()
        self._elapsed = 0.0
        self._spawn_interval = 1.0
        self._restitution = 0.0

    def on_start(self) -> None:
        self.position = Vector2(400, 100)

    def on_update(self, delta: float) -> None:
        self._elapsed += delta
        if self._elapsed >= self._spawn_interval:
            self.spawn()
            self._elapsed = 0.0

    def spawn(self) -> Particle:
        """Create one particle with the current restitution and announce it."""
        child = self.make_child(Particle)
        child.rigid_body.set_restitution(self._restitution)
        self.notify(ParticleEvent())
        return child

    def on_notify(self, subject: Any, event: HudEvent) -> None:
        if event.type is HudEventType.SPAWN_RATE_CHANGED:
            self._spawn_interval = 1.0 / event.value
        elif event.type is HudEventType.RESTITUTION_CHANGED:
            self._restitution = event.value