"""The demo scene: walls, a field of obstacles, a HUD and a particle spawner."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Sequence

import pygame

from isaac.collision_object import CollisionObject2D
from isaac.collision_shape import Box2DShape, Circle2DShape
from isaac.demo_particles import Hud, Spawner
from isaac.engine import Isaac
from isaac.game_object import GameObject
from isaac.input import Input
from isaac.logger import Level, Logger
from isaac.rigidbody import RigidBody2D
from isaac.scene import Scene
from isaac.service_locator import ServiceLocator
from isaac.shape_renderer import CircleShape, RectangleShape, ShapeRenderer
from isaac.transform import Vector2

OBSTACLE_SIZE = Vector2(15, 15)
OBSTACLE_SPACING = 75.0
OBSTACLE_ROWS = 8
WALL_THICKNESS = 10


class Obstacle(GameObject):
    """A small static square."""

    def on_start(self) -> None:
        self.make_component(CollisionObject2D, Box2DShape(OBSTACLE_SIZE))
        renderer = self.make_component(ShapeRenderer)
        renderer.make_shape(RectangleShape, OBSTACLE_SIZE)


class Obstacles(GameObject):
    """A triangle of obstacles, one more on each row."""

    def on_start(self) -> None:
        size = OBSTACLE_SPACING
        for row in range(1, OBSTACLE_ROWS + 1):
            for column in range(row):
                obstacle = self.make_child(Obstacle)
                obstacle.position = Vector2(
                    column * size - size * 0.5 * (row - 1), row * 40.0
                )
        self.position = Vector2(400 - 7.5, 150)


@dataclass(frozen=True)
class WallData:
    position: Vector2
    size: Vector2


class Wall(GameObject):
    """A static rectangle described by ``data``."""

    def __init__(self, data: WallData):
        super().__init__()
        self.make_component(CollisionObject2D, Box2DShape(data.size))
        renderer = self.make_component(ShapeRenderer)
        renderer.make_shape(RectangleShape, data.size)
        self.position = data.position


class Walls(GameObject):
    """The four walls enclosing the play area."""

    walls: ClassVar[tuple[WallData, ...]] = (
        WallData(Vector2(0, 0), Vector2(WALL_THICKNESS, 550)),
        WallData(Vector2(750, 0), Vector2(WALL_THICKNESS, 550)),
        WallData(Vector2(0, 0), Vector2(750, WALL_THICKNESS)),
        WallData(Vector2(0, 550 - WALL_THICKNESS), Vector2(750, WALL_THICKNESS)),
    )

    def on_start(self) -> None:
        for wall in self.walls:
            self.make_child(Wall, wall)
        self.position = Vector2(25, 25)


class Orbiter(GameObject):
    """A white dot circling its parent; pressing K destroys it."""

    RADIUS: ClassVar[float] = 100.0
    FREQUENCY: ClassVar[float] = 3.0
    _t: ClassVar[float] = 0.0

    def __init__(self) -> None:
        super().__init__()
        self._attractor: GameObject | None = None

    def on_start(self) -> None:
        renderer = self.make_component(ShapeRenderer)
        shape = renderer.make_shape(CircleShape)
        shape.radius = 10.0
        shape.fill_color = (255, 255, 255)

    def on_update(self, delta: float) -> None:
        t = Orbiter._t
        self.position = Vector2(
            math.sin(t * self.FREQUENCY) * self.RADIUS,
            math.cos(t * self.FREQUENCY) * self.RADIUS,
        )
        Orbiter._t = t + delta
        if Input.key_pressed(pygame.K_k):
            self.destroy()

    def on_destroy(self) -> None:
        ServiceLocator.get_service(Logger).info("Orbiter destroyed!")

    def set_attractor(self, attractor: GameObject) -> None:
        self._attractor = attractor

    @property
    def attractor(self) -> GameObject | None:
        return self._attractor


class Player(GameObject):
    """A yellow ball with an orbiter, drawn over a pair of centre lines."""

    def on_start(self) -> None:
        renderer = self.make_component(ShapeRenderer)
        shape = renderer.make_shape(CircleShape, 25.0)
        shape.fill_color = (255, 255, 0)
        self.make_component(RigidBody2D, Circle2DShape(25.0))
        orbiter = self.make_child(Orbiter)
        orbiter.set_attractor(self)
        self.position = Vector2(400 - shape.radius, 300 - shape.radius)
        ServiceLocator.get_service(Logger).info("Player started")

    def on_update(self, delta: float) -> None:
        """The player is moved by the physics simulation alone."""

    def on_draw(self, window: pygame.Surface) -> None:
        vertical = RectangleShape(Vector2(1, 600))
        vertical.position = Vector2(400, 0)
        horizontal = RectangleShape(Vector2(800, 1))
        horizontal.position = Vector2(0, 300)
        vertical.draw(window)
        horizontal.draw(window)

    def on_collision_2d(self, collision: Any) -> None:
        ServiceLocator.get_service(Logger).info("There was a collision!")


class MainScene(Scene):
    """Walls, obstacles, the HUD and a spawner wired to it."""

    def __init__(self) -> None:
        super().__init__()
        root = self.root
        root.make_child(Walls)
        root.make_child(Obstacles)
        hud = root.make_child(Hud)
        spawner = root.make_child(Spawner)
        spawner.add_observer(hud)
        hud.add_observer(spawner)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the demo window and play the main scene until it is closed."""
    parser = argparse.ArgumentParser(
        prog="isaac-demo", description="Play the particle demo scene."
    )
    parser.parse_args(argv)
    engine = Isaac("Isaac Demo", (800, 600), Level.DEBUG)
    engine.set_scene(MainScene())
    return engine.run()