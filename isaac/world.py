"""The frame loop tying window, scene and physics together."""

from __future__ import annotations

import time
from typing import Any

from isaac.game_object import GameObject
from isaac.input import Input
from isaac.logger import Logger
from isaac.observer import Observable
from isaac.physics import PhysicsServer2D
from isaac.scene import SceneManager
from isaac.service_locator import ServiceLocator
from isaac.window_server import WindowServer

import pygame


class World(Observable[Any]):
    """Runs frames and forwards every window event to its observers."""

    def __init__(
        self,
        window_server: WindowServer,
        scene_manager: SceneManager,
        physics_server: PhysicsServer2D,
    ):
        super().__init__()
        self._window_server = window_server
        self._scene_manager = scene_manager
        self._physics_server = physics_server
        self._logger = ServiceLocator.get_service(Logger)
        self._logger.debug("World initialized")

    def start(self) -> None:
        """Subscribe the input service and check that a scene is loaded."""
        self.add_observer(ServiceLocator.get_service(Input))
        if self._scene_manager.current_scene is None:
            raise RuntimeError("no scene found")

    def _root(self) -> GameObject:
        scene = self._scene_manager.current_scene
        if scene is None:
            raise RuntimeError("current scene is null")
        return scene.root

    def step(self, delta: float) -> None:
        """Run one frame lasting ``delta`` seconds."""
        self._window_server.clear()
        self._process_input()
        self._update(delta)
        self._render()
        self._root().destroy_queued()

    def game_loop(self) -> None:
        """Run frames until the window is closed."""
        self._logger.debug("Start game loop")
        last = time.perf_counter()
        while self._window_server.is_open:
            now = time.perf_counter()
            delta, last = now - last, now
            self.step(delta)
        self._logger.debug("Game loop stopped")

    def _process_input(self) -> None:
        for event in self._window_server.poll_events():
            if event.type == pygame.QUIT:
                self._logger.debug("Closing window")
                self._window_server.close()
            self.notify(event)

    def _update(self, delta: float) -> None:
        self._physics_server.update(delta)
        if self._window_server.is_open:
            self._physics_server.debug_draw(self._window_server.window)
        for game_object in list(self._root().children):
            game_object.update(delta)

    def _render(self) -> None:
        root = self._root()
        if self._window_server.is_open:
            window = self._window_server.window
            for game_object in list(root.children):
                game_object.draw(window)
        self._window_server.display()

    def clear(self) -> None:
        """Drop every object of the current scene."""
        self._logger.debug("Clearing World")
        scene = self._scene_manager.current_scene
        if scene is not None:
            scene.root.children.clear()