"""The engine entry point: builds the services and plays a scene."""

from __future__ import annotations

from typing import Iterable

from isaac.input import Input
from isaac.logger import Level, Logger
from isaac.physics import PhysicsServer2D
from isaac.scene import Scene, SceneManager
from isaac.service_locator import ServiceLocator
from isaac.window_server import WindowServer
from isaac.world import World


class SceneNotFoundError(RuntimeError):
    """Raised when the game is started without a scene."""


class Isaac:
    """Registers every engine service and runs the main scene."""

    def __init__(
        self, name: str, window_size: Iterable[float], level: Level = Level.INFO
    ):
        self._logger = ServiceLocator.register_service(Logger, level)
        self._window_server = ServiceLocator.register_service(
            WindowServer, window_size, name
        )
        self._physics_server = ServiceLocator.register_service(PhysicsServer2D)
        self._scene_manager = ServiceLocator.register_service(SceneManager)
        self._input = ServiceLocator.register_service(Input)
        self._world = World(
            self._window_server, self._scene_manager, self._physics_server
        )
        self._main_scene: Scene | None = None

    def set_scene(self, scene: Scene) -> None:
        """Choose the scene that ``run`` will play."""
        self._main_scene = scene

    def run(self) -> int:
        """Play the scene until the window closes; return the exit status."""
        self._start()
        try:
            self._world.game_loop()
        finally:
            self._shutdown()
        return 0

    def _start(self) -> None:
        if self._main_scene is None:
            raise SceneNotFoundError(
                "cannot find any scene to display; "
                "call Isaac.set_scene before starting the game"
            )
        self._scene_manager.set_scene(self._main_scene)
        self._main_scene = None
        self._world.start()
        self._logger.info("Game started")

    def _shutdown(self) -> None:
        self._logger.info("Closing Isaac game")
        self._world.clear()
        self._window_server.close()