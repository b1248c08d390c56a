import pygame
import pytest

from isaac.engine import Isaac, SceneNotFoundError
from isaac.game_object import GameObject
from isaac.input import Input
from isaac.logger import Level, Logger
from isaac.physics import PhysicsServer2D
from isaac.scene import Scene, SceneManager
from isaac.service_locator import ServiceLocator
from isaac.window_server import WindowServer


class Recorder(GameObject):
    def __init__(self):
        super().__init__()
        self.deltas = []

    def on_update(self, delta):
        self.deltas.append(delta)


@pytest.fixture
def cleanup(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    Input.reset()
    yield
    for service_type in (Input, SceneManager, PhysicsServer2D, WindowServer, Logger):
        ServiceLocator.unregister_service(service_type)
    pygame.display.quit()
    Input.reset()


def test_registers_services(cleanup):
    Isaac("engine", (64, 48))
    window = ServiceLocator.get_service(WindowServer)
    assert window.is_open
    assert window.window.get_size() == (64, 48)
    assert ServiceLocator.get_service(Logger).level == Level.INFO
    assert ServiceLocator.get_service(SceneManager).current_scene is None


def test_run_without_scene_raises(cleanup):
    engine = Isaac("engine", (64, 48))
    with pytest.raises(SceneNotFoundError):
        engine.run()


def test_scene_not_found_is_runtime_error(cleanup):
    engine = Isaac("engine", (64, 48))
    with pytest.raises(RuntimeError, match="scene"):
        engine.run()


def test_run_plays_until_window_closes(cleanup, capsys):
    engine = Isaac("engine", (64, 48))
    scene = Scene()
    recorder = scene.root.make_child(Recorder)
    engine.set_scene(scene)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert engine.run() == 0
    assert len(recorder.deltas) == 1
    assert ServiceLocator.get_service(SceneManager).current_scene is scene
    assert scene.root.children == []
    assert not ServiceLocator.get_service(WindowServer).is_open
    err = capsys.readouterr().err
    assert err.index("Game started") < err.index("Closing Isaac game")


def test_debug_level_logs_initialisation(cleanup, capsys):
    Isaac("engine", (64, 48), Level.DEBUG)
    err = capsys.readouterr().err
    assert "World initialized" in err
    assert "PhysicsServer2D initialized" in err


def test_default_level_hides_debug(cleanup, capsys):
    Isaac("engine", (64, 48))
    assert "World initialized" not in capsys.readouterr().err