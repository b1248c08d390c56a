import io

import pygame
import pytest

from isaac.input import Action, Input
from isaac.logger import Level, Logger
from isaac.observer import Observable
from isaac.service_locator import ServiceLocator, ServiceNotFoundError
from isaac.transform import Vector2


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    ServiceLocator.register_service(Logger, Level.DEBUG, stream=stream)
    Input.reset()
    yield stream
    ServiceLocator.unregister_service(Logger)
    Input.reset()


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def test_init_logs(log_stream):
    Input()
    assert "Input initialized" in log_stream.getvalue()


def test_init_requires_logger():
    ServiceLocator.unregister_service(Logger)
    with pytest.raises(ServiceNotFoundError):
        Input()


def test_key_down_and_up(log_stream):
    inp = Input()
    subject = Observable()
    inp.on_notify(subject, key_down(pygame.K_w))
    assert Input.key_pressed(pygame.K_w)
    inp.on_notify(subject, key_up(pygame.K_w))
    assert not Input.key_pressed(pygame.K_w)


def test_up_key_moves_axis_up(log_stream):
    inp = Input()
    inp.on_notify(Observable(), key_down(pygame.K_w))
    assert Input.y_axis() == -1.0
    assert Input.x_axis() == 0.0
    assert Input.axis() == Vector2(Input.x_axis(), Input.y_axis())


def test_right_and_down_are_positive(log_stream):
    inp = Input()
    inp.on_notify(Observable(), key_down(pygame.K_RIGHT))
    inp.on_notify(Observable(), key_down(pygame.K_s))
    assert Input.x_axis() > 0
    assert Input.y_axis() > 0


def test_opposite_keys_cancel(log_stream):
    inp = Input()
    inp.on_notify(Observable(), key_down(pygame.K_a))
    inp.on_notify(Observable(), key_down(pygame.K_d))
    assert Input.x_axis() == 0.0
    inp.on_notify(Observable(), key_up(pygame.K_d))
    assert Input.x_axis() < 0


def test_state_is_shared_between_instances(log_stream):
    first, second = Input(), Input()
    first.on_notify(Observable(), key_down(pygame.K_SPACE))
    assert second.key_pressed(pygame.K_SPACE)


def test_other_events_do_not_press_keys(log_stream):
    inp = Input()
    inp.on_notify(Observable(), pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2)))
    assert Input.axis() == Vector2()
    assert not any(Input.key_pressed(k) for keys in Input.key_bindings.values() for k in keys)


def test_reset_releases_keys(log_stream):
    inp = Input()
    inp.on_notify(Observable(), key_down(pygame.K_LEFT))
    Input.reset()
    assert not Input.key_pressed(pygame.K_LEFT)
    assert Input.axis() == Vector2()


def test_every_action_has_bindings(log_stream):
    inp = Input()
    assert set(Input.key_bindings) == set(Action)
    for action in Action:
        keys = Input.key_bindings[action]
        assert len(keys) > 0
        for key in keys:
            inp.on_notify(Observable(), key_down(key))
            assert Input.key_pressed(key)
            inp.on_notify(Observable(), key_up(key))
            assert not Input.key_pressed(key)
    assert Input.axis() == Vector2()