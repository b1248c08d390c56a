"""Keyboard state and movement axes fed by window events."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

import pygame

from isaac.logger import Logger
from isaac.observer import Observable, Observer
from isaac.service_locator import ServiceLocator
from isaac.transform import Vector2


class Action(Enum):
    """Logical actions that keys are bound to."""

    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"
    JUMP = "jump"


class Input(Observer[Any]):
    """Tracks pressed keys engine-wide from the events it is notified of.

    The state is shared by every instance, so it can be queried through
    the class without holding a reference to the registered service.
    """

    _pressed: ClassVar[set[int]] = set()
    _axis: ClassVar[Vector2] = Vector2()

    key_bindings: ClassVar[dict[Action, tuple[int, ...]]] = {
        Action.UP: (pygame.K_UP, pygame.K_w),
        Action.LEFT: (pygame.K_LEFT, pygame.K_a),
        Action.DOWN: (pygame.K_DOWN, pygame.K_s),
        Action.RIGHT: (pygame.K_RIGHT, pygame.K_d),
        Action.JUMP: (pygame.K_SPACE,),
    }

    def __init__(self) -> None:
        ServiceLocator.get_service(Logger).debug("Input initialized")

    def on_notify(self, subject: Observable[Any], event: Any) -> None:
        """Record key presses and releases, then recompute the axes."""
        event_type = getattr(event, "type", None)
        if event_type == pygame.KEYDOWN:
            Input._pressed.add(event.key)
        elif event_type == pygame.KEYUP:
            Input._pressed.discard(event.key)
        Input._update_axis()

    @staticmethod
    def _action_active(action: Action) -> bool:
        return any(Input.key_pressed(key) for key in Input.key_bindings[action])

    @staticmethod
    def _update_axis() -> None:
        up = Input._action_active(Action.UP)
        left = Input._action_active(Action.LEFT)
        down = Input._action_active(Action.DOWN)
        right = Input._action_active(Action.RIGHT)
        Input._axis = Vector2(float(right) - float(left), float(down) - float(up))

    @staticmethod
    def key_pressed(key: int) -> bool:
        """Whether ``key`` is currently held down."""
        return key in Input._pressed

    @staticmethod
    def x_axis() -> float:
        """Horizontal movement: -1 left, 1 right, 0 neither or both."""
        return Input._axis.x

    @staticmethod
    def y_axis() -> float:
        """Vertical movement: -1 up, 1 down, 0 neither or both."""
        return Input._axis.y

    @staticmethod
    def axis() -> Vector2:
        """Both movement axes as a vector."""
        return Input._axis

    @staticmethod
    def reset() -> None:
        """Release every key and zero the axes."""
        Input._pressed.clear()
        Input._axis = Vector2()