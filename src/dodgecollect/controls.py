"""Keyboard tracking and logical input snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable
import pygame

from .settings import ControlScheme


class Direction(str, Enum):
    """Logical movement keys."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class InputState:
    """Logical keys held during one frame."""

    pressed: frozenset[Direction] = frozenset()

    @classmethod
    def of(cls, *directions: Direction) -> InputState:
        return cls(frozenset(directions))

    def is_pressed(self, direction: Direction) -> bool:
        return direction in self.pressed


def map_keys(held: Iterable[int], controls: ControlScheme) -> InputState:
    """Translate raw key codes into logical directions.

    Every direction accepts any of its aliases, so W and Up both mean UP.
    """
    held_set = set(held)
    bindings = {
        Direction.UP: controls.up,
        Direction.DOWN: controls.down,
        Direction.LEFT: controls.left,
        Direction.RIGHT: controls.right,
    }
    return InputState(frozenset(d for d, keys in bindings.items() if held_set.intersection(keys)))


@dataclass(slots=True)
class KeyTracker:
    """Follows key events into a held-key set."""

    controls: ControlScheme
    held: set[int] = field(default_factory=set)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track an event and return True when it is a confirm press."""
        if event.type == pygame.KEYDOWN:
            self.held.add(event.key)
            return event.key in self.controls.confirm
        if event.type == pygame.KEYUP:
            self.held.discard(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.held.clear()
        return False

    def snapshot(self) -> InputState:
        return map_keys(self.held, self.controls)
