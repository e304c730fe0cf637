from __future__ import annotations

import pygame

from dodgecollect.controls import Direction, InputState, KeyTracker, map_keys
from dodgecollect.settings import ControlScheme


def test_letter_and_arrow_aliases_match() -> None:
    controls = ControlScheme()
    pairs = [
        (pygame.K_w, pygame.K_UP, Direction.UP),
        (pygame.K_s, pygame.K_DOWN, Direction.DOWN),
        (pygame.K_a, pygame.K_LEFT, Direction.LEFT),
        (pygame.K_d, pygame.K_RIGHT, Direction.RIGHT),
    ]
    for letter, arrow, direction in pairs:
        assert map_keys({letter}, controls) == map_keys({arrow}, controls) == InputState.of(direction)


def test_unbound_keys_are_ignored() -> None:
    assert map_keys({pygame.K_q, pygame.K_SPACE}, ControlScheme()) == InputState()


def test_tracker_follows_key_events() -> None:
    tracker = KeyTracker(ControlScheme())

    assert not tracker.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    tracker.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert tracker.snapshot() == InputState.of(Direction.LEFT, Direction.UP)

    tracker.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert tracker.snapshot() == InputState.of(Direction.UP)


def test_tracker_reports_confirm() -> None:
    tracker = KeyTracker(ControlScheme())
    assert tracker.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert tracker.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_KP_ENTER))
    assert tracker.snapshot() == InputState()


def test_focus_loss_releases_keys() -> None:
    tracker = KeyTracker(ControlScheme())
    tracker.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    tracker.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert tracker.snapshot() == InputState()
