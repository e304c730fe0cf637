"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any
import logging
import pygame

from .utils import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, SETTINGS_FILE, ensure_data_dirs, load_json, save_json

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fullscreen: bool = False
    fps: int = FPS


@dataclass(slots=True)
class ControlScheme:
    """Key bindings; each logical key accepts several aliases."""

    up: list[int] = field(default_factory=lambda: [pygame.K_w, pygame.K_UP])
    down: list[int] = field(default_factory=lambda: [pygame.K_s, pygame.K_DOWN])
    left: list[int] = field(default_factory=lambda: [pygame.K_a, pygame.K_LEFT])
    right: list[int] = field(default_factory=lambda: [pygame.K_d, pygame.K_RIGHT])
    confirm: list[int] = field(default_factory=lambda: [pygame.K_RETURN, pygame.K_KP_ENTER])


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    display: DisplaySettings = field(default_factory=DisplaySettings)
    controls: ControlScheme = field(default_factory=ControlScheme)


class SettingsManager:
    """Load and save game settings."""

    def __init__(self) -> None:
        ensure_data_dirs()
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(SETTINGS_FILE, {})
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", SETTINGS_FILE)
            raw = {}
        settings = GameSettings()

        display = raw.get("display", {})
        if isinstance(display, dict):
            settings.display.width = _positive_int(display.get("width"), settings.display.width)
            settings.display.height = _positive_int(display.get("height"), settings.display.height)
            settings.display.fps = _positive_int(display.get("fps"), settings.display.fps)
            settings.display.fullscreen = bool(display.get("fullscreen", settings.display.fullscreen))

        controls = raw.get("controls", {})
        if isinstance(controls, dict):
            settings.controls = self._load_controls(controls, settings.controls)
        return settings

    @staticmethod
    def _load_controls(payload: dict[str, Any], defaults: ControlScheme) -> ControlScheme:
        return ControlScheme(
            up=_key_list(payload.get("up"), defaults.up),
            down=_key_list(payload.get("down"), defaults.down),
            left=_key_list(payload.get("left"), defaults.left),
            right=_key_list(payload.get("right"), defaults.right),
            confirm=_key_list(payload.get("confirm"), defaults.confirm),
        )

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(SETTINGS_FILE, asdict(self.settings))


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _key_list(value: Any, default: list[int]) -> list[int]:
    if not isinstance(value, list) or not value:
        return list(default)
    try:
        return [int(key) for key in value]
    except (TypeError, ValueError):
        return list(default)
