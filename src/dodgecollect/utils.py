"""Shared constants and utility helpers for Dodge & Collect."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple
import json
import math

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 760
FPS = 60

BG_COLOR = (28, 27, 27)
TEXT_COLOR = (255, 255, 255)
HUD_COLOR = (220, 238, 255)
SHADOW_COLOR = (15, 15, 15)

BLUE = (0, 0, 255)
GOLD = (255, 215, 0)
RED = (255, 0, 0)

Point = Tuple[float, float]

SPAWN_POINT: Point = (200.0, 200.0)

PLAYER_SIZE = 40
PLAYER_SPEED = 4
PLAYER_LIFE = 3
COIN_SIZE = 20
ENEMY_SIZE = 40
ENEMY_SPEED = 2

COIN_VALUE = 10
LEVEL_UP_EVERY = 30

DATA_DIR = Path(".dodgecollect")
SETTINGS_FILE = DATA_DIR / "settings.json"
RECORD_FILE = DATA_DIR / "record.json"


def ensure_data_dirs() -> None:
    """Create the data directory for save files."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
