"""Pytest configuration for headless pygame tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def data_dir(tmp_path, monkeypatch) -> Path:
    """Point settings and save files at a temporary directory."""
    from dodgecollect import settings, utils

    monkeypatch.setattr(utils, "DATA_DIR", tmp_path)
    monkeypatch.setattr(settings, "SETTINGS_FILE", tmp_path / "settings.json")
    return tmp_path
