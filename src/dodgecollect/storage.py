"""Best score persistence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol
import logging

from .utils import RECORD_FILE, load_json, save_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Best score and best level reached so far."""

    record: int = 1
    best_level: int = 1

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> GameRecord:
        """Build a record from persisted data, defaulting bad fields to 1."""
        if not isinstance(payload, Mapping):
            return cls()
        return cls(
            record=_at_least_one(payload.get("record")),
            best_level=_at_least_one(payload.get("bestLevel")),
        )

    def to_payload(self) -> dict[str, int]:
        return {"record": self.record, "bestLevel": self.best_level}


def _at_least_one(value: Any) -> int:
    if not value or isinstance(value, bool):
        return 1
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 1
    return max(1, number)


class RecordStore(Protocol):
    """Load/save contract used by the engine."""

    def load(self) -> Mapping[str, Any] | None: ...

    def save(self, record: GameRecord) -> None: ...


class JsonRecordStore:
    """Keeps the record in a small JSON file."""

    def __init__(self, path: Path = RECORD_FILE) -> None:
        self.path = path

    def load(self) -> Mapping[str, Any] | None:
        payload = load_json(self.path, None)
        return payload if isinstance(payload, dict) else None

    def save(self, record: GameRecord) -> None:
        """Write the record; failures are logged, never raised."""
        try:
            save_json(self.path, record.to_payload())
        except OSError as exc:
            logger.warning("Could not save record to %s: %s", self.path, exc)


@dataclass(slots=True)
class MemoryRecordStore:
    """In-memory store that remembers every save."""

    payload: dict[str, Any] | None = None
    saved: list[GameRecord] = field(default_factory=list)

    def load(self) -> Mapping[str, Any] | None:
        return self.payload

    def save(self, record: GameRecord) -> None:
        self.saved.append(record)
        self.payload = record.to_payload()
