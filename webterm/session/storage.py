"""
Session Storage

Key-value persistence for the state that outlives a session: command
history and audio preferences. Everything else lives in memory only.

Keys:
    terminal_state - {"history": [...]}
    preferences    - {"volume": 0.5, "muted": false}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from webterm.types.results import HistoryEntry, Preferences, SessionSnapshot

logger = logging.getLogger(__name__)

STATE_KEY = "terminal_state"
PREFERENCES_KEY = "preferences"


class JsonStateStore:
    """
    A JSON object on disk used as a key-value store.

    A missing or unreadable file reads as empty; write failures are logged.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: expected a JSON object")
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to save state to {self.path}: {e}")


def load_snapshot(store: JsonStateStore) -> SessionSnapshot:
    """Read history and preferences; invalid values fall back to defaults."""
    snapshot = SessionSnapshot()

    state = store.get(STATE_KEY) or {}
    try:
        snapshot.history = [HistoryEntry.model_validate(e) for e in state.get("history", [])]
    except (AttributeError, ValidationError) as e:
        logger.warning(f"Discarding saved history: {e}")

    try:
        snapshot.preferences = Preferences.model_validate(store.get(PREFERENCES_KEY) or {})
    except ValidationError as e:
        logger.warning(f"Discarding saved preferences: {e}")

    return snapshot


def save_snapshot(store: JsonStateStore, snapshot: SessionSnapshot) -> None:
    store.set(STATE_KEY, {"history": [e.model_dump(mode="json") for e in snapshot.history]})
    store.set(PREFERENCES_KEY, snapshot.preferences.model_dump(mode="json"))
