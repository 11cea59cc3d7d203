"""Tests for session persistence."""

import json

from webterm.session.storage import (
    PREFERENCES_KEY,
    STATE_KEY,
    JsonStateStore,
    load_snapshot,
    save_snapshot,
)
from webterm.types import CommandKind, HistoryEntry, Preferences, SessionSnapshot


class TestJsonStateStore:
    """Test the key-value store."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonStateStore(tmp_path / "state.json")
        assert store.get("anything") is None
        assert store.get("anything", 7) == 7

    def test_set_get_delete(self, tmp_path):
        store = JsonStateStore(tmp_path / "nested" / "state.json")
        store.set("a", {"x": 1})
        assert store.get("a") == {"x": 1}
        store.delete("a")
        assert store.get("a") is None

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{not json")
        assert JsonStateStore(path).get("a") is None

    def test_non_object_reads_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("[]")
        assert JsonStateStore(path).get("a") is None


class TestSnapshots:
    """Test history and preference round-trips."""

    def test_round_trip(self, tmp_path):
        store = JsonStateStore(tmp_path / "state.json")
        snapshot = SessionSnapshot(
            history=[
                HistoryEntry(command="ls", output="d 0 projects", kind=CommandKind.SUCCESS),
                HistoryEntry(
                    command="cd nowhere",
                    output="Directory not found: nowhere",
                    kind=CommandKind.ERROR,
                    directory="/projects",
                ),
            ],
            preferences=Preferences(volume=0.8, muted=True),
        )

        save_snapshot(store, snapshot)
        restored = load_snapshot(store)

        assert restored == snapshot

    def test_keys_on_disk(self, tmp_path):
        path = tmp_path / "state.json"
        save_snapshot(JsonStateStore(path), SessionSnapshot())
        data = json.loads(path.read_text())
        assert data[STATE_KEY] == {"history": []}
        assert data[PREFERENCES_KEY] == {"volume": 0.5, "muted": False}

    def test_empty_store_gives_defaults(self, tmp_path):
        snapshot = load_snapshot(JsonStateStore(tmp_path / "state.json"))
        assert snapshot.history == []
        assert snapshot.preferences == Preferences()

    def test_invalid_values_discarded(self, tmp_path):
        """Bad history or preferences fall back to defaults independently."""
        path = tmp_path / "state.json"
        path.write_text(
            json.dumps(
                {
                    STATE_KEY: {"history": [{"command": "ls", "kind": "bogus"}]},
                    PREFERENCES_KEY: {"volume": 0.25},
                }
            )
        )
        snapshot = load_snapshot(JsonStateStore(path))
        assert snapshot.history == []
        assert snapshot.preferences.volume == 0.25

    def test_invalid_preferences_discarded(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({PREFERENCES_KEY: {"volume": 5}}))
        assert load_snapshot(JsonStateStore(path)).preferences == Preferences()
