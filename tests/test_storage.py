"""Tests for spotdiff.core.storage – JSON key-value settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from spotdiff.core.storage import SettingsStore


@pytest.fixture()
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "nested" / "settings.json"


# ---------------------------------------------------------------------------
# Fresh store
# ---------------------------------------------------------------------------

class TestFreshStore:
    def test_missing_file_is_empty(self, settings_file: Path):
        store = SettingsStore(settings_file)
        assert store.get("anything") is None
        assert store.get("anything", 5) == 5
        assert not settings_file.exists()

    def test_file_path(self, settings_file: Path):
        assert SettingsStore(settings_file).file_path == settings_file


# ---------------------------------------------------------------------------
# Reading and writing
# ---------------------------------------------------------------------------

class TestReadWrite:
    def test_set_persists(self, settings_file: Path):
        store = SettingsStore(settings_file)
        store.set("gameMatrixSize", 6)
        data = json.loads(settings_file.read_text(encoding="utf-8"))
        assert data == {"gameMatrixSize": 6}

    def test_values_survive_reload(self, settings_file: Path):
        SettingsStore(settings_file).set("journeyCurrentLevel", 12)
        assert SettingsStore(settings_file).get_int("journeyCurrentLevel", 1) == 12

    def test_remove(self, settings_file: Path):
        store = SettingsStore(settings_file)
        store.set("a", 1)
        store.set("b", 2)
        store.remove("a")
        store.remove("missing")
        assert json.loads(settings_file.read_text(encoding="utf-8")) == {"b": 2}

    def test_get_int_parses_strings(self, settings_file: Path):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"n": "7"}), encoding="utf-8")
        assert SettingsStore(settings_file).get_int("n", 0) == 7

    def test_get_int_rejects_garbage(self, settings_file: Path, caplog: pytest.LogCaptureFixture):
        store = SettingsStore(settings_file)
        store.set("n", "seven")
        with caplog.at_level(logging.WARNING):
            assert store.get_int("n", 3) == 3
        assert "non-integer" in caplog.text

    @pytest.mark.parametrize("raw,expected", [(True, True), (False, False), ("true", True), ("False", False)])
    def test_get_bool(self, settings_file: Path, raw, expected: bool):
        store = SettingsStore(settings_file)
        store.set("flag", raw)
        assert store.get_bool("flag", not expected) is expected

    def test_get_bool_default(self, settings_file: Path):
        store = SettingsStore(settings_file)
        store.set("flag", 12)
        assert store.get_bool("flag", True) is True
        assert store.get_bool("unset", False) is False


# ---------------------------------------------------------------------------
# Failures are swallowed
# ---------------------------------------------------------------------------

class TestFailures:
    def test_corrupt_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        f = tmp_path / "settings.json"
        f.write_text("NOT VALID JSON", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            store = SettingsStore(f)
        assert store.get("x") is None
        assert "Could not load settings" in caplog.text

    def test_non_object_payload(self, tmp_path: Path):
        f = tmp_path / "settings.json"
        f.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        assert SettingsStore(f).get("x", "default") == "default"

    def test_unwritable_path(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        # A directory cannot be read or written as a file.
        store = SettingsStore(tmp_path)
        with caplog.at_level(logging.WARNING):
            store.set("key", 1)
        assert store.get("key") == 1
        assert "Could not save settings" in caplog.text
