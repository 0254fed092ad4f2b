# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from schedule_notes.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "SCHEDNOTES_APP_NAME",
        "SCHEDNOTES_LOG_LEVEL",
        "SCHEDNOTES_DATA_DIR",
        "SCHEDNOTES_STORAGE",
        "SCHEDNOTES_DB_PATH",
        "SCHEDNOTES_AUTOSAVE_DELAY_MS",
        "SCHEDNOTES_SHOW_TIPS",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "schedule-notes"
    assert s.storage_backend == "sqlite"
    assert s.autosave_delay_ms == 1000
    assert s.db_path == Path(".local/schedule_notes") / "schedule_notes.sqlite3"
    assert s.show_tips is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SCHEDNOTES_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SCHEDNOTES_STORAGE", "Memory")
    monkeypatch.setenv("SCHEDNOTES_AUTOSAVE_DELAY_MS", "250")
    monkeypatch.setenv("SCHEDNOTES_SHOW_TIPS", "off")

    s = Settings.from_env()
    assert s.data_dir == tmp_path
    assert s.db_path == tmp_path / "schedule_notes.sqlite3"
    assert s.storage_backend == "memory"
    assert s.autosave_delay_ms == 250
    assert s.show_tips is False


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEDNOTES_AUTOSAVE_DELAY_MS", "soon")
    assert Settings.from_env().autosave_delay_ms == 1000

    monkeypatch.setenv("SCHEDNOTES_AUTOSAVE_DELAY_MS", "-5")
    assert Settings.from_env().autosave_delay_ms == 0
