# tests/conftest.py

from __future__ import annotations

import itertools
from pathlib import Path
from types import SimpleNamespace

import pytest

from schedule_notes.core.state import AppState
from schedule_notes.notes.controller import NotesBufferController
from schedule_notes.schedule.store import ScheduleStore
from schedule_notes.storage.memory_store import InMemoryKeyValueStore

from .fakes import VirtualTimerScheduler


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="schedule-notes-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="memory",
        db_path=tmp_path / "schedule_notes.sqlite3",
        autosave_delay_ms=1000,
        show_tips=False,
    )


@pytest.fixture()
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def timers() -> VirtualTimerScheduler:
    return VirtualTimerScheduler()


@pytest.fixture()
def clock_ms():
    """Deterministic millisecond clock: 1000, 1001, 1002, ..."""
    counter = itertools.count(1000)
    return lambda: next(counter)


@pytest.fixture()
def schedule(storage: InMemoryKeyValueStore, clock_ms) -> ScheduleStore:
    return ScheduleStore(storage, clock_ms=clock_ms)


@pytest.fixture()
def notes(storage: InMemoryKeyValueStore, timers: VirtualTimerScheduler) -> NotesBufferController:
    return NotesBufferController(storage, timers, delay_seconds=1.0)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    storage: InMemoryKeyValueStore,
    schedule: ScheduleStore,
    notes: NotesBufferController,
) -> AppState:
    """AppState wired with the in-memory store and virtual timers."""
    return AppState(settings=settings, storage=storage, schedule=schedule, notes=notes)
