# src/schedule_notes/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend, timers, schedule store and notes controller into AppState.
"""

from __future__ import annotations

import logging
import threading

from ..config import STORAGE_BACKENDS, get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..notes.controller import NotesBufferController
from ..notes.timers import ThreadingTimerScheduler
from ..schedule.store import ScheduleStore
from ..storage.memory_store import InMemoryKeyValueStore
from ..storage.sqlite_store import SqliteKeyValueStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend not in STORAGE_BACKENDS:
        logger.warning("Unknown storage backend %r; using sqlite.", backend)
        backend = "sqlite"

    if backend == "memory":
        logger.info("Using in-memory storage (nothing survives exit).")
        return InMemoryKeyValueStore()
    return SqliteKeyValueStore(settings.db_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    lock = threading.RLock()
    storage = create_storage(settings)
    notes = NotesBufferController(
        storage,
        ThreadingTimerScheduler(lock=lock),
        delay_seconds=settings.autosave_delay_ms / 1000.0,
    )

    state = AppState(
        settings=settings,
        storage=storage,
        schedule=ScheduleStore(storage),
        notes=notes,
        lock=lock,
    )
    notes.load()
    return state
