# src/schedule_notes/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..notes.controller import NotesBufferController
from ..schedule.store import ScheduleStore
from .ports import KeyValueStore


@dataclass
class AppState:
    # Settings object (config.Settings, or a SimpleNamespace in tests).
    settings: Any

    storage: KeyValueStore
    schedule: ScheduleStore
    notes: NotesBufferController

    # Held by connectors while running a command and by timer callbacks.
    lock: threading.RLock = field(default_factory=threading.RLock)
