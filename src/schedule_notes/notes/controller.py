# src/schedule_notes/notes/controller.py

"""
Notes buffer controller.

Keeps the latest note text and commits it to storage:
- after a quiet period (debounced auto-save), or
- immediately on an explicit save.

State machine:
  IDLE --on_text_changed--> PENDING_COMMIT
  PENDING_COMMIT --on_text_changed--> PENDING_COMMIT (timer re-armed)
  PENDING_COMMIT --timer fires / commit_now--> IDLE

Independently of the phase, the buffer is "dirty" from the first change until
a write succeeds. A failed auto-save leaves it dirty, so flush() still writes it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.ports import KeyValueStore, TimerHandle, TimerScheduler
from ..errors import StorageError
from ..schedule.models import NOTES_KEY

logger = logging.getLogger(__name__)

DEFAULT_AUTOSAVE_DELAY_SECONDS = 1.0

CommitListener = Callable[[str], None]


class NotesPhase(StrEnum):
    IDLE = "idle"
    PENDING_COMMIT = "pending_commit"


class NotesBufferController:
    def __init__(
        self,
        storage: KeyValueStore,
        timers: TimerScheduler,
        *,
        delay_seconds: float = DEFAULT_AUTOSAVE_DELAY_SECONDS,
    ) -> None:
        self._storage = storage
        self._timers = timers
        self._delay = max(0.0, float(delay_seconds))

        self._text = ""
        # True from the first change until a write of that text succeeds.
        self._dirty = False
        self._pending: TimerHandle | None = None
        # Bumped on every arm/cancel; a callback holding an older value is stale.
        self._generation = 0
        self._listeners: list[CommitListener] = []

    # ---- state ----

    @property
    def phase(self) -> NotesPhase:
        return NotesPhase.IDLE if self._pending is None else NotesPhase.PENDING_COMMIT

    @property
    def text(self) -> str:
        """Latest text seen by the controller (may be ahead of storage)."""
        return self._text

    @property
    def dirty(self) -> bool:
        """Whether the buffer holds text that has not been written yet."""
        return self._dirty

    @property
    def delay_seconds(self) -> float:
        return self._delay

    def subscribe(self, listener: CommitListener) -> None:
        """Call `listener(text)` after every successful write."""
        self._listeners.append(listener)

    # ---- low-level helpers ----

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _write(self, text: str) -> None:
        self._storage.set(NOTES_KEY, text)
        self._dirty = False
        logger.debug("Notes committed (%d chars)", len(text))
        for listener in list(self._listeners):
            try:
                listener(text)
            except Exception:
                logger.exception("Notes commit listener failed.")

    def _on_timer(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._pending = None
        try:
            self._write(self._text)
        except StorageError:
            # No caller to propagate to; the buffer keeps the text for the next save.
            logger.exception("Debounced notes commit failed.")

    # ---- public API ----

    def load(self) -> str:
        """
        Read the stored notes ("" if none).

        Unless it holds unsaved text, the buffer is synced to the stored
        value, so `text` reflects what a fresh session would show.
        """
        stored = self._storage.get(NOTES_KEY) or ""
        if not self._dirty:
            self._text = stored
        return stored

    def has_saved_notes(self) -> bool:
        return bool(self._storage.get(NOTES_KEY))

    def on_text_changed(self, text: str) -> None:
        self._cancel_pending()
        self._text = text
        self._dirty = True
        generation = self._generation
        self._pending = self._timers.call_later(self._delay, lambda: self._on_timer(generation))

    def commit_now(self, text: str) -> None:
        self._cancel_pending()
        self._text = text
        self._dirty = True
        self._write(text)

    def flush(self) -> bool:
        """
        Write unsaved text right away, including text whose auto-save failed.
        Returns False when there was nothing to write.
        """
        if not self._dirty:
            return False
        self.commit_now(self._text)
        return True

    def reset(self) -> None:
        """Drop any pending commit and empty the buffer without writing."""
        self._cancel_pending()
        self._text = ""
        self._dirty = False
