# src/schedule_notes/core/ports.py

"""
Ports (interfaces) used by the core.

The schedule store and the notes controller depend on Protocols instead of
concrete implementations. This keeps the storage backend and the timer
mechanism swappable and lets tests run against in-memory fakes with virtual time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class KeyValueStore(Protocol):
    """
    Durable string key -> string value store.

    An absent key reads as None. Backends raise StorageError on failure.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """
    Deferred-callback port used for debouncing.

    call_later() must not block; the callback runs once after delay_seconds
    unless the returned handle is cancelled first.
    """

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle: ...
