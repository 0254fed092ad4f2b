# notes/timers.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager

logger = logging.getLogger(__name__)


class ThreadingTimerScheduler:
    """
    TimerScheduler backed by one daemon threading.Timer per call.

    If a lock is given, callbacks run while holding it. Connectors hold the
    same lock while executing user commands, so a timer callback never
    interleaves with an operation in progress.
    """

    def __init__(self, lock: AbstractContextManager | None = None) -> None:
        self._lock = lock

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
        def run() -> None:
            try:
                if self._lock is None:
                    callback()
                else:
                    with self._lock:
                        callback()
            except Exception:
                logger.exception("Timer callback failed.")

        timer = threading.Timer(max(0.0, float(delay_seconds)), run)
        timer.daemon = True
        timer.start()
        return timer
