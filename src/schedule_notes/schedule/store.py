# schedule/store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from time import time_ns

from ..core.ports import KeyValueStore
from ..errors import ValidationError
from .codec import decode_schedule, encode_schedule
from .models import NOTES_KEY, SCHEDULE_KEY, Task

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time_ns() // 1_000_000


class ScheduleStore:
    """
    Ordered task collection persisted under the "schedule" key.

    Every operation starts from a fresh read of storage; nothing is cached
    between calls. Mutations are read -> modify in memory -> one full write,
    so a failed write leaves the stored collection untouched.

    Single-writer: two processes sharing one backend can lose updates.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        clock_ms: Callable[[], int] = _now_ms,
    ) -> None:
        self._storage = storage
        self._clock_ms = clock_ms

    # ---- low-level helpers ----

    def _read(self) -> list[Task]:
        return decode_schedule(self._storage.get(SCHEDULE_KEY))

    def _write(self, tasks: list[Task]) -> None:
        self._storage.set(SCHEDULE_KEY, encode_schedule(tasks))

    def _next_id(self, tasks: list[Task]) -> int:
        newest = max((t.id for t in tasks), default=0)
        return max(int(self._clock_ms()), newest + 1)

    @staticmethod
    def _validate(time: str, description: str) -> str:
        if not time:
            raise ValidationError("time", "Please select a time for your task.")
        text = (description or "").strip()
        if not text:
            raise ValidationError("description", "Please enter a task description.")
        return text

    # ---- public API ----

    def add_task(self, time: str, description: str) -> Task:
        text = self._validate(time, description)

        tasks = self._read()
        task = Task(id=self._next_id(tasks), time=time, description=text)
        tasks.append(task)
        # list.sort is stable: equal times keep insertion order.
        tasks.sort(key=lambda t: t.time)
        self._write(tasks)

        logger.debug("Task added id=%s time=%s total=%d", task.id, task.time, len(tasks))
        return task

    def remove_task(self, task_id: int) -> None:
        tasks = self._read()
        kept = [t for t in tasks if t.id != task_id]
        self._write(kept)
        if len(kept) == len(tasks):
            logger.debug("remove_task: id=%s not found (no-op)", task_id)
        else:
            logger.debug("Task removed id=%s total=%d", task_id, len(kept))

    def list_tasks(self) -> list[Task]:
        return self._read()

    def count_tasks(self) -> int:
        return len(self._read())

    def clear_all(self) -> None:
        """
        Delete the whole schedule and the stored notes.

        Irreversible. Confirmation is the caller's job.
        """
        self._storage.remove(SCHEDULE_KEY)
        self._storage.remove(NOTES_KEY)
        logger.info("Schedule and notes cleared.")
