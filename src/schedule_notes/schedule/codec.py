# src/schedule_notes/schedule/codec.py

"""
JSON codec for the persisted schedule.

Wire format: a JSON array of {"id": <int>, "time": "HH:MM", "task": "<text>"}
objects in stored (sorted) order. Field names match what older installs wrote.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..errors import CorruptedDataError
from .models import Task

logger = logging.getLogger(__name__)


def _task_to_record(task: Task) -> dict[str, Any]:
    return {"id": task.id, "time": task.time, "task": task.description}


def _record_to_task(record: Any, index: int) -> Task:
    if not isinstance(record, dict):
        raise CorruptedDataError(f"schedule item #{index} is not an object")

    raw_id = record.get("id")
    # bool is an int subclass; reject it explicitly.
    if isinstance(raw_id, bool):
        raise CorruptedDataError(f"schedule item #{index} has a non-numeric id")
    if isinstance(raw_id, float) and raw_id.is_integer():
        raw_id = int(raw_id)
    if not isinstance(raw_id, int):
        raise CorruptedDataError(f"schedule item #{index} has a non-numeric id")

    time_value = record.get("time")
    description = record.get("task")
    if not isinstance(time_value, str) or not isinstance(description, str):
        raise CorruptedDataError(f"schedule item #{index} is missing time/task text")

    return Task(id=raw_id, time=time_value, description=description)


def encode_schedule(tasks: list[Task]) -> str:
    return json.dumps([_task_to_record(t) for t in tasks], ensure_ascii=False)


def decode_schedule(raw: str | None) -> list[Task]:
    """
    Decode a stored schedule value.

    An absent or empty value is the empty schedule. Anything else that is not
    a JSON array of well-formed records raises CorruptedDataError.
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Stored schedule is not valid JSON: %s", e)
        raise CorruptedDataError("stored schedule is not valid JSON") from e

    if not isinstance(data, list):
        raise CorruptedDataError("stored schedule is not a JSON array")

    return [_record_to_task(rec, i) for i, rec in enumerate(data)]
