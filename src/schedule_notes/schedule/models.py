# schedule/models.py

from __future__ import annotations

from dataclasses import dataclass

# Storage keys shared by the schedule store and the notes controller.
SCHEDULE_KEY = "schedule"
NOTES_KEY = "notes"


@dataclass(slots=True, frozen=True)
class Task:
    """
    A single scheduled item.

    Notes:
    - `id` grows with creation order (millisecond clock, bumped on collision).
    - `time` is the literal "HH:MM" string the caller supplied; it is the sort key.
    - `description` is stored trimmed.
    """

    id: int
    time: str
    description: str
