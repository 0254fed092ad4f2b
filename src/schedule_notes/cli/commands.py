# src/schedule_notes/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import ValidationError
from ..schedule.models import Task

# Handlers get the raw text after the command name (leading spaces stripped),
# so note text keeps its inner whitespace.
CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

EMPTY_SCHEDULE_TEXT = "No tasks scheduled yet. Add your first task with /add HH:MM description."


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:]
        parts = body.split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg_text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_time_12h(time24: str) -> str:
    """
    "14:05" -> "2:05 PM". Values that do not look like HH:MM are returned as-is.
    """
    if not time24:
        return time24
    hours, sep, minutes = time24.partition(":")
    if not sep:
        return time24
    try:
        h = int(hours)
    except ValueError:
        return time24
    hour12 = h % 12 or 12
    ampm = "PM" if h >= 12 else "AM"
    return f"{hour12}:{minutes} {ampm}"


def format_schedule(tasks: list[Task]) -> str:
    if not tasks:
        return EMPTY_SCHEDULE_TEXT
    lines = ["Schedule:"]
    for t in tasks:
        lines.append(f"  {format_time_12h(t.time):>8}  {t.description}  (id {t.id})")
    return "\n".join(lines)


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, arg_text: str) -> str:
    settings = state.settings
    backend = getattr(settings, "storage_backend", "?")
    location = getattr(settings, "db_path", None) if backend == "sqlite" else "memory"
    return (
        "Status:\n"
        f"  Storage: {backend} ({location})\n"
        f"  Tasks: {state.schedule.count_tasks()}\n"
        f"  Notes: {state.notes.phase.value}, autosave after {state.notes.delay_seconds:g}s"
    )


def cmd_add(state: AppState, arg_text: str) -> str:
    """
    /add HH:MM description
    """
    parts = arg_text.split(maxsplit=1)
    time_value = parts[0] if parts else ""
    description = parts[1] if len(parts) > 1 else ""
    try:
        task = state.schedule.add_task(time_value, description)
    except ValidationError as e:
        logger.debug("add rejected field=%s", e.field)
        return f"{e.message} Usage: /add HH:MM description"
    return f"Added {format_time_12h(task.time)} {task.description} (id {task.id}).\n" + format_schedule(
        state.schedule.list_tasks()
    )


def cmd_list(state: AppState, arg_text: str) -> str:
    return format_schedule(state.schedule.list_tasks())


def cmd_remove(state: AppState, arg_text: str) -> str:
    """
    /rm <id>
    """
    raw = arg_text.strip()
    try:
        task_id = int(raw)
    except ValueError:
        return "Usage: /rm <id> (see /list for ids)."
    state.schedule.remove_task(task_id)
    return format_schedule(state.schedule.list_tasks())


def cmd_note(state: AppState, arg_text: str) -> str:
    """
    /note <text>  -> replace the notes buffer (auto-saved after a pause)
    """
    state.notes.on_text_changed(arg_text)
    return "Notes updated (autosave pending)."


def cmd_append(state: AppState, arg_text: str) -> str:
    """
    /append <text>  -> add a line to the notes buffer (auto-saved after a pause)
    """
    current = state.notes.text
    text = f"{current}\n{arg_text}" if current else arg_text
    state.notes.on_text_changed(text)
    return "Line appended (autosave pending)."


def cmd_notes(state: AppState, arg_text: str) -> str:
    text = state.notes.text
    body = text if text else "(empty)"
    suffix = " [unsaved changes]" if state.notes.dirty else ""
    return f"Notes{suffix}:\n{body}"


def cmd_save(state: AppState, arg_text: str) -> str:
    state.notes.commit_now(state.notes.text)
    return "Saved!"


def cmd_clear(state: AppState, arg_text: str) -> str:
    """
    /clear          -> ask for confirmation
    /clear confirm  -> wipe schedule and notes
    """
    if arg_text.strip().lower() != "confirm":
        return (
            "This deletes ALL schedule and notes data and cannot be undone.\n"
            "Type /clear confirm to proceed."
        )
    state.notes.reset()
    state.schedule.clear_all()
    return "All data cleared successfully!"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage and autosave status.")
registry.register("add", cmd_add, help_text="Add a task: /add HH:MM description.", aliases=["a"])
registry.register("list", cmd_list, help_text="Show the schedule.", aliases=["ls"])
registry.register("rm", cmd_remove, help_text="Remove a task by id: /rm <id>.", aliases=["remove"])
registry.register("note", cmd_note, help_text="Replace the notes text: /note <text>.")
registry.register("append", cmd_append, help_text="Append a line to the notes: /append <text>.")
registry.register("notes", cmd_notes, help_text="Show the notes buffer.")
registry.register("save", cmd_save, help_text="Save the notes right now.", aliases=["s"])
registry.register("clear", cmd_clear, help_text="Delete everything: /clear confirm.")
