# tests/test_commands.py

from __future__ import annotations

from schedule_notes.cli.commands import (
    EMPTY_SCHEDULE_TEXT,
    CommandRegistry,
    format_time_12h,
    registry,
)
from schedule_notes.schedule.models import NOTES_KEY


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[str] = []

    def handler(state, arg_text):
        seen.append(arg_text)
        return "ok"

    reg.register("echo", handler, "echo", aliases=["e"])

    assert reg.handle(state, "/echo  hello   world") == "ok"
    assert reg.handle(state, "/E x") == "ok"
    assert seen == ["hello   world", "x"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_remove_flow(state) -> None:
    out = registry.handle(state, "/add 09:00 Standup")
    assert out is not None and "Added 9:00 AM Standup" in out
    registry.handle(state, "/add 13:30 Lunch with team")

    listing = registry.handle(state, "/list") or ""
    assert listing.index("9:00 AM") < listing.index("1:30 PM")
    assert "Lunch with team" in listing

    task_id = state.schedule.list_tasks()[0].id
    registry.handle(state, f"/rm {task_id}")
    assert [t.description for t in state.schedule.list_tasks()] == ["Lunch with team"]


def test_add_validation_messages(state) -> None:
    assert "Please select a time" in (registry.handle(state, "/add") or "")
    assert "Please enter a task description" in (registry.handle(state, "/add 09:00   ") or "")
    assert state.schedule.list_tasks() == []


def test_remove_requires_numeric_id(state) -> None:
    assert "Usage: /rm" in (registry.handle(state, "/rm abc") or "")


def test_empty_list_placeholder(state) -> None:
    assert registry.handle(state, "/list") == EMPTY_SCHEDULE_TEXT


def test_note_append_save(state, timers, storage) -> None:
    registry.handle(state, "/note first line")
    registry.handle(state, "/append second  line")
    assert storage.get(NOTES_KEY) is None
    assert "[unsaved changes]" in (registry.handle(state, "/notes") or "")

    assert registry.handle(state, "/save") == "Saved!"
    assert storage.get(NOTES_KEY) == "first line\nsecond  line"

    timers.advance(5.0)
    assert storage.get(NOTES_KEY) == "first line\nsecond  line"


def test_note_autosaves_after_pause(state, timers, storage) -> None:
    registry.handle(state, "/note draft")
    timers.advance(1.0)
    assert storage.get(NOTES_KEY) == "draft"


def test_clear_requires_confirmation(state, timers, storage) -> None:
    registry.handle(state, "/add 09:00 Standup")
    registry.handle(state, "/note pending text")

    assert "cannot be undone" in (registry.handle(state, "/clear") or "")
    assert len(state.schedule.list_tasks()) == 1

    assert "cleared" in (registry.handle(state, "/clear confirm") or "")
    timers.advance(5.0)
    assert state.schedule.list_tasks() == []
    assert state.notes.load() == ""
    assert storage.get(NOTES_KEY) is None


def test_status(state) -> None:
    registry.handle(state, "/add 09:00 Standup")
    out = registry.handle(state, "/status") or ""
    assert "Tasks: 1" in out
    assert "memory" in out


def test_format_time_12h() -> None:
    assert format_time_12h("00:05") == "12:05 AM"
    assert format_time_12h("09:30") == "9:30 AM"
    assert format_time_12h("12:00") == "12:00 PM"
    assert format_time_12h("23:59") == "11:59 PM"
    assert format_time_12h("") == ""
    assert format_time_12h("soon") == "soon"
