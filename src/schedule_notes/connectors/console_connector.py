# src/schedule_notes/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import format_schedule
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..errors import ScheduleNotesError

logger = logging.getLogger(__name__)

WELCOME_TIPS = (
    "Tips:",
    "- Use /save to save notes right away",
    "- Notes auto-save after a short pause without edits",
    "- Use /add HH:MM description to schedule a task",
    "- All data is stored locally on this machine",
)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _is_first_run(state: AppState) -> bool:
    return not state.schedule.list_tasks() and not state.notes.has_saved_notes()


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "schedule-notes"))
    _print_ts(f"[CONSOLE] {app_name}. Use /help for commands. Use /exit to quit.\n")

    with state.lock:
        if getattr(state.settings, "show_tips", True) and _is_first_run(state):
            print(f"Welcome to {app_name}!")
            print("\n".join(WELCOME_TIPS) + "\n")
        print(format_schedule(state.schedule.list_tasks()) + "\n")

    # Commands such as /save print their own reply; only background saves are announced here.
    in_command = False

    def on_notes_saved(text: str) -> None:
        if not in_command:
            _print_ts(f"[NOTES] Saved ({len(text)} chars).")

    state.notes.subscribe(on_notes_saved)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            with state.lock:
                in_command = True
                try:
                    response = command_registry.handle(state, user_input)
                finally:
                    in_command = False
        except ScheduleNotesError as e:
            logger.warning("Command failed: %s", e)
            response = f"Error: {e}"
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list them."

        _print_ts(response)

    try:
        with state.lock:
            if state.notes.flush():
                logger.info("Unsaved notes flushed on exit.")
    except ScheduleNotesError as e:
        logger.error("Saving notes on exit failed: %s", e)
        _print_ts(f"Error: notes could not be saved on exit: {e}")

    logger.info("Console connector finished.")
