# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SCHEDNOTES_APP_NAME": "App display name (default: schedule-notes).",
    "SCHEDNOTES_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Storage (gitignored)
    "SCHEDNOTES_DATA_DIR": "Local data + log directory (default: .local/schedule_notes).",
    "SCHEDNOTES_STORAGE": "Storage backend: sqlite (durable, default) or memory (lost on exit).",
    "SCHEDNOTES_DB_PATH": "SQLite path (default: <data_dir>/schedule_notes.sqlite3).",
    # Notes
    "SCHEDNOTES_AUTOSAVE_DELAY_MS": "Quiet period before notes auto-save (default: 1000).",
    # Console
    "SCHEDNOTES_SHOW_TIPS": "Print usage tips on first run (true/false, default: true).",
}
