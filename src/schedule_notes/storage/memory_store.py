# storage/memory_store.py

from __future__ import annotations


class InMemoryKeyValueStore:
    """Volatile KeyValueStore (tests, throwaway sessions)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def close(self) -> None:
        return
