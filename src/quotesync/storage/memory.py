"""In-memory key/value storage."""

from __future__ import annotations

from quotesync.contracts.storage import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage whose contents live as long as the object.

    Used for session-scoped state and as a test double for durable storage.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self) -> list[str]:
        return list(self._items)
