"""Key/value storage capability."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """String-keyed, string-valued storage, read and written synchronously."""

    @abstractmethod
    def get_item(self, key: str) -> str | None: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...
