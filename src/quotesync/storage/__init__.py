"""Key/value storage backends."""

from quotesync.storage.file import FileStorage
from quotesync.storage.memory import MemoryStorage

__all__ = ["FileStorage", "MemoryStorage"]
