"""File-backed key/value storage."""

from __future__ import annotations

import logging
from pathlib import Path

from quotesync.contracts.exceptions import StorageError
from quotesync.contracts.storage import KeyValueStorage

_LOG = logging.getLogger(__name__)


class FileStorage(KeyValueStorage):
    """Durable storage keeping each key in ``<root>/<key>.json``."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def path_for(self, key: str) -> Path:
        return self._root / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise StorageError(f"failed reading storage key {key!r}: {path}") from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            # Undecodable bytes surface as replacement characters; callers parse and recover.
            _LOG.warning("Storage key %r is not valid UTF-8: %s", key, path)
            return data.decode("utf-8", errors="replace")

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"failed writing storage key {key!r}: {path}") from exc
        _LOG.debug("Wrote %d bytes to %s", len(value), path)

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"failed removing storage key {key!r}: {path}") from exc
