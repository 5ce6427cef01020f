"""Quote store: the canonical in-memory list and its persisted copy."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from quotesync.catalog import categories
from quotesync.contracts.exceptions import QuoteValidationError
from quotesync.contracts.quote import DEFAULT_QUOTES, Quote, check_record, dump_quotes
from quotesync.contracts.storage import KeyValueStorage
from quotesync.contracts.sync import ImportResult
from quotesync.store.transfer import parse_import

_LOG = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "quotes"


class QuoteStore:
    """Single source of truth for the quote list.

    Every successful mutation rewrites the whole list under the storage key;
    there is no incremental persistence.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        defaults: Iterable[Quote] = DEFAULT_QUOTES,
    ) -> None:
        self._storage = storage
        self._key = key
        self._defaults = list(defaults)
        self._quotes: list[Quote] = []

    @property
    def quotes(self) -> list[Quote]:
        return list(self._quotes)

    def __len__(self) -> int:
        return len(self._quotes)

    def load(self) -> list[Quote]:
        """Restore the list from storage, falling back to the defaults.

        A missing value, a value that is not JSON, or JSON that is not an
        array all reset the store to the defaults and persist them. Inside a
        valid array, elements that are not ``{text, category}`` string records
        are filtered out with a warning; storage is not rewritten for that.
        """
        raw = self._storage.get_item(self._key)
        if raw is None:
            _LOG.info("No stored quotes under %r; using defaults", self._key)
            return self._reset_to_defaults()

        try:
            payload: Any = json.loads(raw)
        except json.JSONDecodeError:
            _LOG.warning("Stored quotes under %r are not valid JSON; using defaults", self._key)
            return self._reset_to_defaults()

        if not isinstance(payload, list):
            _LOG.warning("Stored quotes under %r are not a list; using defaults", self._key)
            return self._reset_to_defaults()

        restored: list[Quote] = []
        for index, element in enumerate(payload):
            check = check_record(element)
            if check.quote is None:
                _LOG.warning("Dropping stored record %d under %r: %s", index, self._key, check.reason)
                continue
            restored.append(check.quote)

        self._quotes = restored
        _LOG.debug("Loaded %d quote(s) from %r", len(restored), self._key)
        return self.quotes

    def save(self, quotes: list[Quote] | None = None) -> None:
        """Overwrite the stored value with the full list.

        When *quotes* is given it becomes the current list, but only once the
        write has succeeded.
        """
        target = list(quotes) if quotes is not None else self._quotes
        self._storage.set_item(self._key, json.dumps(dump_quotes(target), ensure_ascii=False))
        self._quotes = target

    def append(self, text: str, category: str) -> Quote:
        """Validate and append a single quote, then persist.

        Raises:
            QuoteValidationError: If the trimmed text or category is empty.
        """
        clean_text = text.strip()
        clean_category = category.strip()
        errors: list[str] = []
        if not clean_text:
            errors.append("quote text must not be empty")
        if not clean_category:
            errors.append("quote category must not be empty")
        if errors:
            raise QuoteValidationError(errors)

        quote = Quote(text=clean_text, category=clean_category)
        self.save([*self._quotes, quote])
        return quote

    def extend(self, quotes: Iterable[Quote]) -> int:
        added = list(quotes)
        if not added:
            return 0
        self.save([*self._quotes, *added])
        return len(added)

    def replace_all(self, quotes: list[Quote]) -> None:
        self.save(quotes)

    def import_json(self, document: str | bytes) -> ImportResult:
        """Append every valid record of an import document and persist once."""
        batch = parse_import(document)
        imported = self.extend(batch.quotes)
        _LOG.info("Imported %d quote(s)", imported)
        return ImportResult(imported=imported, skipped=batch.skipped)

    def categories(self) -> list[str]:
        return categories(self._quotes)

    def _reset_to_defaults(self) -> list[Quote]:
        self.save(self._defaults)
        return self.quotes
