"""Session-scoped view state: the category filter and the last shown quote."""

from __future__ import annotations

import json
import logging

from quotesync.contracts.quote import ALL_CATEGORIES, Quote, check_record
from quotesync.contracts.storage import KeyValueStorage

_LOG = logging.getLogger(__name__)

SELECTED_CATEGORY_KEY = "selectedCategory"
LAST_VIEWED_KEY = "lastViewedQuote"


class SessionState:
    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    @property
    def selected_category(self) -> str:
        value = self._storage.get_item(SELECTED_CATEGORY_KEY)
        return value if value else ALL_CATEGORIES

    @selected_category.setter
    def selected_category(self, category: str) -> None:
        self._storage.set_item(SELECTED_CATEGORY_KEY, category)

    @property
    def last_viewed(self) -> Quote | None:
        raw = self._storage.get_item(LAST_VIEWED_KEY)
        if raw is None:
            return None
        try:
            check = check_record(json.loads(raw))
        except json.JSONDecodeError:
            _LOG.debug("Ignoring unreadable %s session value", LAST_VIEWED_KEY)
            return None
        return check.quote

    @last_viewed.setter
    def last_viewed(self, quote: Quote | None) -> None:
        if quote is None:
            self._storage.remove_item(LAST_VIEWED_KEY)
            return
        self._storage.set_item(LAST_VIEWED_KEY, quote.model_dump_json())

    def clear(self) -> None:
        self._storage.remove_item(SELECTED_CATEGORY_KEY)
        self._storage.remove_item(LAST_VIEWED_KEY)
