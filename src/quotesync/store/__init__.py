"""Quote store and import/export helpers."""

from quotesync.store.store import DEFAULT_STORAGE_KEY, QuoteStore
from quotesync.store.transfer import ImportBatch, export_quotes, parse_import

__all__ = ["DEFAULT_STORAGE_KEY", "ImportBatch", "QuoteStore", "export_quotes", "parse_import"]
