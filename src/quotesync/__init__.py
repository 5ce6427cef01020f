"""Public API surface for quotesync."""

__version__ = "0.1.0"

from quotesync.app import QuoteSync
from quotesync.catalog import categories, filter_by_category, format_quote, pick_quote
from quotesync.config import load_config, write_config
from quotesync.contracts import (
    ALL_CATEGORIES,
    DEFAULT_QUOTES,
    ConfigError,
    ImportRejectedError,
    ImportResult,
    KeyValueStorage,
    MergeResult,
    Quote,
    QuoteSyncConfig,
    QuoteSyncError,
    QuoteValidationError,
    RemoteFetchError,
    RemoteSource,
    StorageError,
    SyncMode,
    SyncOutcome,
    SyncStatus,
)
from quotesync.reconcile import Reconciler
from quotesync.remote import HttpRemoteSource
from quotesync.session import SessionState
from quotesync.storage import FileStorage, MemoryStorage
from quotesync.store import QuoteStore, export_quotes, parse_import
from quotesync.sync import PeriodicSync, SyncProgress, SyncService

__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_QUOTES",
    "ConfigError",
    "FileStorage",
    "HttpRemoteSource",
    "ImportRejectedError",
    "ImportResult",
    "KeyValueStorage",
    "MemoryStorage",
    "MergeResult",
    "PeriodicSync",
    "Quote",
    "QuoteStore",
    "QuoteSync",
    "QuoteSyncConfig",
    "QuoteSyncError",
    "QuoteValidationError",
    "Reconciler",
    "RemoteFetchError",
    "RemoteSource",
    "SessionState",
    "StorageError",
    "SyncMode",
    "SyncOutcome",
    "SyncProgress",
    "SyncService",
    "SyncStatus",
    "__version__",
    "categories",
    "export_quotes",
    "filter_by_category",
    "format_quote",
    "load_config",
    "parse_import",
    "pick_quote",
    "write_config",
]
