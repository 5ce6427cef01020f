"""Public contracts for quotesync."""

from quotesync.contracts.config import DEFAULT_REMOTE_URL, QuoteSyncConfig
from quotesync.contracts.exceptions import (
    ConfigError,
    ImportRejectedError,
    QuoteSyncError,
    QuoteValidationError,
    RemoteFetchError,
    StorageError,
)
from quotesync.contracts.quote import ALL_CATEGORIES, DEFAULT_QUOTES, Quote, QuoteList, RecordCheck, check_record
from quotesync.contracts.remote import RemoteSource
from quotesync.contracts.storage import KeyValueStorage
from quotesync.contracts.sync import ImportResult, MergeResult, SyncMode, SyncOutcome, SyncStatus

__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_QUOTES",
    "DEFAULT_REMOTE_URL",
    "ConfigError",
    "ImportRejectedError",
    "ImportResult",
    "KeyValueStorage",
    "MergeResult",
    "Quote",
    "QuoteList",
    "QuoteSyncConfig",
    "QuoteSyncError",
    "QuoteValidationError",
    "RecordCheck",
    "RemoteFetchError",
    "RemoteSource",
    "StorageError",
    "SyncMode",
    "SyncOutcome",
    "SyncStatus",
    "check_record",
]
