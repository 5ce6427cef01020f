"""Exception hierarchy for quotesync.

All quotesync exceptions inherit from :class:`QuoteSyncError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations


class QuoteSyncError(Exception):
    """Base exception for all quotesync errors."""


class ConfigError(QuoteSyncError):
    """Configuration loading or validation failure."""


class QuoteValidationError(QuoteSyncError):
    """A quote record is missing its text or category.

    Attributes:
        errors: Individual validation error messages.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class ImportRejectedError(QuoteSyncError):
    """An import document was rejected as a whole."""


class StorageError(QuoteSyncError):
    """Key/value storage read or write failure."""


class RemoteFetchError(QuoteSyncError):
    """The remote quote source could not be fetched or parsed."""
