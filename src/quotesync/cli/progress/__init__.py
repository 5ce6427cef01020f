"""Terminal progress displays."""

from quotesync.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
