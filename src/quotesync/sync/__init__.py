"""Sync service, progress protocol, and periodic scheduling."""

from quotesync.sync.progress import NullSyncProgress, SyncProgress
from quotesync.sync.scheduler import PeriodicSync
from quotesync.sync.service import ConflictApprover, SyncService

__all__ = ["ConflictApprover", "NullSyncProgress", "PeriodicSync", "SyncProgress", "SyncService"]
