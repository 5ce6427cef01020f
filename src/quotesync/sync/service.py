"""Sync service: fetch, reconcile, and apply remote quotes."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from quotesync.contracts.exceptions import RemoteFetchError
from quotesync.contracts.remote import RemoteSource
from quotesync.contracts.sync import MergeResult, SyncMode, SyncOutcome, SyncStatus
from quotesync.reconcile import Reconciler
from quotesync.store import QuoteStore
from quotesync.sync.progress import NullSyncProgress, SyncProgress

_LOG = logging.getLogger(__name__)

ConflictApprover = Callable[[MergeResult], bool | Awaitable[bool]]

_MESSAGES = {
    SyncStatus.APPLIED: "Quotes synced with server.",
    SyncStatus.NO_UPDATE: "No updates from server.",
    SyncStatus.FETCH_FAILED: "Failed to fetch quotes from server.",
    SyncStatus.DECLINED: "Sync cancelled; local quotes kept.",
    SyncStatus.SKIPPED: "A sync is already in progress.",
}


class SyncService:
    """Runs one reconciliation between the store and a remote source.

    ``AUTO`` syncs always apply the merge. ``MANUAL`` syncs that detect
    conflicts apply only if *approve* accepts the merge; otherwise the merge is
    discarded whole. Overlapping calls are not queued: a sync started while
    another is in flight returns ``SKIPPED`` immediately.
    """

    def __init__(
        self,
        store: QuoteStore,
        source: RemoteSource,
        *,
        reconciler: Reconciler | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._store = store
        self._source = source
        self._reconciler = reconciler or Reconciler()
        self._progress = progress or NullSyncProgress()
        self._lock = asyncio.Lock()

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    async def sync(self, mode: SyncMode = SyncMode.AUTO, *, approve: ConflictApprover | None = None) -> SyncOutcome:
        if self._lock.locked():
            _LOG.info("Skipping %s sync; another sync is in flight", mode.value)
            return self._outcome(SyncStatus.SKIPPED, mode)

        async with self._lock:
            self._progress.phase_start("Fetch")
            try:
                remote = await self._source.fetch()
            except RemoteFetchError as exc:
                _LOG.warning("Remote fetch failed: %s", exc)
                self._progress.phase_error("Fetch", exc)
                return self._outcome(SyncStatus.FETCH_FAILED, mode)
            except Exception as exc:
                self._progress.phase_error("Fetch", exc)
                raise
            self._progress.phase_done("Fetch")

            if not remote:
                return self._outcome(SyncStatus.NO_UPDATE, mode)

            self._progress.phase_start("Merge")
            result = self._reconciler.merge(self._store.quotes, remote)
            self._progress.phase_done("Merge")
            _LOG.debug(
                "Merged %d remote quote(s): %d added, %d replaced, %d conflict(s)",
                len(remote),
                result.added,
                result.replaced,
                result.conflicts,
            )

            if mode is SyncMode.MANUAL and result.conflicts > 0:
                if not await self._approved(result, approve):
                    _LOG.info("Manual sync declined with %d conflict(s)", result.conflicts)
                    return self._outcome(SyncStatus.DECLINED, mode, fetched=len(remote), result=result)

            self._progress.phase_start("Apply")
            try:
                self._store.replace_all(result.merged)
            except Exception as exc:
                self._progress.phase_error("Apply", exc)
                raise
            self._progress.phase_done("Apply")
            return self._outcome(SyncStatus.APPLIED, mode, fetched=len(remote), result=result)

    @staticmethod
    async def _approved(result: MergeResult, approve: ConflictApprover | None) -> bool:
        if approve is None:
            return False
        decision = approve(result)
        if inspect.isawaitable(decision):
            decision = await decision
        return bool(decision)

    @staticmethod
    def _outcome(
        status: SyncStatus,
        mode: SyncMode,
        *,
        fetched: int = 0,
        result: MergeResult | None = None,
    ) -> SyncOutcome:
        message = _MESSAGES[status]
        if result is not None and result.conflicts:
            message = f"{message} ({result.conflicts} conflict(s) detected)"
        return SyncOutcome(
            status=status,
            mode=mode,
            fetched=fetched,
            conflicts=result.conflicts if result is not None else 0,
            merged_count=len(result.merged) if result is not None else 0,
            message=message,
        )
