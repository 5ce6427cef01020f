"""Tests for SyncService - caller policy around the reconciler."""

from __future__ import annotations

import asyncio

import pytest

from quotesync import MemoryStorage, MergeResult, Quote, QuoteStore, StorageError, SyncMode, SyncService, SyncStatus
from quotesync.sync import SyncProgress
from tests.fakes.remote import BlockingRemoteSource, FakeRemoteSource, SequenceRemoteSource


def _q(text: str, category: str) -> Quote:
    return Quote(text=text, category=category)


def _store(*quotes: Quote) -> QuoteStore:
    quote_store = QuoteStore(MemoryStorage())
    quote_store.save(list(quotes))
    return quote_store


class RecordingProgress(SyncProgress):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def phase_start(self, phase: str) -> None:
        self.events.append(("start", phase))

    def phase_done(self, phase: str) -> None:
        self.events.append(("done", phase))

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.events.append(("error", phase))


@pytest.mark.asyncio
async def test_auto_sync_applies_merge_with_conflicts_and_persists() -> None:
    quote_store = _store(_q("A", "M"))
    source = FakeRemoteSource([_q("A", "N"), _q("B", "M")])

    outcome = await SyncService(quote_store, source).sync(SyncMode.AUTO)

    assert outcome.status is SyncStatus.APPLIED
    assert outcome.applied
    assert outcome.conflicts == 1
    assert outcome.fetched == 2
    assert outcome.merged_count == 2
    assert quote_store.quotes == [_q("A", "N"), _q("B", "M")]
    assert QuoteStore(quote_store._storage).load() == [_q("A", "N"), _q("B", "M")]


@pytest.mark.asyncio
async def test_auto_sync_ignores_approver() -> None:
    quote_store = _store(_q("A", "M"))
    calls: list[MergeResult] = []

    def approve(result: MergeResult) -> bool:
        calls.append(result)
        return False

    outcome = await SyncService(quote_store, FakeRemoteSource([_q("A", "N")])).sync(SyncMode.AUTO, approve=approve)

    assert outcome.status is SyncStatus.APPLIED
    assert calls == []


@pytest.mark.asyncio
async def test_manual_sync_without_conflicts_applies_without_prompting() -> None:
    quote_store = _store(_q("A", "M"))

    def approve(result: MergeResult) -> bool:
        raise AssertionError("approver must not be called")

    outcome = await SyncService(quote_store, FakeRemoteSource([_q("B", "M")])).sync(SyncMode.MANUAL, approve=approve)

    assert outcome.status is SyncStatus.APPLIED
    assert quote_store.quotes == [_q("A", "M"), _q("B", "M")]


@pytest.mark.asyncio
async def test_manual_sync_with_conflicts_applies_when_approved() -> None:
    quote_store = _store(_q("A", "M"))
    seen: list[int] = []

    def approve(result: MergeResult) -> bool:
        seen.append(result.conflicts)
        return True

    outcome = await SyncService(quote_store, FakeRemoteSource([_q("A", "N")])).sync(SyncMode.MANUAL, approve=approve)

    assert seen == [1]
    assert outcome.status is SyncStatus.APPLIED
    assert quote_store.quotes == [_q("A", "N")]


@pytest.mark.asyncio
async def test_manual_sync_accepts_async_approver() -> None:
    quote_store = _store(_q("A", "M"))

    async def approve(result: MergeResult) -> bool:
        await asyncio.sleep(0)
        return True

    outcome = await SyncService(quote_store, FakeRemoteSource([_q("A", "N")])).sync(SyncMode.MANUAL, approve=approve)

    assert outcome.status is SyncStatus.APPLIED


@pytest.mark.asyncio
async def test_manual_sync_declined_discards_whole_merge() -> None:
    quote_store = _store(_q("A", "M"))
    before_raw = quote_store._storage.get_item("quotes")
    source = FakeRemoteSource([_q("A", "N"), _q("B", "M")])

    outcome = await SyncService(quote_store, source).sync(SyncMode.MANUAL, approve=lambda result: False)

    assert outcome.status is SyncStatus.DECLINED
    assert outcome.conflicts == 1
    assert quote_store.quotes == [_q("A", "M")]
    assert quote_store._storage.get_item("quotes") == before_raw


@pytest.mark.asyncio
async def test_manual_sync_with_conflicts_and_no_approver_declines() -> None:
    quote_store = _store(_q("A", "M"))

    outcome = await SyncService(quote_store, FakeRemoteSource([_q("A", "N")])).sync(SyncMode.MANUAL)

    assert outcome.status is SyncStatus.DECLINED
    assert quote_store.quotes == [_q("A", "M")]


@pytest.mark.asyncio
async def test_empty_remote_is_no_update() -> None:
    quote_store = _store(_q("A", "M"))

    outcome = await SyncService(quote_store, FakeRemoteSource([])).sync(SyncMode.AUTO)

    assert outcome.status is SyncStatus.NO_UPDATE
    assert outcome.message == "No updates from server."
    assert quote_store.quotes == [_q("A", "M")]


@pytest.mark.asyncio
async def test_fetch_failure_is_reported_and_leaves_state_untouched() -> None:
    quote_store = _store(_q("A", "M"))
    progress = RecordingProgress()

    outcome = await SyncService(quote_store, FakeRemoteSource(error="boom"), progress=progress).sync(SyncMode.MANUAL)

    assert outcome.status is SyncStatus.FETCH_FAILED
    assert outcome.message == "Failed to fetch quotes from server."
    assert quote_store.quotes == [_q("A", "M")]
    assert progress.events == [("start", "Fetch"), ("error", "Fetch")]


@pytest.mark.asyncio
async def test_progress_reports_each_phase() -> None:
    progress = RecordingProgress()

    await SyncService(_store(), FakeRemoteSource([_q("A", "M")]), progress=progress).sync(SyncMode.AUTO)

    assert progress.events == [
        ("start", "Fetch"),
        ("done", "Fetch"),
        ("start", "Merge"),
        ("done", "Merge"),
        ("start", "Apply"),
        ("done", "Apply"),
    ]


@pytest.mark.asyncio
async def test_overlapping_sync_is_skipped() -> None:
    quote_store = _store(_q("A", "M"))
    source = BlockingRemoteSource([_q("B", "M")])
    service = SyncService(quote_store, source)

    first = asyncio.create_task(service.sync(SyncMode.AUTO))
    await source.started.wait()
    assert service.in_flight

    second = await service.sync(SyncMode.MANUAL)
    source.release.set()
    first_outcome = await first

    assert second.status is SyncStatus.SKIPPED
    assert first_outcome.status is SyncStatus.APPLIED
    assert source.fetch_calls == 1
    assert not service.in_flight


@pytest.mark.asyncio
async def test_sync_uses_store_contents_at_merge_time() -> None:
    quote_store = _store(_q("A", "M"))
    source = BlockingRemoteSource([_q("B", "M")])
    service = SyncService(quote_store, source)

    task = asyncio.create_task(service.sync(SyncMode.AUTO))
    await source.started.wait()
    quote_store.append("added meanwhile", "Local")
    source.release.set()
    await task

    assert [quote.text for quote in quote_store.quotes] == ["A", "added meanwhile", "B"]


class _FailingStorage(MemoryStorage):
    def set_item(self, key: str, value: str) -> None:
        raise StorageError("read-only")


@pytest.mark.asyncio
async def test_apply_failure_propagates_and_reports_progress_error() -> None:
    quote_store = QuoteStore(_FailingStorage({"quotes": "[]"}))
    quote_store.load()
    progress = RecordingProgress()

    with pytest.raises(StorageError, match="read-only"):
        await SyncService(quote_store, FakeRemoteSource([_q("A", "M")]), progress=progress).sync(SyncMode.AUTO)

    assert progress.events[-1] == ("error", "Apply")


@pytest.mark.asyncio
async def test_unexpected_fetch_error_propagates_and_reports_progress_error() -> None:
    quote_store = _store(_q("A", "M"))
    progress = RecordingProgress()
    source = SequenceRemoteSource([RuntimeError("unexpected")])

    with pytest.raises(RuntimeError, match="unexpected"):
        await SyncService(quote_store, source, progress=progress).sync(SyncMode.AUTO)

    assert progress.events == [("start", "Fetch"), ("error", "Fetch")]
    assert quote_store.quotes == [_q("A", "M")]
