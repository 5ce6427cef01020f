"""Composition root for the quotesync library."""

from __future__ import annotations

import random
from collections.abc import Callable

from quotesync.catalog import pick_quote
from quotesync.contracts.config import QuoteSyncConfig
from quotesync.contracts.quote import Quote
from quotesync.contracts.remote import RemoteSource
from quotesync.contracts.storage import KeyValueStorage
from quotesync.contracts.sync import ImportResult, SyncMode, SyncOutcome
from quotesync.remote import HttpRemoteSource
from quotesync.session import SessionState
from quotesync.storage import FileStorage, MemoryStorage
from quotesync.store import QuoteStore, export_quotes
from quotesync.sync import ConflictApprover, PeriodicSync, SyncProgress, SyncService


class QuoteSync:
    """Quote store, session view state, and sync wired together."""

    def __init__(
        self,
        *,
        store: QuoteStore,
        source: RemoteSource,
        session: SessionState,
        config: QuoteSyncConfig,
        progress: SyncProgress | None = None,
    ) -> None:
        self._store = store
        self._session = session
        self._config = config
        self._service = SyncService(store, source, progress=progress)

    @classmethod
    def from_config(
        cls,
        config: QuoteSyncConfig,
        *,
        storage: KeyValueStorage | None = None,
        session_storage: KeyValueStorage | None = None,
        source: RemoteSource | None = None,
        progress: SyncProgress | None = None,
    ) -> QuoteSync:
        store = QuoteStore(storage or FileStorage(config.storage_dir), key=config.storage_key)
        store.load()
        remote = source or HttpRemoteSource(
            url=config.remote_url,
            page_size=config.page_size,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
        )
        return cls(
            store=store,
            source=remote,
            session=SessionState(session_storage or MemoryStorage()),
            config=config,
            progress=progress,
        )

    @property
    def store(self) -> QuoteStore:
        return self._store

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def service(self) -> SyncService:
        return self._service

    def show(self, category: str | None = None, *, rng: random.Random | None = None) -> Quote | None:
        """Pick a random quote, remembering the filter and the result for the session."""
        if category is not None:
            self._session.selected_category = category
        quote = pick_quote(self._store.quotes, self._session.selected_category, rng)
        self._session.last_viewed = quote
        return quote

    def add(self, text: str, category: str) -> Quote:
        quote = self._store.append(text, category)
        self._session.selected_category = quote.category
        self._session.last_viewed = quote
        return quote

    def categories(self) -> list[str]:
        return self._store.categories()

    def export(self) -> str:
        return export_quotes(self._store.quotes)

    def import_document(self, document: str | bytes) -> ImportResult:
        return self._store.import_json(document)

    async def sync(self, mode: SyncMode = SyncMode.MANUAL, *, approve: ConflictApprover | None = None) -> SyncOutcome:
        return await self._service.sync(mode, approve=approve)

    def periodic(
        self,
        *,
        interval: float | None = None,
        on_outcome: Callable[[SyncOutcome], None] | None = None,
        run_immediately: bool = False,
    ) -> PeriodicSync:
        return PeriodicSync(
            self._service,
            interval=interval if interval is not None else self._config.sync_interval,
            on_outcome=on_outcome,
            run_immediately=run_immediately,
        )
