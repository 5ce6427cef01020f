"""Periodic automatic sync as a cancellable asyncio task."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from types import TracebackType

from quotesync.contracts.sync import SyncMode, SyncOutcome
from quotesync.sync.service import SyncService

_LOG = logging.getLogger(__name__)


class PeriodicSync:
    """Runs an ``AUTO`` sync every *interval* seconds until stopped.

    Use as an async context manager so the task is always torn down::

        async with PeriodicSync(service, interval=60.0):
            ...
    """

    def __init__(
        self,
        service: SyncService,
        *,
        interval: float,
        on_outcome: Callable[[SyncOutcome], None] | None = None,
        run_immediately: bool = False,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._service = service
        self._interval = interval
        self._on_outcome = on_outcome
        self._run_immediately = run_immediately
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="quotesync-periodic-sync")

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def __aenter__(self) -> PeriodicSync:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    async def _run(self) -> None:
        if not self._run_immediately:
            await asyncio.sleep(self._interval)
        while True:
            await self._tick()
            await asyncio.sleep(self._interval)

    async def _tick(self) -> None:
        try:
            outcome = await self._service.sync(SyncMode.AUTO)
        except Exception:
            _LOG.exception("Automatic sync failed; retrying at the next tick")
            return
        _LOG.debug("Automatic sync finished: %s", outcome.status.value)
        if self._on_outcome is None:
            return
        try:
            self._on_outcome(outcome)
        except Exception:
            _LOG.exception("Sync outcome callback failed")
