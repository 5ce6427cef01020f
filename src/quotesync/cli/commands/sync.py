"""Manual and periodic sync commands."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import questionary

from quotesync import ConfigError, MergeResult, QuoteSync, SyncMode, SyncOutcome, SyncStatus
from quotesync.cli.common import build_app, format_outcome, resolve_config
from quotesync.cli.progress import RichSyncProgress
from quotesync.sync import ConflictApprover

_LOG = logging.getLogger(__name__)


def make_approver(decision: bool | None) -> ConflictApprover:
    """Build the conflict approver for a manual sync.

    An explicit ``--yes``/``--no`` wins; otherwise the user is asked when
    stdin is a terminal, and conflicts are declined when it is not.
    """

    async def approve(result: MergeResult) -> bool:
        if decision is not None:
            return decision
        if not sys.stdin.isatty():
            _LOG.warning("Declining %d conflict(s) in non-interactive mode; pass --yes to accept", result.conflicts)
            return False
        answer = await questionary.confirm(
            f"{result.conflicts} conflict(s) found. Replace local quotes with the server versions?",
            default=False,
        ).ask_async()
        return bool(answer)

    return approve


async def run_sync(args: argparse.Namespace) -> SyncOutcome:
    approve = make_approver(args.decision)
    prompting = args.decision is None and sys.stdin.isatty()
    if args.verbose or prompting:
        app = build_app(args)
        outcome = await app.sync(SyncMode.MANUAL, approve=approve)
    else:
        with RichSyncProgress() as progress:
            app = build_app(args, progress=progress)
            outcome = await app.sync(SyncMode.MANUAL, approve=approve)

    print(format_outcome(outcome))
    return outcome


async def run_watch(args: argparse.Namespace) -> int:
    if args.ticks is not None and args.ticks < 1:
        raise ConfigError("--ticks must be at least 1")
    config = resolve_config(args)
    interval = args.interval if args.interval is not None else config.sync_interval
    app = QuoteSync.from_config(config)

    finished = asyncio.Event()
    completed = 0

    def on_outcome(outcome: SyncOutcome) -> None:
        nonlocal completed
        completed += 1
        print(format_outcome(outcome), flush=True)
        if args.ticks is not None and completed >= args.ticks:
            finished.set()

    print(f"Syncing every {interval:g}s with {config.remote_url} (Ctrl-C to stop)", flush=True)
    async with app.periodic(interval=interval, on_outcome=on_outcome, run_immediately=True):
        await finished.wait()
    return completed


def sync_exit_code(outcome: SyncOutcome) -> int:
    return 4 if outcome.status is SyncStatus.FETCH_FAILED else 0


__all__ = ["make_approver", "run_sync", "run_watch", "sync_exit_code"]
