"""Shared CLI helpers."""

from __future__ import annotations

import argparse
from pathlib import Path

from quotesync import QuoteSync, QuoteSyncConfig, SyncOutcome, load_config
from quotesync.sync import SyncProgress


def resolve_config(args: argparse.Namespace) -> QuoteSyncConfig:
    config = load_config(args.config) if args.config else QuoteSyncConfig()
    if args.storage_dir:
        config = config.model_copy(update={"storage_dir": Path(args.storage_dir).expanduser()})
    return config


def build_app(args: argparse.Namespace, *, progress: SyncProgress | None = None) -> QuoteSync:
    return QuoteSync.from_config(resolve_config(args), progress=progress)


def format_outcome(outcome: SyncOutcome) -> str:
    lines = [
        "",
        f"quotesync - {outcome.mode.value} sync: {outcome.status.value}",
        "",
        f"  {outcome.message}",
    ]
    if outcome.fetched:
        lines.append(f"  Fetched:    {outcome.fetched}")
        lines.append(f"  Conflicts:  {outcome.conflicts}")
        lines.append(f"  Quotes:     {outcome.merged_count}")
    lines.append("")
    return "\n".join(lines)
