"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("quotesync")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to quotesync.json (defaults are used when omitted)")
    parser.add_argument("--storage-dir", default=None, help="Override the storage directory from the config")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quotesync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Write a quotesync.json config file with defaults")
    init_parser.add_argument(
        "--output",
        "-o",
        default="quotesync.json",
        help="Output file path (default: quotesync.json)",
    )
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing config file")

    show_parser = subparsers.add_parser("show", help="Show a random quote")
    show_parser.add_argument("--category", "-c", default=None, help="Only pick from this category ('all' for any)")
    _add_common(show_parser)

    add_parser = subparsers.add_parser("add", help="Add a quote")
    add_parser.add_argument("text", help="Quote text")
    add_parser.add_argument("category", help="Quote category")
    _add_common(add_parser)

    categories_parser = subparsers.add_parser("categories", help="List categories in first-seen order")
    _add_common(categories_parser)

    export_parser = subparsers.add_parser("export", help="Export quotes as JSON")
    export_parser.add_argument(
        "--output",
        "-o",
        default="quotes.json",
        help="Output file path, or '-' for stdout (default: quotes.json)",
    )
    _add_common(export_parser)

    import_parser = subparsers.add_parser("import", help="Append quotes from a JSON file")
    import_parser.add_argument("file", help="JSON file holding an array of quotes")
    _add_common(import_parser)

    sync_parser = subparsers.add_parser("sync", help="Sync quotes with the server")
    decision = sync_parser.add_mutually_exclusive_group()
    decision.add_argument("--yes", "-y", dest="decision", action="store_const", const=True, help="Accept conflicts")
    decision.add_argument("--no", dest="decision", action="store_const", const=False, help="Decline conflicts")
    sync_parser.set_defaults(decision=None)
    _add_common(sync_parser)

    watch_parser = subparsers.add_parser("watch", help="Sync automatically at a fixed interval")
    watch_parser.add_argument("--interval", type=float, default=None, help="Seconds between syncs")
    watch_parser.add_argument("--ticks", type=int, default=None, help="Stop after this many syncs")
    _add_common(watch_parser)

    return parser


__all__ = ["build_parser"]
