"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from quotesync import (
    ConfigError,
    ImportRejectedError,
    QuoteSyncError,
    QuoteValidationError,
    RemoteFetchError,
    StorageError,
)
from quotesync.cli.commands import init as init_command
from quotesync.cli.commands import quotes as quotes_command
from quotesync.cli.commands import sync as sync_command
from quotesync.cli.commands import transfer as transfer_command
from quotesync.cli.parser import build_parser


def _dispatch(args: argparse.Namespace) -> int:
    if args.command == "init":
        return init_command.run_init(args)
    if args.command == "show":
        return quotes_command.run_show(args)
    if args.command == "add":
        return quotes_command.run_add(args)
    if args.command == "categories":
        return quotes_command.run_categories(args)
    if args.command == "export":
        return transfer_command.run_export(args)
    if args.command == "import":
        return transfer_command.run_import(args)
    if args.command == "sync":
        outcome = asyncio.run(sync_command.run_sync(args))
        return sync_command.sync_exit_code(outcome)
    if args.command == "watch":
        asyncio.run(sync_command.run_watch(args))
        return 0
    print(f"error: unsupported command: {args.command}", file=sys.stderr)
    return 2


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return _dispatch(args)
    except (ConfigError, QuoteValidationError, ImportRejectedError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except RemoteFetchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except StorageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except QuoteSyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return 130


__all__ = ["main"]
