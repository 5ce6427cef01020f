"""Import and export commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from quotesync import ImportRejectedError, StorageError
from quotesync.cli.common import build_app


def run_export(args: argparse.Namespace) -> int:
    app = build_app(args)
    document = app.export()
    if args.output == "-":
        sys.stdout.write(document)
        return 0

    output = Path(args.output).expanduser()
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"failed writing export file: {output}") from exc
    print(f"Exported {len(app.store)} quote(s) to {output}")
    return 0


def run_import(args: argparse.Namespace) -> int:
    source = Path(args.file).expanduser()
    try:
        document = source.read_bytes()
    except OSError as exc:
        raise ImportRejectedError(f"failed reading import file: {source}") from exc

    app = build_app(args)
    result = app.import_document(document)
    print(f"Imported {result.imported} quote(s) from {source}")
    if result.skipped:
        print(f"Skipped {result.skipped} invalid record(s)")
    return 0


__all__ = ["run_export", "run_import"]
