"""Quote viewing and editing commands."""

from __future__ import annotations

import argparse

from quotesync.catalog import EMPTY_CATEGORY_MESSAGE, format_quote
from quotesync.cli.common import build_app


def run_show(args: argparse.Namespace) -> int:
    app = build_app(args)
    quote = app.show(args.category)
    if quote is None:
        print(EMPTY_CATEGORY_MESSAGE)
        return 0
    print(format_quote(quote))
    return 0


def run_add(args: argparse.Namespace) -> int:
    app = build_app(args)
    quote = app.add(args.text, args.category)
    print("Added quote:")
    print(format_quote(quote))
    return 0


def run_categories(args: argparse.Namespace) -> int:
    app = build_app(args)
    for category in app.categories():
        print(category)
    return 0


__all__ = ["run_add", "run_categories", "run_show"]
