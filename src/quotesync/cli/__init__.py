"""Command-line interface for quotesync."""

from __future__ import annotations

from quotesync.cli.app import main
from quotesync.cli.common import build_app, format_outcome, resolve_config
from quotesync.cli.parser import build_parser

__all__ = ["build_app", "build_parser", "format_outcome", "main", "resolve_config"]
