"""Init command."""

from __future__ import annotations

import argparse
from pathlib import Path

from quotesync import ConfigError, QuoteSyncConfig, write_config


def run_init(args: argparse.Namespace) -> int:
    output = Path(args.output).expanduser()
    if output.exists() and not args.force:
        raise ConfigError(f"config file already exists: {output} (use --force to overwrite)")
    written = write_config(output, QuoteSyncConfig())
    print(f"Config written to {written}")
    return 0


__all__ = ["run_init"]
