"""JSON import/export of quote lists."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from quotesync.contracts.exceptions import ImportRejectedError
from quotesync.contracts.quote import Quote, check_record, dump_quotes

_LOG = logging.getLogger(__name__)


@dataclass
class ImportBatch:
    """Records accepted from an import document."""

    quotes: list[Quote] = field(default_factory=list)
    skipped: int = 0


def export_quotes(quotes: list[Quote]) -> str:
    """Serialize *quotes* as a pretty-printed JSON document."""
    return json.dumps(dump_quotes(quotes), indent=2, ensure_ascii=False) + "\n"


def parse_import(document: str | bytes) -> ImportBatch:
    """Parse an import document, keeping only well-formed records.

    Raises:
        ImportRejectedError: If the document is not a JSON array or contains
            no record whose ``text`` and ``category`` are both strings.
    """
    try:
        payload: Any = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ImportRejectedError("import document is not valid JSON") from exc

    if not isinstance(payload, list):
        raise ImportRejectedError("import document must be a JSON array of quotes")

    batch = ImportBatch()
    for index, raw in enumerate(payload):
        check = check_record(raw)
        if check.ok and check.quote is not None:
            batch.quotes.append(check.quote)
            continue
        batch.skipped += 1
        _LOG.debug("Skipping import record %d: %s", index, check.reason)

    if not batch.quotes:
        raise ImportRejectedError("no valid quotes found in import document")
    if batch.skipped:
        _LOG.warning("Skipped %d invalid record(s) during import", batch.skipped)
    return batch
