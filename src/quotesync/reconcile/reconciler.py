"""Local/remote quote reconciliation."""

from __future__ import annotations

from quotesync.contracts.quote import Quote
from quotesync.contracts.sync import MergeResult


class Reconciler:
    """Merges a remote quote list into a local one; the remote side wins.

    Quotes are matched on exact ``text``. A match overwrites the local record
    in place and counts as a conflict only when the categories differ.
    Unmatched remote quotes are appended in remote order. Each remote record
    is compared against the merge as it stands at that point, so a ``text``
    repeated in the remote batch can count more than one conflict.
    """

    def merge(self, local: list[Quote], remote: list[Quote]) -> MergeResult:
        merged = list(local)
        conflicts = 0
        added = 0
        replaced = 0

        for incoming in remote:
            index = self._find_text(merged, incoming.text)
            if index is None:
                merged.append(incoming)
                added += 1
                continue
            if merged[index].category != incoming.category:
                conflicts += 1
            merged[index] = incoming
            replaced += 1

        return MergeResult(merged=merged, conflicts=conflicts, added=added, replaced=replaced)

    @staticmethod
    def _find_text(quotes: list[Quote], text: str) -> int | None:
        for index, quote in enumerate(quotes):
            if quote.text == text:
                return index
        return None
