"""Sync, merge, and import result contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from quotesync.contracts.quote import Quote


class SyncMode(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


class SyncStatus(str, Enum):
    APPLIED = "applied"
    NO_UPDATE = "no-update"
    FETCH_FAILED = "fetch-failed"
    DECLINED = "declined"
    SKIPPED = "skipped"


class MergeResult(BaseModel):
    """Value returned by :meth:`Reconciler.merge`."""

    merged: list[Quote] = Field(default_factory=list)
    conflicts: int = 0
    added: int = 0
    replaced: int = 0


class SyncOutcome(BaseModel):
    status: SyncStatus
    mode: SyncMode
    fetched: int = 0
    conflicts: int = 0
    merged_count: int = 0
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.status is SyncStatus.APPLIED


class ImportResult(BaseModel):
    imported: int
    skipped: int = 0
