"""Shared test fixtures for quotesync tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from quotesync import MemoryStorage, Quote, QuoteStore, QuoteSyncConfig


@pytest.fixture
def storage() -> MemoryStorage:
    """Empty in-memory durable storage."""
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> QuoteStore:
    """A store restored from empty storage, so it holds the defaults."""
    quote_store = QuoteStore(storage)
    quote_store.load()
    return quote_store


@pytest.fixture
def sample_quotes() -> list[Quote]:
    return [
        Quote(text="Stay hungry.", category="Motivation"),
        Quote(text="Talk is cheap. Show me the code.", category="Programming"),
        Quote(text="Know thyself.", category="Philosophy"),
    ]


@pytest.fixture
def sample_config(tmp_path: Path) -> QuoteSyncConfig:
    """Config pointing storage at a temporary directory."""
    return QuoteSyncConfig(storage_dir=tmp_path / "storage", sync_interval=0.01)
