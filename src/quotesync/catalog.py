"""Category index and quote selection."""

from __future__ import annotations

import random

from quotesync.contracts.quote import ALL_CATEGORIES, Quote

EMPTY_CATEGORY_MESSAGE = "No quotes in this category yet."


def categories(quotes: list[Quote]) -> list[str]:
    """Distinct categories of *quotes*, in first-seen order."""
    return list(dict.fromkeys(quote.category for quote in quotes))


def filter_by_category(quotes: list[Quote], category: str | None) -> list[Quote]:
    if category is None or category == ALL_CATEGORIES:
        return list(quotes)
    return [quote for quote in quotes if quote.category == category]


def pick_quote(quotes: list[Quote], category: str | None = None, rng: random.Random | None = None) -> Quote | None:
    """Pick a random quote from *category*, or ``None`` if it has none."""
    candidates = filter_by_category(quotes, category)
    if not candidates:
        return None
    return (rng or random).choice(candidates)


def format_quote(quote: Quote) -> str:
    return f'"{quote.text}"\nCategory: {quote.category}'
