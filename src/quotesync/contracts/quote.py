"""Quote record contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, StrictStr, ValidationError

ALL_CATEGORIES = "all"


class Quote(BaseModel):
    """A single ``{text, category}`` record.

    ``text`` is the natural key used when reconciling against a remote list.
    """

    text: StrictStr
    category: StrictStr

    model_config = {"frozen": True, "extra": "ignore"}


QuoteList = list[Quote]


class RecordCheck(BaseModel):
    """Outcome of checking one raw record against the quote schema."""

    ok: bool
    quote: Quote | None = None
    reason: str | None = None


def check_record(raw: Any) -> RecordCheck:
    """Validate a decoded JSON value as a quote record.

    Only ``text`` and ``category`` are kept; both must be strings.
    """
    if not isinstance(raw, dict):
        return RecordCheck(ok=False, reason=f"expected an object, got {type(raw).__name__}")
    try:
        quote = Quote.model_validate(raw)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        return RecordCheck(ok=False, reason=f"invalid field(s): {', '.join(fields) or 'record'}")
    return RecordCheck(ok=True, quote=quote)


def dump_quotes(quotes: list[Quote]) -> list[dict[str, str]]:
    return [quote.model_dump(mode="json") for quote in quotes]


DEFAULT_QUOTES: tuple[Quote, ...] = (
    Quote(text="The future depends on what you do today.", category="Motivation"),
    Quote(text="Learning never exhausts the mind.", category="Education"),
    Quote(text="Action is the foundational key to all success.", category="Motivation"),
    Quote(text="Code is like humor. When you have to explain it, it’s bad.", category="Programming"),
    Quote(
        text="The only way to learn a new programming language is by writing programs in it.",
        category="Programming",
    ),
)
