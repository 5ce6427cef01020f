"""Tests for HttpRemoteSource - fetching and mapping remote posts."""

from __future__ import annotations

import httpx
import pytest

from quotesync import HttpRemoteSource, Quote, RemoteFetchError

URL = "https://example.test/posts"


def _posts(count: int) -> list[dict[str, object]]:
    return [{"userId": index % 3 + 1, "id": index, "title": f"title {index}", "body": "..."} for index in range(count)]


def _source(handler, **kwargs) -> HttpRemoteSource:  # type: ignore[no-untyped-def]
    return HttpRemoteSource(url=URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_fetch_maps_title_and_user_id_to_quotes() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[{"userId": 4, "id": 1, "title": "hello", "body": "b"}])

    quotes = await _source(handler).fetch()

    assert quotes == [Quote(text="hello", category="Server-4")]
    assert len(requests) == 1
    assert str(requests[0].url) == URL
    assert requests[0].method == "GET"


@pytest.mark.asyncio
async def test_fetch_takes_only_first_page() -> None:
    quotes = await _source(lambda request: httpx.Response(200, json=_posts(25))).fetch()

    assert len(quotes) == 10
    assert [quote.text for quote in quotes] == [f"title {index}" for index in range(10)]


@pytest.mark.asyncio
async def test_fetch_respects_custom_page_size() -> None:
    quotes = await _source(lambda request: httpx.Response(200, json=_posts(25)), page_size=3).fetch()

    assert len(quotes) == 3


@pytest.mark.asyncio
async def test_fetch_empty_list_returns_no_quotes() -> None:
    assert await _source(lambda request: httpx.Response(200, json=[])).fetch() == []


@pytest.mark.asyncio
async def test_fetch_ignores_malformed_items_beyond_page() -> None:
    payload = [*_posts(2), {"nope": True}]

    quotes = await _source(lambda request: httpx.Response(200, json=payload), page_size=2).fetch()

    assert len(quotes) == 2


@pytest.mark.asyncio
async def test_fetch_http_error_status_raises_remote_fetch_error() -> None:
    with pytest.raises(RemoteFetchError, match="HTTP 500"):
        await _source(lambda request: httpx.Response(500)).fetch()


@pytest.mark.asyncio
async def test_fetch_transport_error_raises_remote_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteFetchError, match="failed to reach remote source"):
        await _source(handler).fetch()


@pytest.mark.asyncio
async def test_fetch_invalid_json_raises_remote_fetch_error() -> None:
    with pytest.raises(RemoteFetchError, match="invalid JSON"):
        await _source(lambda request: httpx.Response(200, text="<html>")).fetch()


@pytest.mark.asyncio
async def test_fetch_non_list_payload_raises_remote_fetch_error() -> None:
    with pytest.raises(RemoteFetchError, match="expected a list"):
        await _source(lambda request: httpx.Response(200, json={"posts": []})).fetch()


@pytest.mark.asyncio
async def test_fetch_malformed_item_raises_remote_fetch_error() -> None:
    with pytest.raises(RemoteFetchError, match="malformed items"):
        await _source(lambda request: httpx.Response(200, json=[{"userId": 1, "title": None}])).fetch()


@pytest.mark.asyncio
async def test_fetch_retries_transient_status_when_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _no_sleep(attempt: int) -> None:
        return None

    monkeypatch.setattr(
        "quotesync.remote._retrying_transport.RetryingTransport._sleep_backoff", staticmethod(_no_sleep)
    )
    responses = [httpx.Response(503), httpx.Response(200, json=_posts(1))]

    quotes = await _source(lambda request: responses.pop(0), max_retries=1).fetch()

    assert quotes == [Quote(text="title 0", category="Server-1")]
    assert responses == []
