"""HTTP remote source backed by a JSON posts endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field, StrictStr, ValidationError

from quotesync.contracts.config import DEFAULT_REMOTE_URL
from quotesync.contracts.exceptions import RemoteFetchError
from quotesync.contracts.quote import Quote
from quotesync.contracts.remote import RemoteSource
from quotesync.remote._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

SERVER_CATEGORY_PREFIX = "Server-"


class RemotePost(BaseModel):
    """The subset of a remote post used to synthesize a quote."""

    title: StrictStr
    user_id: int = Field(alias="userId")

    def to_quote(self) -> Quote:
        return Quote(text=self.title, category=f"{SERVER_CATEGORY_PREFIX}{self.user_id}")


class HttpRemoteSource(RemoteSource):
    """Fetches the first page of remote posts and maps them to quotes."""

    def __init__(
        self,
        *,
        url: str = DEFAULT_REMOTE_URL,
        page_size: int = 10,
        timeout: float = 10.0,
        max_retries: int = 0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._page_size = page_size
        self._timeout = timeout
        self._max_retries = max_retries
        self._transport = transport

    async def fetch(self) -> list[Quote]:
        transport = RetryingTransport(transport=self._transport, max_retries=self._max_retries)
        try:
            async with httpx.AsyncClient(transport=transport, timeout=self._timeout) as client:
                response = await client.get(self._url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload: Any = response.json()
        except httpx.HTTPStatusError as exc:
            raise RemoteFetchError(f"remote source returned HTTP {exc.response.status_code}: {self._url}") from exc
        except httpx.HTTPError as exc:
            raise RemoteFetchError(f"failed to reach remote source: {self._url}") from exc
        except ValueError as exc:
            raise RemoteFetchError(f"remote source returned invalid JSON: {self._url}") from exc

        return self._map_page(payload)

    def _map_page(self, payload: Any) -> list[Quote]:
        if not isinstance(payload, list):
            raise RemoteFetchError(f"remote source returned {type(payload).__name__}, expected a list")
        try:
            posts = [RemotePost.model_validate(item) for item in payload[: self._page_size]]
        except ValidationError as exc:
            raise RemoteFetchError(f"remote source returned malformed items: {exc}") from exc
        _LOG.debug("Fetched %d remote quote(s) from %s", len(posts), self._url)
        return [post.to_quote() for post in posts]
