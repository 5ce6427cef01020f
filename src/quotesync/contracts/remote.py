"""Remote quote source contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from quotesync.contracts.quote import Quote


class RemoteSource(ABC):
    @abstractmethod
    async def fetch(self) -> list[Quote]:
        """Return the current remote page of quotes.

        Raises:
            RemoteFetchError: If the source cannot be reached or parsed.
        """
        ...  # pragma: no cover
