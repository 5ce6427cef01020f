"""Remote quote sources."""

from quotesync.remote.http import SERVER_CATEGORY_PREFIX, HttpRemoteSource, RemotePost

__all__ = ["SERVER_CATEGORY_PREFIX", "HttpRemoteSource", "RemotePost"]
