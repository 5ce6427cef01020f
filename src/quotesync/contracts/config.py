"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_REMOTE_URL = "https://jsonplaceholder.typicode.com/posts"


class QuoteSyncConfig(BaseModel):
    storage_dir: Path = Path(".quotesync")
    storage_key: str = "quotes"
    remote_url: str = DEFAULT_REMOTE_URL
    page_size: int = Field(default=10, ge=1, le=100)
    sync_interval: float = Field(default=60.0, gt=0)
    request_timeout: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=0, ge=0, le=5)

    model_config = {"frozen": True}

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, value: str) -> str:
        key = value.strip()
        if not key:
            raise ValueError("storage_key must be non-empty")
        if "/" in key or "\\" in key:
            raise ValueError("storage_key must not contain path separators")
        return key

    @field_validator("remote_url")
    @classmethod
    def validate_remote_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("remote_url must be an http(s) URL")
        return value
