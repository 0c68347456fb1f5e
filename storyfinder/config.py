"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    endpoint: str = Field(
        default="https://hn.algolia.com/api/v1/search?query=",
        description="Search endpoint; the URL-encoded term is appended verbatim.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    @field_validator("endpoint")
    @classmethod
    def _require_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        return value


class StorageSettings(BaseModel):
    dsn: str = Field(
        default="sqlite:///storyfinder.db",
        description="SQLAlchemy DSN of the durable key/value store.",
    )
    search_key: str = Field(default="search", min_length=1)
    echo: bool = False


class SearchSettings(BaseModel):
    default_term: str = "React"
    skip_empty_term: bool = Field(
        default=False,
        description="Do not fetch when the submitted term is empty.",
    )


class FinderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STORYFINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    api: ApiSettings = Field(default_factory=ApiSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> FinderSettings:
    """Return cached settings instance."""

    return FinderSettings()


__all__ = [
    "ApiSettings",
    "FinderSettings",
    "SearchSettings",
    "StorageSettings",
    "get_settings",
]
