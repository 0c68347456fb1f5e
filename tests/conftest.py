"""Shared pytest fixtures for the search client tests."""

from __future__ import annotations

from typing import Any

import pytest

from storyfinder.config import ApiSettings, FinderSettings, SearchSettings, StorageSettings
from storyfinder.storage.kv import InMemoryStore

ENDPOINT = "https://hn.example/api/v1/search?query="


def make_hit(object_id: Any, title: str = "React", **overrides: Any) -> dict[str, Any]:
    hit = {
        "objectID": object_id,
        "title": title,
        "url": f"https://example.com/{object_id}",
        "author": "jordan",
        "num_comments": 3,
        "points": 4,
    }
    hit.update(overrides)
    return hit


def make_settings(**search: Any) -> FinderSettings:
    return FinderSettings(
        api=ApiSettings(endpoint=ENDPOINT),
        storage=StorageSettings(dsn="sqlite://"),
        search=SearchSettings(**search),
    )


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def settings() -> FinderSettings:
    return make_settings()
