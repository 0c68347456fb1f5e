"""Events folded into the view state by the reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from storyfinder.domain.models import Story, StoryId


@dataclass(frozen=True, slots=True)
class FetchStarted:
    pass


@dataclass(frozen=True, slots=True)
class FetchSucceeded:
    payload: tuple[Story, ...]


@dataclass(frozen=True, slots=True)
class FetchFailed:
    pass


@dataclass(frozen=True, slots=True)
class ItemRemoved:
    story_id: StoryId


Event = Union[FetchStarted, FetchSucceeded, FetchFailed, ItemRemoved]

__all__ = [
    "Event",
    "FetchFailed",
    "FetchStarted",
    "FetchSucceeded",
    "ItemRemoved",
]
