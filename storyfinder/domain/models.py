"""Immutable models shared by the state, service and session layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

StoryId = str | int


class Story(BaseModel):
    """One search hit, validated from the API's hit object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StoryId = Field(alias="objectID")
    title: str = ""
    url: str | None = None
    author: str = ""
    comment_count: int = Field(default=0, ge=0, alias="num_comments")
    score: int = Field(default=0, alias="points")

    @field_validator("comment_count", "score", mode="before")
    @classmethod
    def _null_to_zero(cls, value):
        return 0 if value is None else value

    @field_validator("title", "author", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value


class SearchResponse(BaseModel):
    """Envelope returned by the search endpoint; only ``hits`` is consumed."""

    hits: list[Story]


@dataclass(frozen=True, slots=True)
class ViewState:
    items: tuple[Story, ...] = ()
    is_loading: bool = False
    is_error: bool = False

    def __post_init__(self) -> None:
        if self.is_loading and self.is_error:
            raise ValueError("view state cannot be loading and failed at once")


INITIAL_STATE = ViewState()


@dataclass(frozen=True, slots=True)
class RequestTarget:
    """Endpoint plus the term captured at the last submit."""

    endpoint: str
    term: str = field(default="")

    @property
    def url(self) -> str:
        return f"{self.endpoint}{quote(self.term, safe='')}"


__all__ = [
    "INITIAL_STATE",
    "RequestTarget",
    "SearchResponse",
    "Story",
    "StoryId",
    "ViewState",
]
