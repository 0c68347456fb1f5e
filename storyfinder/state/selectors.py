"""Read-only projections derived from the view state."""

from __future__ import annotations

from collections.abc import Iterable

from storyfinder.domain.models import Story


def filter_by_title(items: Iterable[Story], term: str) -> tuple[Story, ...]:
    """Stories whose title contains ``term``, ignoring case, in their original order."""

    needle = term.casefold()
    return tuple(story for story in items if needle in story.title.casefold())


__all__ = ["filter_by_title"]
