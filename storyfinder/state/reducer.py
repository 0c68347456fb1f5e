"""Pure request-lifecycle transitions."""

from __future__ import annotations

from dataclasses import replace

from storyfinder.domain.models import ViewState
from storyfinder.services.exceptions import UnknownEventError
from storyfinder.state.events import (
    Event,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    ItemRemoved,
)


def reduce(state: ViewState, event: Event) -> ViewState:
    """Return the view state that follows ``event``.

    ``items`` is either replaced wholesale (fetch success) or filtered by
    story id (removal). The loading and error flags are never both set.
    Any object that is not one of the four events raises
    :class:`UnknownEventError`.
    """

    if isinstance(event, FetchStarted):
        return replace(state, is_loading=True, is_error=False)
    if isinstance(event, FetchSucceeded):
        return ViewState(items=tuple(event.payload), is_loading=False, is_error=False)
    if isinstance(event, FetchFailed):
        return replace(state, is_loading=False, is_error=True)
    if isinstance(event, ItemRemoved):
        return replace(
            state,
            items=tuple(story for story in state.items if story.id != event.story_id),
        )
    raise UnknownEventError(f"Unhandled view event: {event!r}")


__all__ = ["reduce"]
