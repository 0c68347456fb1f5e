"""Single-writer holder of the current view state."""

from __future__ import annotations

from typing import Callable

from storyfinder.domain.models import INITIAL_STATE, ViewState
from storyfinder.logging import logger
from storyfinder.state.events import Event
from storyfinder.state.reducer import reduce

Listener = Callable[[ViewState, Event], None]


class ViewStore:
    """Applies events through :func:`reduce`, one at a time, and fans out the result."""

    def __init__(self, initial: ViewState = INITIAL_STATE) -> None:
        self._state = initial
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: Event) -> ViewState:
        self._state = reduce(self._state, event)
        logger.debug(
            "view_event_applied",
            event_type=type(event).__name__,
            items=len(self._state.items),
            is_loading=self._state.is_loading,
            is_error=self._state.is_error,
        )
        for listener in list(self._listeners):
            listener(self._state, event)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


__all__ = ["Listener", "ViewStore"]
