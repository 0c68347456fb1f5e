from storyfinder.state.events import (
    Event,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    ItemRemoved,
)
from storyfinder.state.persisted import PersistedValue
from storyfinder.state.reducer import reduce
from storyfinder.state.store import ViewStore

__all__ = [
    "Event",
    "FetchFailed",
    "FetchStarted",
    "FetchSucceeded",
    "ItemRemoved",
    "PersistedValue",
    "ViewStore",
    "reduce",
]
