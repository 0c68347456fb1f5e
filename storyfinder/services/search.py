"""Search term handling and the submit path that drives fetches."""

from __future__ import annotations

from storyfinder.domain.models import RequestTarget
from storyfinder.logging import logger
from storyfinder.services.fetch import FetchController
from storyfinder.state.persisted import PersistedValue
from storyfinder.utils.observable import Observable


class SearchController:
    """Binds the persisted term, the submitted request target and the fetcher.

    Term edits only touch the persisted value. The request target is
    recomputed on submit, and every published target triggers one fetch,
    including the target published at construction.
    """

    def __init__(
        self,
        term: PersistedValue,
        fetcher: FetchController,
        *,
        endpoint: str,
        skip_empty_term: bool = False,
    ) -> None:
        self._term = term
        self._fetcher = fetcher
        self._endpoint = endpoint
        self._skip_empty_term = skip_empty_term
        self._target = Observable(self._compose())
        self._unsubscribe = self._target.subscribe(self._on_target)
        self._on_target(self._target.value)

    @property
    def search_term(self) -> str:
        return self._term.get()

    @property
    def target(self) -> RequestTarget:
        return self._target.value

    def on_term_changed(self, new_term: str) -> None:
        self._term.set(new_term)

    def on_submit(self) -> None:
        self._target.publish(self._compose())

    def close(self) -> None:
        self._unsubscribe()

    def _compose(self) -> RequestTarget:
        return RequestTarget(endpoint=self._endpoint, term=self._term.get())

    def _on_target(self, target: RequestTarget) -> None:
        if self._skip_empty_term and not target.term:
            logger.info("fetch_skipped_empty_term", url=target.url)
            return
        self._fetcher.trigger(target)


__all__ = ["SearchController"]
