"""Consumer-facing search session and its wiring."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

import httpx

from storyfinder.config import FinderSettings, get_settings
from storyfinder.domain.models import Story, StoryId, ViewState
from storyfinder.logging import configure_logging, logger
from storyfinder.services.fetch import FetchController
from storyfinder.services.search import SearchController
from storyfinder.services.stories import StoryApiClient
from storyfinder.state.events import ItemRemoved
from storyfinder.state.persisted import PersistedValue
from storyfinder.state.selectors import filter_by_title
from storyfinder.state.store import Listener, ViewStore
from storyfinder.storage.kv import KeyValueStore, SqlKeyValueStore


class SearchSession:
    """What a presentation layer reads and the only mutators it may call."""

    def __init__(
        self,
        store: ViewStore,
        search: SearchController,
        fetcher: FetchController,
    ) -> None:
        self._store = store
        self._search = search
        self._fetcher = fetcher

    @property
    def state(self) -> ViewState:
        return self._store.state

    @property
    def items(self) -> tuple[Story, ...]:
        return self._store.state.items

    @property
    def is_loading(self) -> bool:
        return self._store.state.is_loading

    @property
    def is_error(self) -> bool:
        return self._store.state.is_error

    @property
    def search_term(self) -> str:
        return self._search.search_term

    def filtered_items(self, term: str | None = None) -> tuple[Story, ...]:
        """Current items narrowed by title, using the unsubmitted term by default."""

        return filter_by_title(self.items, self.search_term if term is None else term)

    def on_term_changed(self, new_term: str) -> None:
        self._search.on_term_changed(new_term)

    def on_submit(self) -> None:
        self._search.on_submit()

    def on_remove(self, story_id: StoryId) -> None:
        self._store.dispatch(ItemRemoved(story_id=story_id))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._store.subscribe(listener)

    async def wait_idle(self) -> None:
        await self._fetcher.wait_idle()

    def close(self) -> None:
        self._search.close()


def build_session(
    settings: FinderSettings,
    *,
    store: KeyValueStore,
    http_client: httpx.AsyncClient,
) -> SearchSession:
    """Wire a session; the initial fetch is scheduled on the running loop."""

    view_store = ViewStore()
    fetcher = FetchController(StoryApiClient(http_client, settings.api), view_store.dispatch)
    term = PersistedValue(store, settings.storage.search_key, settings.search.default_term)
    search = SearchController(
        term,
        fetcher,
        endpoint=settings.api.endpoint,
        skip_empty_term=settings.search.skip_empty_term,
    )
    return SearchSession(view_store, search, fetcher)


@asynccontextmanager
async def open_session(
    settings: FinderSettings | None = None,
    *,
    store: KeyValueStore | None = None,
    http_client: httpx.AsyncClient | None = None,
    configure_logs: bool = False,
) -> AsyncIterator[SearchSession]:
    settings = settings or get_settings()
    if configure_logs:
        configure_logging(settings.log_level)
    owned_store = SqlKeyValueStore(settings.storage) if store is None else None
    owned_client = httpx.AsyncClient() if http_client is None else None
    session = build_session(
        settings,
        store=store if store is not None else owned_store,
        http_client=http_client if http_client is not None else owned_client,
    )
    logger.info("search_session_opened", endpoint=settings.api.endpoint)
    try:
        yield session
    finally:
        try:
            await session.wait_idle()
        except Exception:
            logger.exception("search_session_drain_failed")
        session.close()
        if owned_client is not None:
            try:
                await owned_client.aclose()
            except Exception:
                logger.exception("search_session_client_close_failed")
        if owned_store is not None:
            try:
                owned_store.dispose()
            except Exception:
                logger.exception("search_session_store_close_failed")
        logger.info("search_session_closed")


__all__ = ["SearchSession", "build_session", "open_session"]
