"""Turns request targets into fetch lifecycle events."""

from __future__ import annotations

import asyncio
from typing import Callable

from storyfinder.domain.models import RequestTarget
from storyfinder.logging import logger
from storyfinder.services.exceptions import StoryApiError
from storyfinder.services.stories import StoryApiClient
from storyfinder.state.events import Event, FetchFailed, FetchStarted, FetchSucceeded

Dispatch = Callable[[Event], object]


class FetchController:
    """Fire-and-forget fetches reported through ``dispatch``.

    ``trigger`` emits :class:`FetchStarted` before returning and schedules the
    request on the running loop. Overlapping fetches are not cancelled; each
    one dispatches its own outcome when it completes, so the last fetch to
    resolve decides the items.
    """

    def __init__(self, api: StoryApiClient, dispatch: Dispatch) -> None:
        self._api = api
        self._dispatch = dispatch
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def trigger(self, target: RequestTarget) -> None:
        loop = asyncio.get_running_loop()
        self._dispatch(FetchStarted())
        logger.info("fetch_started", url=target.url, term=target.term)
        task = loop.create_task(self._run(target))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, target: RequestTarget) -> None:
        try:
            stories = await self._api.fetch_stories(target.url)
        except StoryApiError as exc:
            logger.warning("fetch_failed", url=target.url, error=str(exc))
            self._dispatch(FetchFailed())
            return
        except Exception:
            logger.exception("fetch_crashed", url=target.url)
            self._dispatch(FetchFailed())
            return
        logger.info("fetch_succeeded", url=target.url, items=len(stories))
        self._dispatch(FetchSucceeded(payload=tuple(stories)))

    async def wait_idle(self) -> None:
        """Wait until every fetch scheduled so far, and any they spawn, has settled."""

        while self._tasks:
            await asyncio.gather(*self._tasks)


__all__ = ["Dispatch", "FetchController"]
