"""HTTP client for the remote story search API."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from storyfinder.config import ApiSettings
from storyfinder.domain.models import SearchResponse, Story
from storyfinder.services.exceptions import StoryApiError


class StoryApiClient:
    """Issues one GET per call and validates the ``hits`` collection.

    Transport errors, non-2xx statuses and bodies without the expected shape
    are all reported as :class:`StoryApiError`. Nothing is retried.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ApiSettings()

    async def fetch_stories(self, url: str) -> list[Story]:
        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            raise StoryApiError(f"Search request failed ({status_code}): {detail}") from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise StoryApiError(f"Search request failed: {exc}") from exc

        try:
            payload = SearchResponse.model_validate(response.json())
        except ValidationError as exc:
            raise StoryApiError(f"Unexpected search response shape: {exc}") from exc
        except ValueError as exc:
            raise StoryApiError(f"Search response is not JSON: {exc}") from exc
        return payload.hits


__all__ = ["StoryApiClient"]
