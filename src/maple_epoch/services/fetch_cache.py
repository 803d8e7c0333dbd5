"""Time-bounded in-memory cache in front of the WordPress REST API."""

import asyncio
import json
import logging
import time
from typing import Any, Callable

import httpx

from maple_epoch.config import Settings
from maple_epoch.exceptions import CmsFetchError, CmsHttpError, CmsTimeoutError
from maple_epoch.models.cache import CacheEntry

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DURATION = 5 * 60.0
DEFAULT_TIMEOUT = 10.0


class FetchCache:
    """
    Serves JSON payloads from memory while fresh, fetching live otherwise.

    A fresh entry is one younger than ``duration`` seconds. Stale entries are
    kept around and returned when a live fetch fails, so a CMS outage shows
    slightly old content instead of an error. Concurrent misses on the same key
    are not coalesced; the last response to arrive wins.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        duration: float = DEFAULT_CACHE_DURATION,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.http_client = http_client
        self.duration = duration
        self.timeout = timeout
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def cache_key(url: str, options: dict[str, Any] | None = None) -> str:
        """Key derived from the URL and the serialized request options."""
        return url + json.dumps(options, sort_keys=True, default=str)

    def get_entry(self, url: str, options: dict[str, Any] | None = None) -> CacheEntry | None:
        """Return the stored entry for a request, fresh or not."""
        return self._entries.get(self.cache_key(url, options))

    def invalidate(self, url: str | None = None) -> int:
        """Drop entries whose key starts with ``url`` (all entries if None)."""
        if url is None:
            count = len(self._entries)
            self._entries.clear()
            return count

        stale_keys = [key for key in self._entries if key.startswith(url)]
        for key in stale_keys:
            del self._entries[key]
        return len(stale_keys)

    async def fetch(self, url: str, options: dict[str, Any] | None = None) -> Any:
        """
        Fetch a JSON payload, using the cache when it is fresh.

        Args:
            url: Fully-formed request URL
            options: Optional request config (``method``, ``headers``, ``json``)

        Returns:
            The decoded JSON payload

        Raises:
            CmsFetchError: the live fetch failed and nothing was cached
        """
        key = self.cache_key(url, options)
        cached = self._entries.get(key)

        if cached and cached.is_fresh(self._clock(), self.duration):
            logger.debug("Cache hit: %s", url)
            return cached.data

        try:
            data = await asyncio.wait_for(self._fetch_live(url, options), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.error("WordPress API request timeout: %s", url)
            error: CmsFetchError = CmsTimeoutError(
                f"Request timed out after {self.timeout:g}s: {url}", url=url
            )
            return self._stale_or_raise(cached, error, exc)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("WordPress API fetch error: HTTP %s for %s", status, url)
            error = CmsHttpError(f"HTTP error! status: {status}", url=url, status_code=status)
            return self._stale_or_raise(cached, error, exc)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("WordPress API fetch error: %s (%s)", exc, url)
            error = CmsFetchError(f"Request failed: {exc}", url=url)
            return self._stale_or_raise(cached, error, exc)

        self._entries[key] = CacheEntry(data=data, timestamp=self._clock())
        return data

    def _stale_or_raise(
        self,
        cached: CacheEntry | None,
        error: CmsFetchError,
        cause: BaseException,
    ) -> Any:
        if cached is not None:
            logger.warning("Serving stale cache for %s", error.url)
            return cached.data
        raise error from cause

    async def _fetch_live(self, url: str, options: dict[str, Any] | None) -> Any:
        options = options or {}
        method = options.get("method", "GET")
        headers = {"Content-Type": "application/json", **options.get("headers", {})}
        request_kwargs: dict[str, Any] = {"headers": headers}
        if "json" in options:
            request_kwargs["json"] = options["json"]

        if self.http_client is not None:
            response = await self.http_client.request(method, url, **request_kwargs)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(method, url, **request_kwargs)

        response.raise_for_status()
        return response.json()


def create_fetch_cache(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> FetchCache:
    """Factory function to create the process-wide FetchCache."""
    return FetchCache(
        http_client=http_client,
        duration=settings.cache_duration_seconds,
        timeout=settings.request_timeout_seconds,
    )
