"""Shared fixtures: a fake WordPress API behind httpx.MockTransport."""

from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from helpers import API_URL, FakeClock, FakeCms
from maple_epoch.services.content_fetcher import ContentFetcher
from maple_epoch.services.fetch_cache import FetchCache


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cms() -> FakeCms:
    return FakeCms()


@pytest_asyncio.fixture
async def fetch_cache(cms: FakeCms, clock: FakeClock) -> AsyncIterator[FetchCache]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(cms.handler)) as client:
        yield FetchCache(http_client=client, clock=clock)


@pytest.fixture
def fetcher(fetch_cache: FetchCache) -> ContentFetcher:
    return ContentFetcher(cache=fetch_cache, base_url=API_URL)
