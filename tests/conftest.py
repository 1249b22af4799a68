from __future__ import annotations

import pytest

from favicon_crawler.config import get_crawler_settings
from tests.fakes import FakeFetcher


@pytest.fixture()
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_crawler_settings.cache_clear()
    yield
    get_crawler_settings.cache_clear()
