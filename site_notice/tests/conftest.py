from datetime import datetime, timezone as dt_timezone

import pytest
from django.core.cache import cache

NOW_TS = 1_700_000_000
NOW = datetime.fromtimestamp(NOW_TS, tz=dt_timezone.utc)


@pytest.fixture(autouse=True)
def clear_notice_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now():
    return NOW
