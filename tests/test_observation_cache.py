"""Tests for the observation cache."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from clearance_scout.cache.observation_cache import ObservationCache, entry_from_product, negative_entry
from clearance_scout.providers.base import ScrapedProduct

NOW = datetime(2024, 6, 1, 12, 0, 0)
URL = "https://www.homedepot.com/p/312470417"


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(NOW)


@pytest.fixture
def cache(db_session_factory, clock):
    return ObservationCache(db_session_factory, ttl_minutes=60, max_size=5, clock=clock)


def _entry(minutes_ago, **overrides):
    entry = {"sku": "312470417", "is_on_clearance": True, "source": "alt", "observed_at": NOW - timedelta(minutes=minutes_ago)}
    entry.update(overrides)
    return entry


@pytest.mark.asyncio
async def test_fresh_entry_is_returned(cache):
    await cache.put("HD-0206", URL, _entry(10, clearance_price=Decimal("89.99")))

    hit = await cache.get("HD-0206", URL)

    assert hit is not None
    assert hit.is_on_clearance
    assert hit.clearance_price == Decimal("89.99")


@pytest.mark.asyncio
async def test_stale_entry_is_a_miss(cache):
    await cache.put("HD-0206", URL, _entry(61))

    assert await cache.get("HD-0206", URL) is None
    assert await cache.get("HD-0206", URL, max_age_minutes=120) is not None


@pytest.mark.asyncio
async def test_newest_write_wins(cache):
    await cache.put("HD-0206", URL, _entry(30, is_on_clearance=True))
    await cache.put("HD-0206", URL, _entry(5, is_on_clearance=False))

    hit = await cache.get("HD-0206", URL)
    assert hit.is_on_clearance is False


@pytest.mark.asyncio
async def test_put_defaults_observed_at_to_now(cache):
    await cache.put("HD-0206", URL, negative_entry("312470417"))
    hit = await cache.get("HD-0206", URL)
    assert hit.observed_at == NOW
    assert hit.is_on_clearance is False


@pytest.mark.asyncio
async def test_get_batch_returns_latest_fresh_row_per_key(cache):
    other = "https://www.homedepot.com/p/206937568"
    await cache.put("HD-0206", URL, _entry(40, in_stock="3"))
    await cache.put("HD-0206", URL, _entry(20, in_stock="7"))
    await cache.put("HD-0208", URL, _entry(90))
    await cache.put("HD-0206", other, _entry(1, is_on_clearance=False))

    found = await cache.get_batch([("HD-0206", URL), ("HD-0208", URL), ("HD-0206", other), ("HD-9999", URL)])

    assert set(found) == {("HD-0206", URL), ("HD-0206", other)}
    assert found[("HD-0206", URL)].in_stock == "7"
    assert found[("HD-0206", other)].is_on_clearance is False


@pytest.mark.asyncio
async def test_get_batch_empty(cache):
    assert await cache.get_batch([]) == {}


@pytest.mark.asyncio
async def test_purge_expired(cache):
    await cache.put("HD-0206", URL, _entry(120))
    await cache.put("HD-0206", URL, _entry(10))

    assert await cache.purge_expired() == 1
    assert (await cache.stats())["total_entries"] == 1


@pytest.mark.asyncio
async def test_enforce_max_size_evicts_oldest(cache):
    for minutes in range(8):
        await cache.put("HD-0206", f"{URL}?v={minutes}", _entry(minutes))

    assert await cache.enforce_max_size() == 3
    assert await cache.enforce_max_size() == 0

    remaining = await cache.get_batch([("HD-0206", f"{URL}?v={m}") for m in range(8)])
    assert {url for _, url in remaining} == {f"{URL}?v={m}" for m in range(5)}


@pytest.mark.asyncio
async def test_invalidate_store_and_product(cache):
    other = "https://www.homedepot.com/p/206937568"
    await cache.put("HD-0206", URL, _entry(1))
    await cache.put("HD-0206", other, _entry(1))
    await cache.put("HD-0208", URL, _entry(1))

    assert await cache.invalidate_store("HD-0208") == 1
    assert await cache.get("HD-0208", URL) is None

    assert await cache.invalidate_product(URL) == 1
    assert await cache.get("HD-0206", URL) is None
    assert await cache.get("HD-0206", other) is not None


@pytest.mark.asyncio
async def test_stats(cache, clock):
    await cache.put("HD-0206", URL, _entry(10))
    await cache.put("HD-0206", URL, _entry(180))
    await cache.put("HD-0208", URL, _entry(60 * 30))

    stats = await cache.stats()

    assert stats["total_entries"] == 3
    assert stats["entries_last_hour"] == 1
    assert stats["entries_last_24h"] == 2
    assert stats["oldest_entry"] == NOW - timedelta(minutes=60 * 30)
    assert stats["newest_entry"] == NOW - timedelta(minutes=10)
    assert stats["entries_by_store"] == {"HD-0206": 2, "HD-0208": 1}


def test_entry_from_product():
    product = ScrapedProduct(
        name="Drill",
        product_url=URL,
        store_id="HD-0206",
        sku="312470417",
        clearance_price=Decimal("89.99"),
        was_price=Decimal("149.99"),
        is_on_clearance=True,
        source="alt",
    )
    entry = entry_from_product(product)
    assert entry["clearance_price"] == Decimal("89.99")
    assert entry["is_on_clearance"] is True
    assert entry["observed_at"] == product.observed_at
    assert "name" not in entry
