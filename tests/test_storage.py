"""Tests for the persistence layer."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from clearance_scout.data.stores import HOME_DEPOT, store_records

PERIOD = (datetime(2000, 1, 1), datetime(2100, 1, 1))


def _result(sku, was, clearance, minutes_ago=0, **overrides):
    record = {
        "store_id": "HD-0206",
        "store_name": "HD Southland",
        "product_name": f"Product {sku}",
        "sku": sku,
        "product_url": f"https://www.homedepot.com/p/{sku}",
        "was_price": Decimal(was) if was else None,
        "clearance_price": Decimal(clearance) if clearance else None,
        "is_on_clearance": clearance is not None,
        "category": "tools",
        "source": "mock",
        "observed_at": datetime(2024, 6, 1) - timedelta(minutes=minutes_ago),
    }
    record.update(overrides)
    return record


async def _scan_with_results(storage, records):
    await storage.upsert_user("reader")
    reservation = await storage.create_scan_with_quota("reader", 10, *PERIOD, retailer="home-depot", zip_code="90017")
    await storage.save_scan_results(reservation.scan.id, records)
    return reservation.scan


@pytest.mark.asyncio
async def test_seed_store_locations_is_idempotent(storage):
    records = store_records()
    assert await storage.seed_store_locations(records) == len(records)
    assert await storage.seed_store_locations(records) == 0

    hd = await storage.list_store_locations(HOME_DEPOT)
    assert len(hd) == len(store_records(HOME_DEPOT))
    assert all(store.chain == HOME_DEPOT for store in hd)
    assert len(await storage.list_all_store_locations()) == len(records)


@pytest.mark.asyncio
async def test_upsert_user(storage):
    user = await storage.upsert_user("u1", zip_code="90017")
    assert user.subscription_plan == "free"

    user = await storage.upsert_user("u1", subscription_plan="pro")
    assert user.zip_code == "90017"
    assert user.subscription_plan == "pro"
    assert await storage.get_user("missing") is None


@pytest.mark.asyncio
async def test_results_sorting(storage):
    scan = await _scan_with_results(
        storage,
        [
            _result("DWD", "149.99", "89.99", minutes_ago=30),
            _result("MG", "12.98", "7.99", minutes_ago=20),
            _result("GE", "34.99", "19.99", minutes_ago=10),
            _result("BEHR", "42.98", "25.98", minutes_ago=40),
        ],
    )

    by_discount, total = await storage.get_scan_results(scan.id)
    assert total == 4
    assert [r.sku for r in by_discount] == ["GE", "DWD", "BEHR", "MG"]

    by_dollars, _ = await storage.get_scan_results(scan.id, sort_by="dollars-off")
    assert [r.sku for r in by_dollars] == ["DWD", "BEHR", "GE", "MG"]

    newest, _ = await storage.get_scan_results(scan.id, sort_by="newest")
    assert [r.sku for r in newest] == ["GE", "MG", "DWD", "BEHR"]


@pytest.mark.asyncio
async def test_results_filters_and_pagination(storage):
    scan = await _scan_with_results(
        storage,
        [
            _result("DWD", "149.99", "89.99"),
            _result("CMMT", "199.99", None, is_price_suppressed=True),
            _result("MG", "12.98", "7.99", category="garden"),
            _result("BEHR", "42.98", "25.98", store_id="HD-0208"),
        ],
    )

    clearance, total = await storage.get_scan_results(scan.id, clearance_only=True)
    assert total == 3
    assert "CMMT" not in {r.sku for r in clearance}

    garden, _ = await storage.get_scan_results(scan.id, category="garden")
    assert [r.sku for r in garden] == ["MG"]

    search, _ = await storage.get_scan_results(scan.id, search="behr")
    assert [r.sku for r in search] == ["BEHR"]

    by_store, _ = await storage.get_scan_results(scan.id, store_id="HD-0208")
    assert [r.sku for r in by_store] == ["BEHR"]

    page_two, total = await storage.get_scan_results(scan.id, page=2, limit=3)
    assert total == 4
    assert len(page_two) == 1


@pytest.mark.asyncio
async def test_scan_ownership_and_listing(storage):
    scan = await _scan_with_results(storage, [])
    assert await storage.get_scan_for_user(scan.id, "reader") is not None
    assert await storage.get_scan_for_user(scan.id, "someone-else") is None
    assert [s.id for s in await storage.list_scans("reader")] == [scan.id]


@pytest.mark.asyncio
async def test_delete_scan_removes_results(storage):
    scan = await _scan_with_results(storage, [_result("DWD", "149.99", "89.99")])

    assert await storage.delete_scan(scan.id)
    assert await storage.get_scan(scan.id) is None
    _, total = await storage.get_scan_results(scan.id)
    assert total == 0
    assert not await storage.delete_scan(scan.id)
