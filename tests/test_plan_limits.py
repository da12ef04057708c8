"""Tests for plan limits and the monthly quota reservation."""

import asyncio
from datetime import date, datetime
from decimal import Decimal

import pytest

from clearance_scout.db.models import Scan
from clearance_scout.scan import plan_limits


def test_plan_tables():
    assert plan_limits.monthly_scan_quota("free") == 1
    assert plan_limits.monthly_scan_quota("pro") == 10
    assert plan_limits.monthly_scan_quota("business_annual") == 50
    assert plan_limits.store_limit_per_scan("free") == 1
    assert plan_limits.store_limit_per_scan("pro_annual") == 2
    assert plan_limits.store_limit_per_scan("business") == 5
    assert plan_limits.max_monthly_cost("business") == Decimal("8.00")


@pytest.mark.parametrize("plan", [None, "", "enterprise", "FREE"])
def test_unknown_plan_defaults_to_free(plan):
    assert plan_limits.limits_for(plan) == plan_limits.PLAN_LIMITS["free"]
    assert not plan_limits.is_known_plan(plan)


def test_month_bounds_half_open():
    assert plan_limits.month_bounds((2024, 2)) == (datetime(2024, 2, 1), datetime(2024, 3, 1))
    assert plan_limits.month_bounds((2024, 12)) == (datetime(2024, 12, 1), datetime(2025, 1, 1))
    assert plan_limits.quota_reset_date((2024, 12)) == date(2025, 1, 1)


def _scan_fields(**overrides):
    fields = {"retailer": "home-depot", "zip_code": "90017", "plan": "pro"}
    fields.update(overrides)
    return fields


@pytest.mark.asyncio
async def test_reserve_until_quota_exhausted(storage):
    await storage.upsert_user("user-1", zip_code="90017", subscription_plan="pro")

    first = await plan_limits.check_and_reserve(storage, "user-1", 2, _scan_fields())
    second = await plan_limits.check_and_reserve(storage, "user-1", 2, _scan_fields())
    third = await plan_limits.check_and_reserve(storage, "user-1", 2, _scan_fields())

    assert first.allowed and first.current_count == 1
    assert second.allowed and second.current_count == 2
    assert not third.allowed
    assert third.current_count == 2
    assert third.scan is None
    assert first.scan.status == "pending"


@pytest.mark.asyncio
@pytest.mark.parametrize("quota", [1, 3, 5])
async def test_concurrent_reservations_never_exceed_quota(storage, quota):
    await storage.upsert_user("racer", subscription_plan="business")

    results = await asyncio.gather(
        *[plan_limits.check_and_reserve(storage, "racer", quota, _scan_fields()) for _ in range(2 * quota)]
    )

    allowed = [r for r in results if r.allowed]
    assert len(allowed) == quota
    assert len(results) - len(allowed) == quota
    start, end = plan_limits.month_bounds()
    assert await storage.count_scans_in_period("racer", start, end) == quota


@pytest.mark.asyncio
async def test_previous_month_scans_do_not_count(storage, db_session_factory):
    await storage.upsert_user("user-2", subscription_plan="free")
    async with db_session_factory() as db:
        db.add(Scan(user_id="user-2", retailer="home-depot", zip_code="90017", created_at=datetime(2020, 1, 15)))
        await db.commit()

    reservation = await plan_limits.check_and_reserve(storage, "user-2", 1, _scan_fields(plan="free"))
    assert reservation.allowed

    january = await plan_limits.check_and_reserve(storage, "user-2", 1, _scan_fields(), year_month=(2020, 1))
    assert not january.allowed


@pytest.mark.asyncio
async def test_usage(storage):
    await storage.upsert_user("user-3", subscription_plan="pro")
    await plan_limits.check_and_reserve(storage, "user-3", 10, _scan_fields())

    usage = await plan_limits.usage(storage, "user-3", "pro")

    assert usage["used"] == 1
    assert usage["limit"] == 10
    assert usage["remaining"] == 9
    assert usage["reset_date"] == plan_limits.quota_reset_date()
