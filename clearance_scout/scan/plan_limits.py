"""Subscription plan limits and the atomic monthly quota check."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from clearance_scout.db.models import utcnow
from clearance_scout.db.storage import QuotaReservation, ScanStorage

logger = logging.getLogger(__name__)

DEFAULT_PLAN = "free"


@dataclass(frozen=True)
class PlanLimits:
    monthly_scans: int
    stores_per_scan: int
    max_monthly_cost: Decimal


PLAN_LIMITS: dict[str, PlanLimits] = {
    "free": PlanLimits(monthly_scans=1, stores_per_scan=1, max_monthly_cost=Decimal("0.10")),
    "pro": PlanLimits(monthly_scans=10, stores_per_scan=2, max_monthly_cost=Decimal("2.00")),
    "business": PlanLimits(monthly_scans=50, stores_per_scan=5, max_monthly_cost=Decimal("8.00")),
    "pro_annual": PlanLimits(monthly_scans=10, stores_per_scan=2, max_monthly_cost=Decimal("2.00")),
    "business_annual": PlanLimits(monthly_scans=50, stores_per_scan=5, max_monthly_cost=Decimal("8.00")),
}


def is_known_plan(plan: Optional[str]) -> bool:
    return plan in PLAN_LIMITS


def normalize_plan(plan: Optional[str]) -> str:
    """Unknown or missing tiers are treated as free."""
    return plan if plan in PLAN_LIMITS else DEFAULT_PLAN


def limits_for(plan: Optional[str]) -> PlanLimits:
    return PLAN_LIMITS[normalize_plan(plan)]


def monthly_scan_quota(plan: Optional[str]) -> int:
    return limits_for(plan).monthly_scans


def store_limit_per_scan(plan: Optional[str]) -> int:
    return limits_for(plan).stores_per_scan


def max_monthly_cost(plan: Optional[str]) -> Decimal:
    """Soft operational cost ceiling per month, informational only."""
    return limits_for(plan).max_monthly_cost


def month_bounds(year_month: Optional[tuple[int, int]] = None) -> tuple[datetime, datetime]:
    """
    Half-open [start, end) datetime range for a calendar month.

    Args:
        year_month: (year, month), defaults to the current UTC month

    Returns:
        Tuple of (first instant of the month, first instant of the next month)
    """
    if year_month is None:
        now = utcnow()
        year_month = (now.year, now.month)
    year, month = year_month
    start = datetime(year, month, 1)
    end = datetime(year + 1, 1, 1) if month == 12 else datetime(year, month + 1, 1)
    return start, end


def quota_reset_date(year_month: Optional[tuple[int, int]] = None) -> date:
    """First day of the month after ``year_month``."""
    return month_bounds(year_month)[1].date()


async def check_and_reserve(
    storage: ScanStorage,
    user_id: str,
    quota: int,
    scan_fields: dict,
    year_month: Optional[tuple[int, int]] = None,
) -> QuotaReservation:
    """
    Count the user's scans for the month and create the new scan only if a slot is left.

    Count and insert run in one locked transaction, so of any set of concurrent
    calls for the same user at most ``quota`` minus the existing count succeed.

    Args:
        storage: Persistence layer
        user_id: Scan owner
        quota: Monthly scan quota for the user's plan
        scan_fields: Column values for the new Scan
        year_month: Quota month, defaults to the current one

    Returns:
        QuotaReservation(allowed, current_count, scan)
    """
    start, end = month_bounds(year_month)
    reservation = await storage.create_scan_with_quota(user_id, quota, start, end, **scan_fields)
    if not reservation.allowed:
        logger.info(f"Quota exhausted for user {user_id}: {reservation.current_count}/{quota}")
    return reservation


async def usage(storage: ScanStorage, user_id: str, plan: Optional[str]) -> dict:
    """Scans used this month against the plan quota."""
    start, end = month_bounds()
    used = await storage.count_scans_in_period(user_id, start, end)
    limit = monthly_scan_quota(plan)
    return {
        "used": used,
        "limit": limit,
        "remaining": max(0, limit - used),
        "reset_date": end.date(),
    }
