"""Persistence operations for users, stores, scans and scan results."""

import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from sqlalchemy import case, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clearance_scout.db.models import Scan, ScanResult, StoreLocation, User, utcnow
from clearance_scout.db.session import AsyncSessionLocal
from clearance_scout.scan.state import IllegalTransitionError, ScanStatus, sources_for

logger = logging.getLogger(__name__)

RESULT_SORTS = ("discount-percent", "dollars-off", "newest")


@dataclass
class QuotaReservation:
    """Outcome of an atomic quota check; ``scan`` is set only when allowed."""

    allowed: bool
    current_count: int
    scan: Optional[Scan] = None


class ScanStorage:
    """
    Canonical persistence contract for the scan core.

    Every method opens its own short-lived session from the injected factory,
    so one instance can be shared by the HTTP layer and background scans.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self.session_factory = session_factory or AsyncSessionLocal
        self._user_locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user(self, user_id: str) -> Optional[User]:
        async with self.session_factory() as db:
            return await db.get(User, user_id)

    async def upsert_user(
        self,
        user_id: str,
        zip_code: Optional[str] = None,
        subscription_plan: Optional[str] = None,
    ) -> User:
        """Create a user or update their ZIP and plan. Plan changes apply to the next scan."""
        async with self.session_factory() as db:
            user = await db.get(User, user_id)
            if user is None:
                user = User(id=user_id, zip_code=zip_code, subscription_plan=subscription_plan or "free")
                db.add(user)
            else:
                if zip_code is not None:
                    user.zip_code = zip_code
                if subscription_plan is not None:
                    user.subscription_plan = subscription_plan
            await db.commit()
            await db.refresh(user)
            return user

    # ------------------------------------------------------------------
    # Store locations
    # ------------------------------------------------------------------

    async def seed_store_locations(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Insert store rows that do not exist yet. Existing rows are left untouched."""
        records = list(records)
        if not records:
            return 0

        async with self.session_factory() as db:
            result = await db.execute(select(StoreLocation.id))
            existing = set(result.scalars().all())
            added = 0
            for record in records:
                if record["id"] in existing:
                    continue
                db.add(StoreLocation(**record))
                existing.add(record["id"])
                added += 1
            await db.commit()

        if added:
            logger.info(f"Seeded {added} store locations")
        return added

    async def list_store_locations(self, chain: str, active_only: bool = False) -> list[StoreLocation]:
        async with self.session_factory() as db:
            query = select(StoreLocation).where(StoreLocation.chain == chain).order_by(StoreLocation.id)
            if active_only:
                query = query.where(StoreLocation.is_active.is_(True))
            result = await db.execute(query)
            return list(result.scalars().all())

    async def list_all_store_locations(self) -> list[StoreLocation]:
        async with self.session_factory() as db:
            result = await db.execute(select(StoreLocation).order_by(StoreLocation.id))
            return list(result.scalars().all())

    async def list_stores_missing_coordinates(self) -> list[StoreLocation]:
        async with self.session_factory() as db:
            query = select(StoreLocation).where(
                StoreLocation.is_active.is_(True),
                or_(StoreLocation.latitude.is_(None), StoreLocation.longitude.is_(None)),
            )
            result = await db.execute(query)
            return list(result.scalars().all())

    async def update_store_coordinates(self, store_id: str, latitude: float, longitude: float) -> bool:
        async with self.session_factory() as db:
            result = await db.execute(
                update(StoreLocation)
                .where(StoreLocation.id == store_id)
                .values(latitude=latitude, longitude=longitude)
            )
            await db.commit()
            return result.rowcount > 0

    # ------------------------------------------------------------------
    # Scans
    # ------------------------------------------------------------------

    async def create_scan_with_quota(
        self,
        user_id: str,
        quota: int,
        period_start: datetime,
        period_end: datetime,
        **scan_fields,
    ) -> QuotaReservation:
        """
        Count the user's scans in [period_start, period_end) and insert a new
        pending scan only if the count is below ``quota``.

        The count and the insert share one transaction that holds a row lock on
        the user (SELECT ... FOR UPDATE), so concurrent requests from the same
        user queue behind each other. A per-user asyncio lock gives the same
        guarantee inside one process on databases without row locks.

        Args:
            user_id: Owner of the scan
            quota: Maximum scans allowed in the period
            period_start: Inclusive start of the quota period
            period_end: Exclusive end of the quota period
            **scan_fields: Column values for the new Scan

        Returns:
            QuotaReservation with the created scan when allowed
        """
        async with self._user_locks[user_id]:
            async with self.session_factory() as db:
                async with db.begin():
                    await db.execute(
                        select(User.id).where(User.id == user_id).with_for_update()
                    )
                    current = await self._count_scans(db, user_id, period_start, period_end)
                    if current >= quota:
                        return QuotaReservation(allowed=False, current_count=current)

                    scan = Scan(user_id=user_id, status=ScanStatus.PENDING.value, **scan_fields)
                    db.add(scan)
                    await db.flush()

                await db.refresh(scan)
                return QuotaReservation(allowed=True, current_count=current + 1, scan=scan)

    async def count_scans_in_period(self, user_id: str, period_start: datetime, period_end: datetime) -> int:
        async with self.session_factory() as db:
            return await self._count_scans(db, user_id, period_start, period_end)

    @staticmethod
    async def _count_scans(db: AsyncSession, user_id: str, period_start: datetime, period_end: datetime) -> int:
        result = await db.execute(
            select(func.count(Scan.id)).where(
                Scan.user_id == user_id,
                Scan.created_at >= period_start,
                Scan.created_at < period_end,
            )
        )
        return result.scalar_one()

    async def get_scan(self, scan_id: str) -> Optional[Scan]:
        async with self.session_factory() as db:
            return await db.get(Scan, scan_id)

    async def get_scan_for_user(self, scan_id: str, user_id: str) -> Optional[Scan]:
        scan = await self.get_scan(scan_id)
        if scan is None or scan.user_id != user_id:
            return None
        return scan

    async def list_scans(self, user_id: str, limit: int = 50) -> list[Scan]:
        async with self.session_factory() as db:
            result = await db.execute(
                select(Scan)
                .where(Scan.user_id == user_id)
                .order_by(Scan.created_at.desc())
                .limit(limit)
            )
            return list(result.scalars().all())

    async def transition_scan(self, scan_id: str, target: ScanStatus, **fields) -> Scan:
        """
        Move a scan to ``target`` if its current status allows it.

        The status check is part of the UPDATE's WHERE clause, so two racing
        writers cannot both succeed. ``completed_at`` is stamped on entry into
        a terminal state; terminal states have no outgoing transitions, so it
        is written exactly once.

        Raises:
            IllegalTransitionError: If the scan is missing or not in a source state
        """
        values = dict(fields)
        values["status"] = target.value
        if target == ScanStatus.RUNNING:
            values.setdefault("started_at", utcnow())
        if target.is_terminal:
            values["completed_at"] = utcnow()

        allowed_from = [status.value for status in sources_for(target)]
        async with self.session_factory() as db:
            result = await db.execute(
                update(Scan)
                .where(Scan.id == scan_id, Scan.status.in_(allowed_from))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await db.commit()

            scan = await db.get(Scan, scan_id, populate_existing=True)
            if result.rowcount == 0:
                raise IllegalTransitionError(scan_id, scan.status if scan else None, target.value)
            return scan

    async def update_store_count(self, scan_id: str, store_count: int):
        async with self.session_factory() as db:
            await db.execute(update(Scan).where(Scan.id == scan_id).values(store_count=store_count))
            await db.commit()

    async def delete_scan(self, scan_id: str) -> bool:
        async with self.session_factory() as db:
            await db.execute(delete(ScanResult).where(ScanResult.scan_id == scan_id))
            result = await db.execute(delete(Scan).where(Scan.id == scan_id))
            await db.commit()
            return result.rowcount > 0

    # ------------------------------------------------------------------
    # Scan results
    # ------------------------------------------------------------------

    async def save_scan_results(self, scan_id: str, records: Iterable[Mapping[str, Any]]) -> int:
        """Bulk insert result rows for a scan. Rows are never updated afterwards."""
        rows = [ScanResult(scan_id=scan_id, **record) for record in records]
        if not rows:
            return 0
        async with self.session_factory() as db:
            db.add_all(rows)
            await db.commit()
        return len(rows)

    async def get_scan_results(
        self,
        scan_id: str,
        clearance_only: bool = False,
        category: Optional[str] = None,
        search: Optional[str] = None,
        store_id: Optional[str] = None,
        sort_by: str = "discount-percent",
        page: int = 1,
        limit: int = 50,
    ) -> tuple[list[ScanResult], int]:
        """
        Read a page of results for a scan.

        Returns:
            Tuple of (results on the page, total matching results)
        """
        filters = [ScanResult.scan_id == scan_id]
        if clearance_only:
            filters.append(ScanResult.is_on_clearance.is_(True))
        if category:
            filters.append(ScanResult.category == category)
        if store_id:
            filters.append(ScanResult.store_id == store_id)
        if search:
            pattern = f"%{search}%"
            filters.append(or_(ScanResult.product_name.ilike(pattern), ScanResult.sku.ilike(pattern)))

        dollars_off = func.coalesce(ScanResult.was_price - ScanResult.clearance_price, 0)
        discount = case(
            (ScanResult.was_price > 0, dollars_off / ScanResult.was_price),
            else_=0,
        )
        if sort_by == "dollars-off":
            order = [dollars_off.desc(), ScanResult.id]
        elif sort_by == "newest":
            order = [ScanResult.observed_at.desc(), ScanResult.id]
        else:
            order = [discount.desc(), ScanResult.id]

        page = max(1, page)
        async with self.session_factory() as db:
            total = (
                await db.execute(select(func.count(ScanResult.id)).where(*filters))
            ).scalar_one()
            result = await db.execute(
                select(ScanResult)
                .where(*filters)
                .order_by(*order)
                .offset((page - 1) * limit)
                .limit(limit)
            )
            return list(result.scalars().all()), total
