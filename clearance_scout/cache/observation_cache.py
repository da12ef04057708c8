"""Database-backed cache of per-store product verifications."""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Mapping, Optional

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clearance_scout import metrics
from clearance_scout.config import settings
from clearance_scout.db.models import Observation, utcnow
from clearance_scout.db.session import AsyncSessionLocal
from clearance_scout.providers.base import ScrapedProduct

logger = logging.getLogger(__name__)

OBSERVATION_FIELDS = (
    "sku",
    "clearance_price",
    "was_price",
    "save_percent",
    "in_stock",
    "delivery_available",
    "is_on_clearance",
    "source",
    "observed_at",
)


def entry_from_product(product: ScrapedProduct) -> dict:
    """Observation values for a verified product."""
    return {name: getattr(product, name) for name in OBSERVATION_FIELDS}


def negative_entry(sku: Optional[str] = None, source: str = "alt") -> dict:
    """Observation values recording that a product is not (or could not be shown to be) on clearance."""
    return {"sku": sku, "is_on_clearance": False, "source": source}


class ObservationCache:
    """
    Time-bounded cache keyed by (store_id, product_url).

    Several rows may exist for one key; reads return the newest row whose
    ``observed_at`` is within the TTL. Expired rows are ignored on read and
    removed by ``purge_expired``.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        ttl_minutes: int | None = None,
        max_size: int | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.session_factory = session_factory or AsyncSessionLocal
        self.ttl_minutes = ttl_minutes or settings.observation_cache_ttl_minutes
        self.max_size = max_size or settings.observation_cache_max_size
        self._clock = clock or utcnow

    def _cutoff(self, max_age_minutes: Optional[int]) -> datetime:
        minutes = self.ttl_minutes if max_age_minutes is None else max_age_minutes
        return self._clock() - timedelta(minutes=minutes)

    async def get(
        self, store_id: str, product_url: str, max_age_minutes: Optional[int] = None
    ) -> Optional[Observation]:
        """Most recent fresh observation for the key, or None."""
        cutoff = self._cutoff(max_age_minutes)
        async with self.session_factory() as db:
            result = await db.execute(
                select(Observation)
                .where(
                    Observation.store_id == store_id,
                    Observation.product_url == product_url,
                    Observation.observed_at > cutoff,
                )
                .order_by(Observation.observed_at.desc())
                .limit(1)
            )
            observation = result.scalars().first()

        metrics.record_cache_lookup(observation is not None)
        return observation

    async def put(self, store_id: str, product_url: str, entry: Mapping[str, Any]) -> str:
        """Append an observation for the key and return its id."""
        values = {name: entry[name] for name in OBSERVATION_FIELDS if entry.get(name) is not None}
        values.setdefault("observed_at", self._clock())
        observation = Observation(store_id=store_id, product_url=product_url, **values)
        async with self.session_factory() as db:
            db.add(observation)
            await db.commit()
        return observation.id

    async def get_batch(
        self, keys: Iterable[tuple[str, str]], max_age_minutes: Optional[int] = None
    ) -> dict[tuple[str, str], Observation]:
        """
        Newest fresh observation for each requested (store_id, product_url) pair.

        Pairs with no fresh row are absent from the result.
        """
        keys = set(keys)
        if not keys:
            return {}

        cutoff = self._cutoff(max_age_minutes)
        key_filter = or_(
            *[
                and_(Observation.store_id == store_id, Observation.product_url == url)
                for store_id, url in keys
            ]
        )
        latest = (
            select(
                Observation.store_id,
                Observation.product_url,
                func.max(Observation.observed_at).label("observed_at"),
            )
            .where(Observation.observed_at > cutoff, key_filter)
            .group_by(Observation.store_id, Observation.product_url)
            .subquery()
        )
        query = select(Observation).join(
            latest,
            and_(
                Observation.store_id == latest.c.store_id,
                Observation.product_url == latest.c.product_url,
                Observation.observed_at == latest.c.observed_at,
            ),
        )

        async with self.session_factory() as db:
            result = await db.execute(query)
            rows = result.scalars().all()

        found = {(row.store_id, row.product_url): row for row in rows}
        for key in keys:
            metrics.record_cache_lookup(key in found)
        return found

    async def purge_expired(self, max_age_minutes: Optional[int] = None) -> int:
        """Delete rows older than the TTL."""
        cutoff = self._cutoff(max_age_minutes)
        deleted = await self._delete(Observation.observed_at < cutoff)
        if deleted:
            logger.info(f"Purged {deleted} expired observations")
        return deleted

    async def invalidate_store(self, store_id: str) -> int:
        return await self._delete(Observation.store_id == store_id)

    async def invalidate_product(self, product_url: str) -> int:
        return await self._delete(Observation.product_url == product_url)

    async def enforce_max_size(self, max_size: Optional[int] = None) -> int:
        """Delete the oldest rows until at most ``max_size`` remain."""
        limit = self.max_size if max_size is None else max_size
        async with self.session_factory() as db:
            total = (await db.execute(select(func.count(Observation.id)))).scalar_one()
            excess = total - limit
            if excess <= 0:
                return 0

            oldest = await db.execute(
                select(Observation.id).order_by(Observation.observed_at.asc()).limit(excess)
            )
            ids = list(oldest.scalars().all())
            await db.execute(delete(Observation).where(Observation.id.in_(ids)))
            await db.commit()

        logger.info(f"Evicted {len(ids)} oldest observations (cap {limit})")
        return len(ids)

    async def stats(self) -> dict:
        now = self._clock()
        async with self.session_factory() as db:
            total = (await db.execute(select(func.count(Observation.id)))).scalar_one()
            last_24h = (
                await db.execute(
                    select(func.count(Observation.id)).where(Observation.observed_at > now - timedelta(hours=24))
                )
            ).scalar_one()
            last_hour = (
                await db.execute(
                    select(func.count(Observation.id)).where(Observation.observed_at > now - timedelta(hours=1))
                )
            ).scalar_one()
            oldest, newest = (
                await db.execute(select(func.min(Observation.observed_at), func.max(Observation.observed_at)))
            ).one()
            by_store = await db.execute(
                select(Observation.store_id, func.count(Observation.id))
                .group_by(Observation.store_id)
                .order_by(func.count(Observation.id).desc())
            )

        return {
            "total_entries": total,
            "entries_last_24h": last_24h,
            "entries_last_hour": last_hour,
            "oldest_entry": oldest,
            "newest_entry": newest,
            "entries_by_store": {store_id: count for store_id, count in by_store.all()},
        }

    async def _delete(self, condition) -> int:
        async with self.session_factory() as db:
            result = await db.execute(delete(Observation).where(condition))
            await db.commit()
            return result.rowcount
