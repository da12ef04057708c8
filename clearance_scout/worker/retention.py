"""Data retention: age out finished scans, their results and old observations."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clearance_scout import metrics
from clearance_scout.config import settings
from clearance_scout.db.models import Observation, Scan, ScanResult, utcnow
from clearance_scout.db.session import AsyncSessionLocal

logger = logging.getLogger(__name__)


class DataRetentionService:
    """Deletes data past its retention window. Only terminal scans are ever removed."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        completed_days: Optional[int] = None,
        failed_days: Optional[int] = None,
        observation_days: Optional[int] = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.session_factory = session_factory or AsyncSessionLocal
        self.completed_days = completed_days or settings.completed_scans_retention_days
        self.failed_days = failed_days or settings.failed_scans_retention_days
        self.observation_days = observation_days or settings.observations_retention_days
        self._clock = clock or utcnow

    async def cleanup_completed_scans(self) -> dict:
        """Delete completed scans finished before the window, results first."""
        cutoff = self._clock() - timedelta(days=self.completed_days)
        return await self._delete_scans(
            Scan.status == "completed",
            Scan.completed_at.is_not(None),
            Scan.completed_at < cutoff,
        )

    async def cleanup_failed_scans(self) -> dict:
        """Delete failed scans created before the window, results first."""
        cutoff = self._clock() - timedelta(days=self.failed_days)
        return await self._delete_scans(Scan.status == "failed", Scan.created_at < cutoff)

    async def cleanup_observations(self) -> int:
        cutoff = self._clock() - timedelta(days=self.observation_days)
        async with self.session_factory() as db:
            result = await db.execute(delete(Observation).where(Observation.observed_at < cutoff))
            await db.commit()
        metrics.record_retention_deleted("observations", result.rowcount)
        return result.rowcount

    async def _delete_scans(self, *conditions) -> dict:
        async with self.session_factory() as db:
            ids = list((await db.execute(select(Scan.id).where(*conditions))).scalars().all())
            if not ids:
                return {"scans": 0, "results": 0}

            results = await db.execute(delete(ScanResult).where(ScanResult.scan_id.in_(ids)))
            scans = await db.execute(delete(Scan).where(Scan.id.in_(ids)))
            await db.commit()

        metrics.record_retention_deleted("scan_results", results.rowcount)
        metrics.record_retention_deleted("scans", scans.rowcount)
        return {"scans": scans.rowcount, "results": results.rowcount}

    async def run_full_cleanup(self) -> dict:
        """
        Run every retention rule.

        Returns:
            Per-category deletion counts
        """
        logger.info("Starting data retention cleanup")
        completed = await self.cleanup_completed_scans()
        failed = await self.cleanup_failed_scans()
        observations = await self.cleanup_observations()

        summary = {
            "completed_scans": completed["scans"],
            "failed_scans": failed["scans"],
            "scan_results": completed["results"] + failed["results"],
            "observations": observations,
        }
        logger.info(f"Data retention cleanup complete: {summary}")
        return summary

    async def data_statistics(self) -> dict:
        async with self.session_factory() as db:
            by_status = dict(
                (await db.execute(select(Scan.status, func.count(Scan.id)).group_by(Scan.status))).all()
            )
            results = (await db.execute(select(func.count(ScanResult.id)))).scalar_one()
            observations = (await db.execute(select(func.count(Observation.id)))).scalar_one()
            oldest, newest = (
                await db.execute(select(func.min(Scan.created_at), func.max(Scan.created_at)))
            ).one()

        return {
            "scans_by_status": by_status,
            "total_scans": sum(by_status.values()),
            "total_scan_results": results,
            "total_observations": observations,
            "oldest_scan": oldest,
            "newest_scan": newest,
        }
