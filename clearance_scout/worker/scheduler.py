"""APScheduler job definitions for cache and retention maintenance."""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

from clearance_scout.cache.observation_cache import ObservationCache
from clearance_scout.config import settings
from clearance_scout.worker.retention import DataRetentionService

logger = logging.getLogger(__name__)


async def cleanup_observation_cache(cache: ObservationCache) -> dict:
    """Drop expired observations, then trim the cache to its size cap."""
    expired = await cache.purge_expired()
    evicted = await cache.enforce_max_size()
    if expired or evicted:
        logger.info(f"Observation cache cleanup: {expired} expired, {evicted} evicted")
    return {"expired": expired, "evicted": evicted}


def setup_scheduler(cache: ObservationCache, retention: DataRetentionService) -> AsyncIOScheduler:
    """
    Setup and configure APScheduler.

    Scheduling overview:
    - Observation cache cleanup every settings.observation_cache_cleanup_interval_minutes
    - Data retention cleanup daily at 3 AM

    Returns:
        Configured scheduler instance
    """
    scheduler = AsyncIOScheduler()
    cleanup_interval = max(1, int(settings.observation_cache_cleanup_interval_minutes))

    scheduler.add_job(
        cleanup_observation_cache,
        IntervalTrigger(minutes=cleanup_interval),
        args=[cache],
        id="observation_cache_cleanup",
        name="Purge expired observations",
        max_instances=1,
        coalesce=True,
        misfire_grace_time=300,
        replace_existing=True,
    )

    scheduler.add_job(
        retention.run_full_cleanup,
        CronTrigger(hour=3, minute=0),
        id="data_retention",
        name="Delete scans and observations past retention",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )

    logger.info(
        "Scheduler configured: observation cache cleanup every %d minutes, data retention at 3 AM",
        cleanup_interval,
    )

    return scheduler
