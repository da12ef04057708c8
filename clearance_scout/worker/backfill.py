"""Fill in missing store coordinates from the ZIP dataset."""

import logging

from clearance_scout.db.storage import ScanStorage
from clearance_scout.geo.resolver import EXACT_ZIP, ZIP_PREFIX, ZipResolver

logger = logging.getLogger(__name__)


async def backfill_store_coordinates(storage: ScanStorage, resolver: ZipResolver) -> int:
    """
    Geocode active stores that have no coordinates.

    Only exact and prefix matches are used; a state or national centroid
    would place the store somewhere it is not.

    Returns:
        Number of stores updated
    """
    stores = await storage.list_stores_missing_coordinates()
    if not stores:
        return 0

    updated = 0
    for store in stores:
        location = resolver.resolve(store.zip_code)
        if location.source not in (EXACT_ZIP, ZIP_PREFIX):
            logger.warning(f"No usable coordinates for store {store.id} (ZIP {store.zip_code})")
            continue
        if await storage.update_store_coordinates(store.id, location.lat, location.lon):
            updated += 1

    logger.info(f"Backfilled coordinates for {updated}/{len(stores)} stores")
    return updated
