"""In-memory provider serving a fixed catalog."""

import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Sequence

from clearance_scout.config import settings
from clearance_scout.providers.base import Provider, ScanOptions, ScrapedProduct
from clearance_scout.providers.filters import apply_filters, format_savings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogItem:
    name: str
    sku: str
    original_price: Decimal
    clearance_price: Optional[Decimal]
    category: str
    is_on_clearance: bool
    is_price_suppressed: bool = False


class MockProvider(Provider):
    """
    Provider that returns a fixed catalog, filtered by the scan options.

    Products are attributed to the first requested store; a scan with no
    stores in range yields no products.
    """

    source = "mock"

    def __init__(
        self,
        retailer: str,
        catalog: Sequence[CatalogItem],
        product_url: Callable[[str], str],
        progress_statuses: Sequence[str],
        store_name: Callable[[str], str],
        purchase_in_store: bool = False,
        step_delay: float | None = None,
    ):
        self.retailer = retailer
        self.catalog = list(catalog)
        self.product_url = product_url
        self.progress_statuses = list(progress_statuses)
        self.store_name = store_name
        self.purchase_in_store = purchase_in_store
        self.step_delay = settings.mock_progress_delay_seconds if step_delay is None else step_delay

    async def fetch_deals(self, options: ScanOptions) -> list[ScrapedProduct]:
        for step, status in enumerate(self.progress_statuses, start=1):
            if self.step_delay:
                await asyncio.sleep(self.step_delay)
            options.report(status, step)

        if not options.store_ids:
            logger.info(f"{self.retailer}: no stores in range, mock catalog skipped")
            return []

        store_id = options.store_ids[0]
        products = [self._to_product(item, store_id) for item in self.catalog]
        return apply_filters(products, options)

    def _to_product(self, item: CatalogItem, store_id: str) -> ScrapedProduct:
        return ScrapedProduct(
            name=item.name,
            sku=item.sku,
            product_url=self.product_url(item.sku),
            store_id=store_id,
            store_name=self.store_name(store_id),
            clearance_price=item.clearance_price,
            was_price=item.original_price,
            save_percent=format_savings(item.original_price, item.clearance_price),
            is_on_clearance=item.is_on_clearance,
            is_price_suppressed=item.is_price_suppressed,
            category=item.category,
            source=self.source,
            purchase_in_store=self.purchase_in_store,
        )
