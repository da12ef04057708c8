"""Home Depot catalog, seeds and browser provider."""

import logging
from decimal import Decimal

from playwright.async_api import Page

from clearance_scout.providers.base import ProductSeed
from clearance_scout.providers.browser import BrowserProvider
from clearance_scout.providers.mock import CatalogItem

logger = logging.getLogger(__name__)

RETAILER = "home-depot"
DISPLAY_NAME = "Home Depot"
BASE_URL = "https://www.homedepot.com"

MOCK_CATALOG = [
    CatalogItem("DEWALT 20V MAX Cordless Drill", "DWD726-20V", Decimal("149.99"), Decimal("89.99"), "tools", True),
    CatalogItem(
        "Craftsman 230-Piece Tool Set", "CMMT12039", Decimal("199.99"), None, "tools", False,
        is_price_suppressed=True,
    ),
    CatalogItem("Miracle-Gro Potting Soil 50qt", "MG-50QT-001", Decimal("12.98"), Decimal("7.99"), "garden", True),
    CatalogItem("GE Smart Light Switch", "GE-14294", Decimal("34.99"), Decimal("19.99"), "hardware", True),
    CatalogItem("Behr Premium Paint 1 Gallon", "BEHR-PREM-001", Decimal("42.98"), Decimal("25.98"), "hardware", True),
]

PROGRESS_STATUSES = [
    "Connecting to Home Depot...",
    "Finding stores near you...",
    "Fetching product inventory...",
    "Analyzing clearance prices...",
    "Finalizing results...",
]

STORE_NAMES = {
    "HD-0206": "HD Southland",
    "HD-0208": "HD Hollywood",
    "HD-0210": "HD West LA",
    "HD-1234": "HD Manhattan",
    "HD-1235": "HD Brooklyn",
    "HD-1236": "HD Queens",
    "HD-0456": "HD Lincoln Park",
    "HD-0457": "HD South Loop",
    "HD-0789": "HD Midtown",
    "HD-1718": "HD Downtown Dallas",
    "HD-1719": "HD Plano",
    "HD-1920": "HD San Jose Central",
}


def product_url(sku: str) -> str:
    return f"{BASE_URL}/p/{sku}"


def store_name(store_id: str) -> str:
    return STORE_NAMES.get(store_id, f"Home Depot Store {store_id}")


class HomeDepotBrowserProvider(BrowserProvider):
    """Verifies the "See In-Store Clearance Price" panel on homedepot.com product pages."""

    retailer = RETAILER
    clearance_trigger_selector = (
        'button:text-matches("see in-store clearance price", "i"), '
        ':text-matches("in-store clearance", "i"), '
        '[data-testid*="clearance"]'
    )
    store_trigger_selector = '[data-testid="store-locator-trigger"], .MyStore__trigger, [aria-label*="store"]'

    def default_seeds(self):
        return [
            ProductSeed(f"{BASE_URL}/p/312470417", sku="312470417", title="DEWALT 20V MAX Drill Driver Kit DCD771C2", category="tools"),
            ProductSeed(f"{BASE_URL}/p/206937568", sku="206937568", title="Ryobi ONE+ 18V Drill Driver P1819", category="tools"),
            ProductSeed(f"{BASE_URL}/p/312367023", sku="312367023", title="Makita 18V LXT Hammer Drill XPH12Z", category="tools"),
        ]

    def store_name(self, store_id: str) -> str:
        return store_name(store_id)

    async def set_active_store(self, page: Page, store_id: str):
        """Open the store picker on the homepage and choose ``store_id``."""
        try:
            await page.goto(BASE_URL, wait_until="domcontentloaded", timeout=self.navigation_timeout_ms)
            trigger = page.locator(self.store_trigger_selector).first
            if await trigger.count() == 0:
                logger.debug(f"Store picker not found while selecting {store_id}")
                return
            await trigger.click()

            number = store_id.split("-", 1)[-1]
            option = page.locator(f'[data-store-id="{number}"], [data-value*="{number}"]').first
            if await option.count() > 0:
                await option.click()
                await page.wait_for_timeout(1000)
        except Exception as e:
            logger.warning(f"Failed to set active Home Depot store {store_id}: {e}")
