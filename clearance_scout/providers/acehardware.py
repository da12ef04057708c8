"""Ace Hardware catalog, seeds and browser provider."""

import logging
from decimal import Decimal

from playwright.async_api import Page

from clearance_scout.data.stores import ACE_HARDWARE_STORES
from clearance_scout.providers.base import ProductSeed
from clearance_scout.providers.browser import BrowserProvider
from clearance_scout.providers.mock import CatalogItem

logger = logging.getLogger(__name__)

RETAILER = "ace-hardware"
DISPLAY_NAME = "Ace Hardware"
BASE_URL = "https://www.acehardware.com"

MOCK_CATALOG = [
    CatalogItem("Craftsman 20V Cordless Impact Driver", "ACE-7624382", Decimal("129.99"), Decimal("79.99"), "tools", True),
    CatalogItem("Weber Genesis II 3-Burner Gas Grill", "ACE-8924561", Decimal("699.99"), Decimal("499.99"), "outdoor", True),
    CatalogItem("Scotts Turf Builder Lawn Fertilizer", "ACE-1234567", Decimal("34.99"), Decimal("22.99"), "garden", True),
    CatalogItem("Benjamin Moore Advance Paint", "ACE-9876543", Decimal("52.99"), Decimal("34.99"), "paint", True),
    CatalogItem(
        "Kwikset Smart Door Lock", "ACE-5555444", Decimal("149.99"), None, "hardware", False,
        is_price_suppressed=True,
    ),
    CatalogItem("Big Green Egg Ceramic Grill", "ACE-7777888", Decimal("899.99"), Decimal("649.99"), "outdoor", True),
    CatalogItem("Ace Hardware Tool Set 150-Piece", "ACE-2468135", Decimal("179.99"), Decimal("119.99"), "tools", True),
]

PROGRESS_STATUSES = [
    "Connecting to Ace Hardware...",
    "Finding stores in 50-mile radius...",
    "Fetching product inventory...",
    "Analyzing clearance prices...",
    "Finalizing results...",
]

STORE_NAMES = {store["id"]: store["name"] for store in ACE_HARDWARE_STORES}


def product_url(sku: str) -> str:
    return f"{BASE_URL}/product/{sku}"


def store_name(store_id: str) -> str:
    return STORE_NAMES.get(store_id, f"Ace Hardware Store {store_id}")


class AceHardwareBrowserProvider(BrowserProvider):
    """
    Reads clearance badges and sale prices from acehardware.com pages.

    Ace shows store pricing inline once a store is selected, so there is no
    button to click before extraction.
    """

    retailer = RETAILER
    purchase_in_store = True

    clearance_trigger_selector = None
    clearance_panel_selectors = ['[data-testid*="clearance"]', ".clearance-badge", ".product-badge--clearance"]
    clearance_panel_text = None
    clearance_price_selectors = ['[data-testid*="sale-price"]', ".sale-price", ".price--sale", ".price"]
    was_price_selectors = ['[data-testid*="was-price"]', ".was-price", ".price--original", ".strikethrough"]
    stock_selectors = ['[data-testid*="inventory"]', ".store-inventory"]
    make_my_store_selector = 'button:text-matches("make this my store", "i"), [data-testid*="set-store"]'

    def default_seeds(self):
        return [
            ProductSeed(f"{BASE_URL}/departments/tools-and-hardware/power-tools", title="Power Tools", category="tools"),
            ProductSeed(f"{BASE_URL}/departments/paint-and-supplies", title="Paint & Supplies", category="paint"),
            ProductSeed(f"{BASE_URL}/departments/outdoor-living", title="Outdoor Living", category="outdoor"),
            ProductSeed(f"{BASE_URL}/departments/lawn-and-garden", title="Lawn & Garden", category="garden"),
            ProductSeed(f"{BASE_URL}/departments/hardware", title="Hardware", category="hardware"),
        ]

    def store_name(self, store_id: str) -> str:
        return store_name(store_id)

    async def set_active_store(self, page: Page, store_id: str):
        """Open the store details page and mark it as the shopper's store."""
        number = store_id.split("-", 1)[-1]
        try:
            await page.goto(
                f"{BASE_URL}/store-details/{number}",
                wait_until="domcontentloaded",
                timeout=self.navigation_timeout_ms,
            )
            button = page.locator(self.make_my_store_selector).first
            if await button.count() > 0:
                await button.click()
                await page.wait_for_timeout(1000)
            else:
                logger.debug(f"No store selection control for Ace store {store_id}")
        except Exception as e:
            logger.warning(f"Failed to set active Ace Hardware store {store_id}: {e}")
