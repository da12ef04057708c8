"""Headless browser provider that verifies in-store clearance per product page."""

import asyncio
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from selectolax.parser import HTMLParser

from clearance_scout import metrics
from clearance_scout.cache.observation_cache import ObservationCache, entry_from_product, negative_entry
from clearance_scout.config import settings
from clearance_scout.db.models import Observation
from clearance_scout.providers.base import (
    ProductSeed,
    Provider,
    ProviderError,
    ScanOptions,
    ScrapedProduct,
    VerificationResult,
)
from clearance_scout.providers.filters import apply_filters, format_savings

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

PRICE_RE = re.compile(r"\$\s*(\d[\d,]*(?:\.\d{2})?)")
WAS_PRICE_RE = re.compile(r"was\s*\$\s*(\d[\d,]*(?:\.\d{2})?)", re.IGNORECASE)
SAVE_RE = re.compile(r"save\s*(\d+)\s*%", re.IGNORECASE)
STOCK_RE = re.compile(r"(\d+)\s+in stock", re.IGNORECASE)


def parse_price(text: Optional[str]) -> Optional[Decimal]:
    """First dollar amount in ``text``."""
    if not text:
        return None
    match = PRICE_RE.search(text)
    if not match:
        return None
    try:
        return Decimal(match.group(1).replace(",", ""))
    except InvalidOperation:
        return None


class BrowserProvider(Provider):
    """
    Base class for browser-backed retailer providers.

    One browser per provider instance, one isolated context per store.
    Stores and product seeds are processed sequentially with a throttle
    between product pages. Subclasses supply selectors, seeds and the
    store-context step.
    """

    source = "alt"

    # Clickable element that reveals the in-store clearance price; None when it is shown inline
    clearance_trigger_selector: Optional[str] = '[data-testid*="clearance"]'
    # Element or text proving the clearance price is shown for the active store
    clearance_panel_selectors: List[str] = ['[data-testid*="clearance-panel"]', ".clearance-panel"]
    clearance_panel_text: Optional[re.Pattern] = re.compile(r"in-store clearance", re.IGNORECASE)
    clearance_price_selectors: List[str] = ['[data-testid*="clearance-price"]', '[data-testid*="price"]', ".price"]
    was_price_selectors: List[str] = ['[data-testid*="was-price"]', ".strikethrough"]
    stock_selectors: List[str] = ['[data-testid*="stock"]']

    purchase_in_store = False
    store_names: dict[str, str] = {}

    def __init__(
        self,
        cache: ObservationCache,
        seeds: Optional[List[ProductSeed]] = None,
        throttle_seconds: Optional[float] = None,
        navigation_timeout: Optional[int] = None,
    ):
        """
        Initialize browser provider.

        Args:
            cache: Observation cache consulted before and written after each visit
            seeds: Product pages to verify (defaults to the retailer's seed list)
            throttle_seconds: Pause between product pages
            navigation_timeout: Seconds allowed per page navigation
        """
        self.cache = cache
        self.seeds = seeds if seeds is not None else self.default_seeds()
        self.throttle_seconds = settings.browser_throttle_seconds if throttle_seconds is None else throttle_seconds
        self.navigation_timeout_ms = (navigation_timeout or settings.headless_browser_timeout) * 1000

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    def default_seeds(self) -> List[ProductSeed]:
        return []

    def store_name(self, store_id: str) -> str:
        return self.store_names.get(store_id, store_id)

    async def set_active_store(self, page: Page, store_id: str):
        """Point the browser session at ``store_id``. Best effort."""

    async def init(self):
        """Launch the browser. Failure here aborts the scan."""
        if self._browser is not None:
            return
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=True,
                args=["--no-sandbox", "--disable-setuid-sandbox", "--disable-dev-shm-usage"],
            )
        except Exception as e:
            await self.close()
            raise ProviderError(f"{self.retailer}: browser launch failed: {e}") from e
        logger.info(f"{self.retailer}: browser launched")

    async def close(self):
        """Close browser and stop playwright."""
        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.error(f"{self.retailer}: error closing browser: {e}")
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def _new_context(self) -> BrowserContext:
        if self._browser is None:
            raise ProviderError(f"{self.retailer}: browser not initialized")
        return await self._browser.new_context(user_agent=USER_AGENT)

    async def fetch_deals(self, options: ScanOptions) -> list[ScrapedProduct]:
        results: list[ScrapedProduct] = []
        options.report("Setting store context...", 1)

        for store_id in options.store_ids:
            context = await self._new_context()
            try:
                page = await context.new_page()
                try:
                    await self.set_active_store(page, store_id)
                    results.extend(await self._scan_store(page, store_id, options))
                finally:
                    await page.close()
            finally:
                await context.close()

        options.report("Finalizing results...", 5)
        return apply_filters(results, options)

    async def _scan_store(self, page: Page, store_id: str, options: ScanOptions) -> list[ScrapedProduct]:
        found: list[ScrapedProduct] = []

        for index, seed in enumerate(self.seeds):
            options.report("Opening product page...", 2)

            cached = await self.cache.get(store_id, seed.product_url)
            if cached is not None:
                metrics.record_verification(self.retailer, "cached")
                if cached.is_on_clearance:
                    found.append(self._product_from_observation(cached, seed, store_id))
                continue

            result = await self.verify_product(page, seed, store_id)
            if result.ok and result.product is not None:
                await self.cache.put(store_id, seed.product_url, entry_from_product(result.product))
                found.append(result.product)
                metrics.record_verification(self.retailer, "clearance")
            else:
                # Negative and failed lookups are cached as well
                await self.cache.put(store_id, seed.product_url, negative_entry(seed.sku, self.source))
                metrics.record_verification(self.retailer, "no_clearance" if result.ok else "error")

            if self.throttle_seconds and index < len(self.seeds) - 1:
                await asyncio.sleep(self.throttle_seconds)

        logger.info(f"{self.retailer}: store {store_id} yielded {len(found)} clearance items")
        return found

    async def verify_product(self, page: Page, seed: ProductSeed, store_id: str) -> VerificationResult:
        """
        Visit a product page and check for an in-store clearance price.

        Per-product failures are reported as a retriable, not-on-clearance result.

        Returns:
            VerificationResult with ``product`` set only when clearance was confirmed
        """
        try:
            await page.goto(seed.product_url, wait_until="domcontentloaded", timeout=self.navigation_timeout_ms)

            if self.clearance_trigger_selector:
                trigger = page.locator(self.clearance_trigger_selector).first
                if await trigger.count() == 0:
                    return VerificationResult(ok=True)

                await trigger.click()
                try:
                    await page.wait_for_selector(", ".join(self.clearance_panel_selectors), timeout=5000)
                except PlaywrightTimeoutError:
                    logger.debug(f"No clearance panel selector after click on {seed.product_url}")

            html = await page.content()
            product = self.extract_clearance_details(html, seed, store_id)
            return VerificationResult(ok=True, product=product)
        except Exception as e:
            logger.warning(f"{self.retailer}: verification failed for {seed.product_url} at {store_id}: {e}")
            return VerificationResult(ok=False, retriable=True, error=str(e))

    def extract_clearance_details(self, html: str, seed: ProductSeed, store_id: str) -> Optional[ScrapedProduct]:
        """
        Pull clearance price, was-price, savings and stock out of a rendered page.

        Returns:
            ScrapedProduct, or None when the page does not confirm an in-store clearance
        """
        tree = HTMLParser(html)
        panel = self._first_node(tree, self.clearance_panel_selectors)
        page_text = tree.body.text(separator=" ") if tree.body is not None else tree.text(separator=" ")

        if panel is None:
            if self.clearance_panel_text is None or not self.clearance_panel_text.search(page_text):
                return None

        scope = panel if panel is not None else tree
        scope_text = scope.text(separator=" ")

        clearance_node = self._first_node(scope, self.clearance_price_selectors)
        if clearance_node is None and panel is not None:
            # Badge-style panels carry no price of their own
            clearance_node = self._first_node(tree, self.clearance_price_selectors)
        clearance_price = parse_price(clearance_node.text() if clearance_node is not None else scope_text)
        if clearance_price is None:
            return None

        was_node = self._first_node(tree, self.was_price_selectors)
        if was_node is not None:
            was_price = parse_price(was_node.text())
        else:
            match = WAS_PRICE_RE.search(page_text)
            was_price = Decimal(match.group(1).replace(",", "")) if match else None

        save_match = SAVE_RE.search(page_text)
        save_percent = f"{save_match.group(1)}% OFF" if save_match else format_savings(was_price, clearance_price)

        stock_node = self._first_node(tree, self.stock_selectors)
        stock_match = STOCK_RE.search(stock_node.text() if stock_node is not None else page_text)

        return ScrapedProduct(
            name=seed.title or "Unknown Product",
            sku=seed.sku,
            product_url=seed.product_url,
            store_id=store_id,
            store_name=self.store_name(store_id),
            clearance_price=clearance_price,
            was_price=was_price,
            save_percent=save_percent,
            in_stock=stock_match.group(1) if stock_match else None,
            is_on_clearance=True,
            category=seed.category,
            source=self.source,
            purchase_in_store=self.purchase_in_store,
        )

    def _product_from_observation(self, observation: Observation, seed: ProductSeed, store_id: str) -> ScrapedProduct:
        return ScrapedProduct(
            name=seed.title or "Unknown Product",
            sku=observation.sku or seed.sku,
            product_url=observation.product_url,
            store_id=store_id,
            store_name=self.store_name(store_id),
            clearance_price=observation.clearance_price,
            was_price=observation.was_price,
            save_percent=observation.save_percent,
            in_stock=observation.in_stock,
            delivery_available=observation.delivery_available,
            is_on_clearance=observation.is_on_clearance,
            category=seed.category,
            source=observation.source,
            observed_at=observation.observed_at,
            purchase_in_store=self.purchase_in_store,
        )

    @staticmethod
    def _first_node(tree, selectors: List[str]):
        for selector in selectors:
            node = tree.css_first(selector)
            if node is not None:
                return node
        return None
