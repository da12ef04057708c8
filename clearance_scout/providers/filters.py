"""Product filtering shared by every provider."""

import logging
from decimal import Decimal
from typing import List, Optional

from clearance_scout.providers.base import ScanOptions, ScrapedProduct

logger = logging.getLogger(__name__)

PRICE_RANGES = {
    "0-25": (Decimal("0"), Decimal("25")),
    "25-50": (Decimal("25"), Decimal("50")),
    "50-100": (Decimal("50"), Decimal("100")),
    "100+": (Decimal("100"), None),
}

CATEGORIES = ("tools", "hardware", "garden", "appliances", "lumber", "outdoor", "paint")


def format_savings(was_price: Optional[Decimal], clearance_price: Optional[Decimal]) -> Optional[str]:
    """Render a discount as ``"NN% OFF"``; None when there is no valid discount."""
    if not was_price or clearance_price is None or was_price <= 0:
        return None
    percent = round((was_price - clearance_price) / was_price * 100)
    return f"{percent}% OFF"


def in_price_range(price: Optional[Decimal], price_range: Optional[str]) -> bool:
    """Lower bound inclusive, upper bound exclusive. Unknown ranges do not filter."""
    if not price_range or price_range not in PRICE_RANGES:
        return True
    if price is None:
        return False
    low, high = PRICE_RANGES[price_range]
    return price >= low and (high is None or price < high)


def matches(product: ScrapedProduct, options: ScanOptions) -> bool:
    if options.clearance_only and not product.is_on_clearance:
        return False
    if options.category and product.category != options.category:
        return False
    if options.product_selection == "specific":
        allowed = {sku.strip().upper() for sku in options.specific_skus if sku.strip()}
        if (product.sku or "").upper() not in allowed:
            return False
    if not in_price_range(product.effective_price, options.price_range):
        return False
    if options.minimum_discount_percent and product.discount_percent < options.minimum_discount_percent:
        return False
    if options.minimum_dollars_off and product.dollars_off < Decimal(str(options.minimum_dollars_off)):
        return False
    return True


def apply_filters(products: List[ScrapedProduct], options: ScanOptions) -> List[ScrapedProduct]:
    """Keep the products that satisfy every requested filter, preserving order."""
    filtered = [product for product in products if matches(product, options)]
    removed = len(products) - len(filtered)
    if removed:
        logger.debug("Filtered %s of %s products", removed, len(products))
    return filtered
