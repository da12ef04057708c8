"""Provider interface and the normalized records providers exchange with the scan core."""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from clearance_scout.db.models import utcnow

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int], None]

DATA_MODES = ("mock", "alt", "api")


class ProviderError(Exception):
    """Provider could not run; fatal to the scan that invoked it."""


class ProviderNotConfiguredError(ProviderError):
    """Provider mode exists but has no working integration behind it."""


class UnknownDataModeError(ProviderError):
    def __init__(self, retailer: str, mode: str):
        self.retailer = retailer
        self.mode = mode
        super().__init__(f"Unknown data mode {mode!r} for {retailer}. Available: {list(DATA_MODES)}")


@dataclass
class ScanOptions:
    """Normalized option set passed to every provider."""

    store_ids: list[str]
    clearance_only: bool = False
    product_selection: str = "all"  # all, specific
    specific_skus: list[str] = field(default_factory=list)
    category: Optional[str] = None
    price_range: Optional[str] = None  # 0-25, 25-50, 50-100, 100+
    minimum_discount_percent: Optional[float] = None
    minimum_dollars_off: Optional[Decimal] = None
    on_progress: Optional[ProgressCallback] = None

    def report(self, status: str, step: int):
        """Forward a progress event. Callback failures never reach the provider."""
        if self.on_progress is None:
            return
        try:
            self.on_progress(status, step)
        except Exception:
            logger.debug(f"Progress callback failed at step {step}", exc_info=True)


@dataclass
class ProductSeed:
    """Product page a browser-backed provider should verify."""

    product_url: str
    sku: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None


@dataclass
class ScrapedProduct:
    """One product observation returned by a provider."""

    name: str
    product_url: str
    store_id: str
    sku: Optional[str] = None
    clearance_price: Optional[Decimal] = None
    was_price: Optional[Decimal] = None
    save_percent: Optional[str] = None
    in_stock: Optional[str] = None
    delivery_available: Optional[bool] = None
    is_on_clearance: bool = False
    is_price_suppressed: bool = False
    category: Optional[str] = None
    source: str = "mock"
    observed_at: datetime = None
    purchase_in_store: bool = False
    store_name: Optional[str] = None

    def __post_init__(self):
        if self.observed_at is None:
            self.observed_at = utcnow()

    @property
    def effective_price(self) -> Optional[Decimal]:
        return self.clearance_price if self.clearance_price is not None else self.was_price

    @property
    def dollars_off(self) -> Decimal:
        if self.clearance_price is None or self.was_price is None:
            return Decimal("0")
        return self.was_price - self.clearance_price

    @property
    def discount_percent(self) -> float:
        if not self.was_price or self.clearance_price is None:
            return 0.0
        return float(self.dollars_off / self.was_price * 100)

    def to_record(self) -> dict:
        """Column values for a scan_results row."""
        record = asdict(self)
        record["product_name"] = record.pop("name")
        return record


@dataclass
class VerificationResult:
    """Outcome of verifying one product page. ``product`` is None when not on clearance."""

    ok: bool
    product: Optional[ScrapedProduct] = None
    retriable: bool = False
    error: Optional[str] = None


class Provider(ABC):
    """
    Retailer data provider.

    Use as an async context manager so resources acquired in ``init`` are
    released on every exit path, including cancellation by the scan timeout.
    """

    retailer: str = ""
    source: str = "mock"

    async def init(self):
        """Acquire resources. Raises if the mode is unsupported or unconfigured."""

    @abstractmethod
    async def fetch_deals(self, options: ScanOptions) -> list[ScrapedProduct]:
        """
        Fetch deals for the given stores.

        Args:
            options: Store ids, filters and an optional progress callback

        Returns:
            Normalized products matching the filters
        """

    async def close(self):
        """Release resources. Safe to call more than once."""

    async def __aenter__(self) -> "Provider":
        await self.init()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
