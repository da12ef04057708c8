"""Scan creation and background execution."""

import asyncio
import logging
import re
import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from clearance_scout import metrics
from clearance_scout.config import settings
from clearance_scout.db.models import Scan
from clearance_scout.db.storage import RESULT_SORTS, ScanStorage
from clearance_scout.geo.locator import select_nearest, select_within_radius
from clearance_scout.geo.resolver import ZipResolver
from clearance_scout.logging_config import get_logger, new_correlation_id
from clearance_scout.providers.base import ScanOptions
from clearance_scout.providers.filters import PRICE_RANGES
from clearance_scout.providers.registry import NEAREST, ProviderRegistry
from clearance_scout.scan import plan_limits
from clearance_scout.scan.errors import QuotaExceededError, ScanValidationError, UserNotFoundError
from clearance_scout.scan.jobs import JobRunner
from clearance_scout.scan.state import IllegalTransitionError, ScanStatus

logger = logging.getLogger(__name__)

ZIP_RE = re.compile(r"^\d{5}$")
PRODUCT_SELECTIONS = ("all", "specific")


@dataclass
class ScanRequest:
    """User input for a new scan."""

    retailer: str
    zip_code: Optional[str] = None  # defaults to the user's ZIP
    product_selection: str = "all"
    specific_skus: list[str] = field(default_factory=list)
    clearance_only: bool = False
    category: Optional[str] = None
    price_range: Optional[str] = None
    minimum_discount_percent: Optional[float] = None
    minimum_dollars_off: Optional[Decimal] = None
    sort_by: str = "discount-percent"


class ScanOrchestrator:
    """
    Owns the scan lifecycle: pending -> running -> completed | failed.

    ``create_scan`` validates, reserves quota and persists the scan, then hands
    execution to the job runner and returns without waiting on any provider.
    """

    def __init__(
        self,
        storage: ScanStorage,
        resolver: ZipResolver,
        registry: ProviderRegistry,
        job_runner: JobRunner,
        timeout_seconds: Optional[float] = None,
        radius_miles: Optional[float] = None,
    ):
        self.storage = storage
        self.resolver = resolver
        self.registry = registry
        self.job_runner = job_runner
        self.timeout_seconds = timeout_seconds or settings.scan_timeout_seconds
        self.radius_miles = radius_miles or settings.ace_radius_miles

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def validate(self, request: ScanRequest, zip_code: Optional[str], plan: Optional[str]):
        """
        Reject malformed requests before anything is written.

        Raises:
            ScanValidationError: On the first invalid field
        """
        if request.retailer not in self.registry.retailers():
            raise ScanValidationError(f"Unknown retailer: {request.retailer}", field="retailer")
        if not zip_code or not ZIP_RE.match(zip_code):
            raise ScanValidationError("ZIP code must be exactly 5 digits", field="zip_code")
        if not plan_limits.is_known_plan(plan):
            raise ScanValidationError(f"Unknown subscription plan: {plan}", field="plan")
        if request.product_selection not in PRODUCT_SELECTIONS:
            raise ScanValidationError(
                f"Product selection must be one of {list(PRODUCT_SELECTIONS)}", field="product_selection"
            )
        if request.product_selection == "specific" and not [s for s in request.specific_skus if s.strip()]:
            raise ScanValidationError("Specific product selection requires at least one SKU", field="specific_skus")
        if request.price_range and request.price_range not in PRICE_RANGES:
            raise ScanValidationError(f"Unknown price range: {request.price_range}", field="price_range")
        if request.sort_by not in RESULT_SORTS:
            raise ScanValidationError(f"Unknown sort order: {request.sort_by}", field="sort_by")

    async def create_scan(self, user_id: str, request: ScanRequest) -> Scan:
        """
        Create a pending scan and schedule its execution.

        Args:
            user_id: Requesting user
            request: Scan parameters

        Returns:
            The persisted Scan in ``pending``

        Raises:
            UserNotFoundError: Unknown user
            ScanValidationError: Malformed request
            QuotaExceededError: Monthly quota used up
        """
        user = await self.storage.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        zip_code = (request.zip_code or user.zip_code or "").strip()
        plan = user.subscription_plan
        try:
            self.validate(request, zip_code, plan)
        except ScanValidationError as e:
            metrics.record_scan_rejected(f"invalid_{e.field or 'request'}")
            raise

        profile = self.registry.get_profile(request.retailer)
        quota = plan_limits.monthly_scan_quota(plan)
        fields = {
            "retailer": request.retailer,
            "zip_code": zip_code,
            "plan": plan,
            "product_selection": request.product_selection,
            "specific_skus": [s.strip() for s in request.specific_skus if s.strip()] or None,
            "clearance_only": request.clearance_only,
            "category": request.category,
            "price_range": request.price_range,
            "minimum_discount_percent": request.minimum_discount_percent,
            "minimum_dollars_off": request.minimum_dollars_off,
            "sort_by": request.sort_by,
            "store_count": plan_limits.store_limit_per_scan(plan) if profile.selection == NEAREST else 0,
        }

        reservation = await plan_limits.check_and_reserve(self.storage, user_id, quota, fields)
        if not reservation.allowed:
            metrics.record_scan_rejected("quota_exceeded")
            raise QuotaExceededError(
                limit=quota,
                used=reservation.current_count,
                reset_date=plan_limits.quota_reset_date(),
            )

        scan = reservation.scan
        metrics.record_scan_created(scan.retailer, plan)
        logger.info(f"Created scan {scan.id} for user {user_id} ({scan.retailer}, {zip_code}, plan={plan})")

        self.job_runner.submit(self.execute_scan, scan.id, name=f"scan-{scan.id}")
        return scan

    async def usage(self, user_id: str) -> dict:
        user = await self.storage.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return await plan_limits.usage(self.storage, user_id, user.subscription_plan)

    # ------------------------------------------------------------------
    # Store resolution
    # ------------------------------------------------------------------

    async def resolve_store_ids(self, retailer: str, zip_code: str, plan: Optional[str]) -> list[str]:
        """Nearest plan-limited stores, or every store in radius, for the retailer's profile."""
        profile = self.registry.get_profile(retailer)
        location = self.resolver.resolve(zip_code)
        stores = await self.storage.list_store_locations(retailer)

        if profile.selection == NEAREST:
            limit = plan_limits.store_limit_per_scan(plan)
            store_ids = select_nearest(location.coordinates, stores, limit)
        else:
            store_ids = select_within_radius(location.coordinates, stores, self.radius_miles)

        logger.info(
            f"{retailer}: ZIP {zip_code} resolved via {location.source}, "
            f"{len(store_ids)} stores selected ({profile.selection})"
        )
        return store_ids

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute_scan(self, scan_id: str):
        """
        Run a pending scan to completion or failure.

        Every error, including the timeout, ends in ``failed``; details are
        logged with a correlation id and never stored on the scan.
        """
        log = get_logger(__name__, scan_id=scan_id, correlation_id=new_correlation_id())
        started = time.monotonic()

        try:
            scan = await self.storage.transition_scan(scan_id, ScanStatus.RUNNING)
        except IllegalTransitionError as e:
            log.warning(f"Scan not started: {e}")
            return

        status = ScanStatus.FAILED
        try:
            result_count, clearance_count = await asyncio.wait_for(
                self._run(scan, log), timeout=self.timeout_seconds
            )
            await self.storage.transition_scan(
                scan_id,
                ScanStatus.COMPLETED,
                result_count=result_count,
                clearance_count=clearance_count,
            )
            status = ScanStatus.COMPLETED
            log.info(f"Scan completed: {result_count} results, {clearance_count} on clearance")
        except asyncio.TimeoutError:
            log.error(f"Scan timed out after {self.timeout_seconds} seconds")
            await self._mark_failed(scan_id, log)
        except asyncio.CancelledError:
            log.warning("Scan cancelled during shutdown")
            await self._mark_failed(scan_id, log)
            raise
        except Exception as e:
            log.error(f"Scan failed: {e}", exc_info=True)
            await self._mark_failed(scan_id, log)
        finally:
            metrics.record_scan_finished(scan.retailer, status.value, time.monotonic() - started)

    async def _run(self, scan: Scan, log) -> tuple[int, int]:
        store_ids = await self.resolve_store_ids(scan.retailer, scan.zip_code, scan.plan)
        await self.storage.update_store_count(scan.id, len(store_ids))
        metrics.record_stores_selected(scan.retailer, len(store_ids))

        options = ScanOptions(
            store_ids=store_ids,
            clearance_only=scan.clearance_only,
            product_selection=scan.product_selection,
            specific_skus=list(scan.specific_skus or []),
            category=scan.category,
            price_range=scan.price_range,
            minimum_discount_percent=scan.minimum_discount_percent,
            minimum_dollars_off=scan.minimum_dollars_off,
            on_progress=lambda message, step: log.info(f"Progress {step}: {message}"),
        )

        provider = self.registry.create(scan.retailer)
        async with provider:
            products = await provider.fetch_deals(options)

        await self.storage.save_scan_results(scan.id, [product.to_record() for product in products])
        clearance_count = sum(1 for product in products if product.is_on_clearance)
        return len(products), clearance_count

    async def _mark_failed(self, scan_id: str, log):
        try:
            await self.storage.transition_scan(scan_id, ScanStatus.FAILED)
        except IllegalTransitionError as e:
            log.error(f"Could not mark scan failed: {e}")
