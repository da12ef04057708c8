"""Placeholder for direct retailer API integrations."""

import logging

from clearance_scout.providers.base import Provider, ProviderNotConfiguredError, ScanOptions, ScrapedProduct

logger = logging.getLogger(__name__)


class ApiProvider(Provider):
    """Direct API mode. No retailer API is wired up yet, so every call fails."""

    source = "api"

    def __init__(self, retailer: str, display_name: str):
        self.retailer = retailer
        self.display_name = display_name

    def _not_configured(self) -> ProviderNotConfiguredError:
        logger.error(f"{self.retailer}: api data mode selected but no API integration is configured")
        return ProviderNotConfiguredError(f"{self.display_name} API not configured")

    async def init(self):
        raise self._not_configured()

    async def fetch_deals(self, options: ScanOptions) -> list[ScrapedProduct]:
        raise self._not_configured()
