"""Retailer profiles and provider selection by data mode."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Type

from clearance_scout.cache.observation_cache import ObservationCache
from clearance_scout.config import Settings, settings
from clearance_scout.providers import acehardware, homedepot
from clearance_scout.providers.api import ApiProvider
from clearance_scout.providers.base import Provider, UnknownDataModeError
from clearance_scout.providers.browser import BrowserProvider
from clearance_scout.providers.mock import CatalogItem, MockProvider

logger = logging.getLogger(__name__)

NEAREST = "nearest"
RADIUS = "radius"


@dataclass(frozen=True)
class RetailerProfile:
    """Everything the scan core needs to know about one retailer."""

    retailer: str
    display_name: str
    env_prefix: str
    selection: str  # nearest: plan-limited N closest stores; radius: every store within radius
    mock_catalog: Sequence[CatalogItem]
    progress_statuses: Sequence[str]
    product_url: Callable[[str], str]
    store_name: Callable[[str], str]
    browser_provider: Type[BrowserProvider]
    purchase_in_store: bool = False


HOME_DEPOT_PROFILE = RetailerProfile(
    retailer=homedepot.RETAILER,
    display_name=homedepot.DISPLAY_NAME,
    env_prefix="HD",
    selection=NEAREST,
    mock_catalog=homedepot.MOCK_CATALOG,
    progress_statuses=homedepot.PROGRESS_STATUSES,
    product_url=homedepot.product_url,
    store_name=homedepot.store_name,
    browser_provider=homedepot.HomeDepotBrowserProvider,
)

ACE_HARDWARE_PROFILE = RetailerProfile(
    retailer=acehardware.RETAILER,
    display_name=acehardware.DISPLAY_NAME,
    env_prefix="ACE",
    selection=RADIUS,
    mock_catalog=acehardware.MOCK_CATALOG,
    progress_statuses=acehardware.PROGRESS_STATUSES,
    product_url=acehardware.product_url,
    store_name=acehardware.store_name,
    browser_provider=acehardware.AceHardwareBrowserProvider,
    purchase_in_store=True,
)


class ProviderRegistry:
    """
    Builds providers for a retailer from its configured data mode.

    The kill-switch forces mock regardless of the configured mode. Adding a
    retailer means adding a profile, not new branches in the scan core.
    """

    _profiles: dict[str, RetailerProfile] = {
        HOME_DEPOT_PROFILE.retailer: HOME_DEPOT_PROFILE,
        ACE_HARDWARE_PROFILE.retailer: ACE_HARDWARE_PROFILE,
    }

    def __init__(self, cache: ObservationCache, config: Optional[Settings] = None):
        self.cache = cache
        self.config = config or settings
        self._factories: dict[str, Callable[[RetailerProfile], Provider]] = {
            "mock": self._mock,
            "alt": self._browser,
            "api": self._api,
        }

    @classmethod
    def retailers(cls) -> list[str]:
        return list(cls._profiles)

    @classmethod
    def get_profile(cls, retailer: str) -> RetailerProfile:
        """
        Get the profile for a retailer.

        Raises:
            ValueError: If retailer is not registered
        """
        if retailer not in cls._profiles:
            raise ValueError(f"Unknown retailer: {retailer}. Available: {list(cls._profiles.keys())}")
        return cls._profiles[retailer]

    def resolve_mode(self, retailer: str) -> str:
        profile = self.get_profile(retailer)
        mode, killswitch = self.config.retailer_mode(profile.env_prefix)
        if killswitch:
            if mode != "mock":
                logger.warning(f"{retailer}: kill-switch active, forcing mock instead of {mode}")
            return "mock"
        return mode

    def create(self, retailer: str, mode: Optional[str] = None) -> Provider:
        """
        Create a provider for a retailer.

        Args:
            retailer: Retailer id
            mode: Data mode override; defaults to the configured mode

        Returns:
            Uninitialized provider

        Raises:
            UnknownDataModeError: If the mode is not mock, alt or api
        """
        profile = self.get_profile(retailer)
        mode = (mode or self.resolve_mode(retailer)).lower()
        factory = self._factories.get(mode)
        if factory is None:
            raise UnknownDataModeError(retailer, mode)
        logger.info(f"{retailer}: using {mode} provider")
        return factory(profile)

    def _mock(self, profile: RetailerProfile) -> Provider:
        return MockProvider(
            retailer=profile.retailer,
            catalog=profile.mock_catalog,
            product_url=profile.product_url,
            progress_statuses=profile.progress_statuses,
            store_name=profile.store_name,
            purchase_in_store=profile.purchase_in_store,
            step_delay=self.config.mock_progress_delay_seconds,
        )

    def _browser(self, profile: RetailerProfile) -> Provider:
        return profile.browser_provider(
            self.cache,
            throttle_seconds=self.config.browser_throttle_seconds,
            navigation_timeout=self.config.headless_browser_timeout,
        )

    def _api(self, profile: RetailerProfile) -> Provider:
        return ApiProvider(profile.retailer, profile.display_name)
