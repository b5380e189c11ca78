"""
Campaign Dashboard Factory

Composes the dashboard: picks the campaign adapter from configuration and
wires every view to the same adapter and event bus.
"""

import logging
from typing import Optional

from core.config import API_MODE_MOCK, API_MODE_REMOTE, DashboardConfig

from .client import RemoteCampaignApi
from .events import CampaignEventBus
from .mock_api import LocalCampaignApi
from .protocols import CampaignApiProtocol
from .storage import FileSlotStore, MemorySlotStore
from .views import (
    CampaignDetailView,
    CampaignFormView,
    CampaignListView,
    DashboardView,
)

logger = logging.getLogger(__name__)


def create_local_campaign_api(config: DashboardConfig) -> LocalCampaignApi:
    """Build the local mock adapter with the storage config.storage_dir selects"""
    if config.storage_dir:
        store = FileSlotStore(config.storage_dir)
        logger.info(f"Using local campaign API with storage in {config.storage_dir}")
    else:
        store = MemorySlotStore()
        logger.info("Using local campaign API with in-memory storage")
    return LocalCampaignApi(store=store, latency_scale=config.mock_latency_scale)


def create_campaign_api(config: Optional[DashboardConfig] = None) -> CampaignApiProtocol:
    """
    Build the campaign adapter selected by config.api_mode.

    Args:
        config: Adapter configuration, loaded from env when omitted

    Returns:
        RemoteCampaignApi or LocalCampaignApi
    """
    config = config or DashboardConfig.from_env()

    if config.api_mode == API_MODE_REMOTE:
        logger.info(f"Using remote campaign API at {config.api_base_url}")
        return RemoteCampaignApi(config=config)

    if config.api_mode == API_MODE_MOCK:
        return create_local_campaign_api(config)

    raise ValueError(
        f"Unknown campaign API mode {config.api_mode!r}, "
        f"expected {API_MODE_REMOTE!r} or {API_MODE_MOCK!r}"
    )


class CampaignDashboardFactory:
    """Factory for creating dashboard components"""

    def __init__(self, config: Optional[DashboardConfig] = None):
        self.config = config or DashboardConfig.from_env()
        self._api: Optional[CampaignApiProtocol] = None
        self._event_bus: Optional[CampaignEventBus] = None

    async def initialize(self) -> None:
        """Initialize adapter and event bus"""
        logger.info("Initializing campaign dashboard components...")
        self._api = create_campaign_api(self.config)
        self._event_bus = CampaignEventBus()
        logger.info("Campaign dashboard components initialized")

    async def close(self) -> None:
        """Close the adapter's resources"""
        logger.info("Closing campaign dashboard components...")
        if isinstance(self._api, RemoteCampaignApi):
            await self._api.close()
        self._api = None
        self._event_bus = None
        logger.info("Campaign dashboard components closed")

    @property
    def api(self) -> CampaignApiProtocol:
        """Get campaign adapter"""
        if not self._api:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._api

    @property
    def event_bus(self) -> CampaignEventBus:
        """Get event bus"""
        if not self._event_bus:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._event_bus

    # ====================
    # Views
    # ====================

    def dashboard_view(self) -> DashboardView:
        return DashboardView(self.api, self.event_bus)

    def campaign_list_view(self) -> CampaignListView:
        return CampaignListView(self.api, self.event_bus)

    def campaign_detail_view(self, campaign_id: str) -> CampaignDetailView:
        return CampaignDetailView(self.api, campaign_id, self.event_bus)

    def campaign_form_view(self, campaign_id: Optional[str] = None) -> CampaignFormView:
        return CampaignFormView(self.api, self.event_bus, campaign_id=campaign_id)


# Global factory instance
_factory: Optional[CampaignDashboardFactory] = None


async def get_factory() -> CampaignDashboardFactory:
    """Get or create factory instance"""
    global _factory
    if _factory is None:
        _factory = CampaignDashboardFactory()
        await _factory.initialize()
    return _factory


async def close_factory() -> None:
    """Close factory instance"""
    global _factory
    if _factory:
        await _factory.close()
        _factory = None


__all__ = [
    "CampaignDashboardFactory",
    "create_campaign_api",
    "create_local_campaign_api",
    "get_factory",
    "close_factory",
]
