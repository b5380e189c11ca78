"""
Component Test Fixtures for Campaign Dashboard

Provides local adapters over in-memory slots, remote adapters over
httpx.MockTransport and mocked adapters for the views.
"""

import json
import random
import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable
from unittest.mock import AsyncMock

import httpx

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from campaign_dashboard.client import RemoteCampaignApi
from campaign_dashboard.events import CampaignEventBus
from campaign_dashboard.mock_api import STORAGE_KEY, LocalCampaignApi
from campaign_dashboard.storage import MemorySlotStore
from tests.contracts.campaign.data_contract import DashboardMetrics

BASE_URL = "http://test/api"


# ====================
# Clock
# ====================


class FakeClock:
    """Deterministic clock; advance() moves it forward"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc))


# ====================
# Local Adapter
# ====================


@pytest.fixture
def slot_store() -> MemorySlotStore:
    """Empty slot store; first read seeds it"""
    return MemorySlotStore()


@pytest.fixture
def local_api(slot_store, clock) -> LocalCampaignApi:
    """Local adapter without simulated latency"""
    return LocalCampaignApi(
        store=slot_store, latency_scale=0, rng=random.Random(42), clock=clock
    )


@pytest.fixture
def empty_local_api(clock) -> LocalCampaignApi:
    """Local adapter whose slot holds an empty collection"""
    store = MemorySlotStore({STORAGE_KEY: json.dumps([])})
    return LocalCampaignApi(store=store, latency_scale=0, rng=random.Random(7), clock=clock)


# ====================
# Remote Adapter
# ====================


@pytest.fixture
def make_remote_api() -> Callable[[Callable[[httpx.Request], httpx.Response]], RemoteCampaignApi]:
    """Build a remote adapter whose requests are answered by a handler"""

    def _make(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return RemoteCampaignApi(base_url=BASE_URL, client=client)

    return _make


# ====================
# Views
# ====================


@pytest.fixture
def event_bus() -> CampaignEventBus:
    return CampaignEventBus()


@pytest.fixture
def mock_api(factory):
    """AsyncMock adapter with sensible defaults"""
    api = AsyncMock()
    api.list_campaigns.return_value = factory.make_campaigns(3)
    api.get_campaign.return_value = factory.make_campaign(id="1")
    api.get_campaign_insights.return_value = factory.make_insights(1)
    api.get_dashboard_metrics.return_value = DashboardMetrics(
        campaigns_by_status={"active": 2, "draft": 1},
        budget_by_platform={"google": 3000},
        total_active_budget=3000,
    )
    api.delete_campaign.return_value = None
    return api
