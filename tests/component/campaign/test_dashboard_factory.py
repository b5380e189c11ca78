"""
Component Tests for Dashboard Composition
"""

import pytest

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from core.config import API_MODE_MOCK, API_MODE_REMOTE, DashboardConfig
from campaign_dashboard.client import RemoteCampaignApi
from campaign_dashboard.factory import (
    CampaignDashboardFactory,
    create_campaign_api,
    create_local_campaign_api,
)
from campaign_dashboard.mock_api import LocalCampaignApi
from campaign_dashboard.storage import FileSlotStore, MemorySlotStore
from campaign_dashboard.views import ViewState
from tests.contracts.campaign.data_contract import CampaignStatus

pytestmark = pytest.mark.component


class TestCreateCampaignApi:
    """Adapter selection from configuration"""

    @pytest.mark.asyncio
    async def test_remote_mode(self):
        config = DashboardConfig(api_mode=API_MODE_REMOTE, api_base_url="http://backend/api", api_timeout=3)

        api = create_campaign_api(config)

        assert isinstance(api, RemoteCampaignApi)
        assert api.base_url == "http://backend/api"
        assert api.timeout == 3
        await api.close()

    def test_mock_mode_in_memory(self):
        api = create_campaign_api(DashboardConfig(api_mode=API_MODE_MOCK, mock_latency_scale=0))

        assert isinstance(api, LocalCampaignApi)
        assert isinstance(api.store, MemorySlotStore)
        assert api.latency_scale == 0

    def test_mock_mode_with_storage_dir(self, tmp_path):
        api = create_local_campaign_api(DashboardConfig(storage_dir=str(tmp_path)))

        assert isinstance(api.store, FileSlotStore)
        assert api.store.directory == tmp_path

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            create_campaign_api(DashboardConfig(api_mode="carrier-pigeon"))


class TestCampaignDashboardFactory:
    """Shared adapter and bus for every view"""

    def test_not_initialized(self):
        factory = CampaignDashboardFactory(DashboardConfig(api_mode=API_MODE_MOCK))

        with pytest.raises(RuntimeError):
            factory.api
        with pytest.raises(RuntimeError):
            factory.event_bus

    @pytest.mark.asyncio
    async def test_views_share_adapter_and_bus(self):
        factory = CampaignDashboardFactory(DashboardConfig(api_mode=API_MODE_MOCK, mock_latency_scale=0))
        await factory.initialize()

        dashboard = factory.dashboard_view()
        form = factory.campaign_form_view()

        assert dashboard.api is form.api is factory.api
        assert dashboard.event_bus is form.event_bus is factory.event_bus
        assert factory.campaign_detail_view("1").campaign_id == "1"
        assert factory.campaign_form_view("2").is_edit
        await factory.close()

    @pytest.mark.asyncio
    async def test_form_save_refreshes_dashboard(self):
        factory = CampaignDashboardFactory(DashboardConfig(api_mode=API_MODE_MOCK, mock_latency_scale=0))
        await factory.initialize()
        dashboard = factory.dashboard_view()
        await dashboard.mount()
        form = factory.campaign_form_view(campaign_id="5")
        await form.mount()

        form.form.status = CampaignStatus.ACTIVE
        await form.submit()

        assert dashboard.state == ViewState.LOADED
        assert dashboard.metrics.total_active_budget == 14500 + 6000
        await factory.close()
