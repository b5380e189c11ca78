"""
API Test Fixtures for Campaign Dashboard

Provides an httpx client bound to the development backend and a remote
adapter that talks to it.
"""

import random
import pytest
import pytest_asyncio
import httpx
from httpx import ASGITransport

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from campaign_dashboard.client import RemoteCampaignApi
from campaign_dashboard.main import app
from campaign_dashboard.mock_api import LocalCampaignApi


# ====================
# Test Configuration
# ====================


class APITestConfig:
    """Configuration for API tests"""

    BASE_URL = "http://test"
    API_URL = f"{BASE_URL}/api"


@pytest.fixture(scope="session")
def api_config():
    """Provide API test configuration"""
    return APITestConfig()


# ====================
# Backend
# ====================


@pytest.fixture
def backend_api() -> LocalCampaignApi:
    """Local adapter the backend serves from"""
    return LocalCampaignApi(latency_scale=0, rng=random.Random(1))


@pytest_asyncio.fixture
async def http_client(api_config, backend_api):
    """Provide async HTTP client bound to the backend app"""
    app.state.campaign_api = backend_api
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url=api_config.BASE_URL,
    ) as client:
        yield client
    app.state.campaign_api = None


@pytest_asyncio.fixture
async def remote_api(api_config, http_client):
    """Remote adapter talking to the backend app"""
    async with RemoteCampaignApi(base_url=api_config.API_URL, client=http_client) as api:
        yield api
