"""
Unit Test Fixtures for Campaign Dashboard

Provides pure data fixtures for unit testing.
Uses CampaignTestDataFactory from the data contract.
"""

import pytest

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from campaign_dashboard.seed import initial_campaigns
from campaign_dashboard.views.campaign_form import CampaignFormData


@pytest.fixture
def seed_campaigns():
    """The six fixed sample campaigns"""
    return initial_campaigns()


@pytest.fixture
def valid_form() -> CampaignFormData:
    """Form data that passes validation"""
    return CampaignFormData(
        name="Spring Promo",
        budget="2500",
        start_date="2026-04-01",
        end_date="2026-04-30",
        description="Spring promotion",
        target_audience="Ages 20-40",
    )
