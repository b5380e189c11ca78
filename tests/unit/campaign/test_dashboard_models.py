"""
Unit Tests for Campaign Dashboard Models

Tests validation rules and the camelCase wire form.
"""

import pytest
from datetime import date, datetime, timezone
from pydantic import ValidationError

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from tests.contracts.campaign.data_contract import (
    Campaign,
    CampaignCreate,
    CampaignStatus,
    CampaignUpdate,
    DashboardMetrics,
    Platform,
)

pytestmark = pytest.mark.unit


class TestCampaignCreate:
    """Tests for the create payload"""

    def test_accepts_camel_case_wire_payload(self):
        payload = CampaignCreate.model_validate({
            "name": "Launch",
            "status": "active",
            "platform": "google",
            "budget": 1200,
            "startDate": "2026-02-01",
            "endDate": "2026-02-28",
            "description": "Launch campaign",
            "targetAudience": "Developers",
        })

        assert payload.status == CampaignStatus.ACTIVE
        assert payload.platform == Platform.GOOGLE
        assert payload.start_date == date(2026, 2, 1)
        assert payload.target_audience == "Developers"

    def test_accepts_snake_case_names(self, factory):
        payload = factory.make_create_request(target_audience="Students")
        assert payload.target_audience == "Students"

    def test_rejects_blank_name(self, factory):
        with pytest.raises(ValidationError):
            factory.make_create_request(name="   ")

    def test_rejects_negative_budget(self, factory):
        with pytest.raises(ValidationError):
            factory.make_create_request(budget=-1)

    def test_zero_budget_is_allowed(self, factory):
        assert factory.make_create_request(budget=0).budget == 0

    def test_rejects_unknown_status(self, factory):
        with pytest.raises(ValidationError):
            factory.make_create_request(status="archived")

    def test_rejects_unknown_platform(self, factory):
        with pytest.raises(ValidationError):
            factory.make_create_request(platform="tiktok")

    def test_rejects_start_after_end(self, factory):
        with pytest.raises(ValidationError):
            factory.make_create_request(
                start_date=date(2026, 5, 2), end_date=date(2026, 5, 1)
            )

    def test_same_day_range_is_allowed(self, factory):
        payload = factory.make_create_request(
            start_date=date(2026, 5, 1), end_date=date(2026, 5, 1)
        )
        assert payload.start_date == payload.end_date


class TestCampaign:
    """Tests for the full campaign record"""

    def test_wire_form_uses_camel_case(self, factory):
        campaign = factory.make_campaign(budget=750.5)
        wire = campaign.to_wire()

        assert set(wire) == {
            "id", "name", "status", "platform", "budget", "startDate",
            "endDate", "description", "targetAudience", "createdAt", "updatedAt",
        }
        assert wire["status"] == campaign.status.value
        assert wire["startDate"] == campaign.start_date.isoformat()
        assert wire["budget"] == 750.5

    def test_wire_form_parses_back(self, factory):
        campaign = factory.make_campaign()
        assert Campaign.model_validate(campaign.to_wire()) == campaign

    def test_naive_timestamps_become_utc(self, factory):
        campaign = factory.make_campaign(
            created_at=datetime(2026, 1, 1, 9, 0),
            updated_at=datetime(2026, 1, 2, 9, 0),
        )
        assert campaign.created_at.tzinfo == timezone.utc
        assert campaign.updated_at.tzinfo == timezone.utc

    def test_unknown_wire_fields_are_ignored(self, factory):
        wire = factory.make_wire_campaign(owner="someone")
        campaign = Campaign.model_validate(wire)
        assert not hasattr(campaign, "owner")

    def test_rejects_missing_id(self, factory):
        wire = factory.make_wire_campaign()
        del wire["id"]
        with pytest.raises(ValidationError):
            Campaign.model_validate(wire)


class TestCampaignUpdate:
    """Tests for partial updates"""

    def test_changes_only_include_set_fields(self):
        update = CampaignUpdate(status=CampaignStatus.PAUSED, budget=900)
        assert update.changes() == {"status": CampaignStatus.PAUSED, "budget": 900}

    def test_wire_form_only_includes_set_fields(self):
        update = CampaignUpdate.model_validate({"targetAudience": "Parents"})
        assert update.to_wire() == {"targetAudience": "Parents"}

    def test_empty_update_has_no_changes(self):
        assert CampaignUpdate().changes() == {}

    def test_rejects_blank_description(self):
        with pytest.raises(ValidationError):
            CampaignUpdate(description=" ")

    def test_rejects_inverted_date_range(self):
        with pytest.raises(ValidationError):
            CampaignUpdate(start_date=date(2026, 6, 2), end_date=date(2026, 6, 1))


class TestDashboardMetrics:
    """Tests for the aggregate metrics shape"""

    def test_missing_keys_are_zero(self):
        metrics = DashboardMetrics.model_validate({
            "campaignsByStatus": {"active": 2},
            "budgetByPlatform": {"google": 100},
            "totalActiveBudget": 100,
        })

        assert metrics.campaigns_by_status == {
            CampaignStatus.ACTIVE: 2,
            CampaignStatus.PAUSED: 0,
            CampaignStatus.COMPLETED: 0,
            CampaignStatus.DRAFT: 0,
        }
        assert metrics.budget_by_platform[Platform.GOOGLE] == 100
        assert metrics.budget_by_platform[Platform.TWITTER] == 0

    def test_defaults_cover_every_key(self):
        metrics = DashboardMetrics()
        assert set(metrics.campaigns_by_status) == set(CampaignStatus)
        assert set(metrics.budget_by_platform) == set(Platform)
        assert metrics.total_campaigns == 0

    def test_wire_form_uses_enum_values_as_keys(self):
        wire = DashboardMetrics(campaigns_by_status={CampaignStatus.DRAFT: 1}).to_wire()
        assert wire["campaignsByStatus"]["draft"] == 1
        assert wire["budgetByPlatform"]["facebook"] == 0
        assert wire["totalActiveBudget"] == 0

    def test_rejects_unknown_status_key(self):
        with pytest.raises(ValidationError):
            DashboardMetrics.model_validate({"campaignsByStatus": {"archived": 1}})
