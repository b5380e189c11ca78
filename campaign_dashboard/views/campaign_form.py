"""
Campaign Form View

Create and edit screen. Field values are held as entered (strings) and
validated before the adapter is ever called.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional

from ..models import Campaign, CampaignCreate, CampaignStatus, CampaignUpdate, Platform
from ..protocols import CampaignApiError
from .base import BaseView

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR = "Campaign not found"
LOAD_ERROR = "Failed to load campaign"
CREATE_ERROR = "Failed to create campaign"
UPDATE_ERROR = "Failed to update campaign"


def _format_budget(budget: float) -> str:
    return str(int(budget)) if budget.is_integer() else str(budget)


@dataclass
class CampaignFormData:
    """Form field values as entered by the user"""
    name: str = ""
    status: CampaignStatus = CampaignStatus.DRAFT
    platform: Platform = Platform.FACEBOOK
    budget: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    target_audience: str = ""

    @classmethod
    def from_campaign(cls, campaign: Campaign) -> "CampaignFormData":
        return cls(
            name=campaign.name,
            status=campaign.status,
            platform=campaign.platform,
            budget=_format_budget(campaign.budget),
            start_date=campaign.start_date.isoformat(),
            end_date=campaign.end_date.isoformat(),
            description=campaign.description,
            target_audience=campaign.target_audience,
        )


def _parse_budget(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def _parse_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def validate_form(form: CampaignFormData) -> Dict[str, str]:
    """
    Field-level validation.

    Returns:
        Field name -> message for every invalid field (empty when valid)
    """
    errors: Dict[str, str] = {}

    if not form.name.strip():
        errors["name"] = "Campaign name is required"

    budget = _parse_budget(form.budget) if form.budget else None
    if budget is None or not math.isfinite(budget) or budget <= 0:
        errors["budget"] = "Budget must be greater than 0"

    start = _parse_date(form.start_date) if form.start_date else None
    end = _parse_date(form.end_date) if form.end_date else None

    if not form.start_date:
        errors["start_date"] = "Start date is required"
    elif start is None:
        errors["start_date"] = "Start date must be a valid date"

    if not form.end_date:
        errors["end_date"] = "End date is required"
    elif end is None:
        errors["end_date"] = "End date must be a valid date"

    if start and end and start > end:
        errors["end_date"] = "End date must be after start date"

    if not form.description.strip():
        errors["description"] = "Description is required"

    if not form.target_audience.strip():
        errors["target_audience"] = "Target audience is required"

    return errors


class CampaignFormView(BaseView):
    """Create a campaign, or edit one when campaign_id is given"""

    def __init__(self, api, event_bus=None, campaign_id: Optional[str] = None):
        super().__init__(api, event_bus)
        self.campaign_id = campaign_id
        self.form = CampaignFormData()
        self.errors: Dict[str, str] = {}
        self.saving = False
        self.submit_error: Optional[str] = None

    @property
    def is_edit(self) -> bool:
        return self.campaign_id is not None

    async def load(self) -> None:
        if not self.is_edit:
            self._set_loaded()
            return

        self._set_loading()
        try:
            campaign = await self.api.get_campaign(self.campaign_id)
        except CampaignApiError as e:
            logger.error(f"Loading campaign {self.campaign_id} for edit failed: {e}")
            if self.is_mounted:
                self._set_error(LOAD_ERROR)
            return

        if not self.is_mounted:
            return
        if campaign is None:
            self._set_error(NOT_FOUND_ERROR)
            return
        self.form = CampaignFormData.from_campaign(campaign)
        self._set_loaded()

    def validate(self) -> bool:
        self.errors = validate_form(self.form)
        return not self.errors

    def _payload(self) -> CampaignCreate:
        return CampaignCreate(
            name=self.form.name,
            status=self.form.status,
            platform=self.form.platform,
            budget=float(self.form.budget),
            start_date=date.fromisoformat(self.form.start_date),
            end_date=date.fromisoformat(self.form.end_date),
            description=self.form.description,
            target_audience=self.form.target_audience,
        )

    async def submit(self) -> Optional[Campaign]:
        """
        Validate and save the form.

        Returns:
            The saved campaign, or None when validation or saving failed
        """
        if not self.validate():
            return None

        self.saving = True
        self.submit_error = None
        payload = self._payload()
        try:
            if self.is_edit:
                saved = await self.api.update_campaign(
                    self.campaign_id, CampaignUpdate(**payload.model_dump())
                )
            else:
                saved = await self.api.create_campaign(payload)
        except CampaignApiError as e:
            logger.error(f"Saving campaign failed: {e}")
            if self.is_mounted:
                self.submit_error = UPDATE_ERROR if self.is_edit else CREATE_ERROR
            return None
        finally:
            self.saving = False

        await self.publisher.publish_campaigns_updated()
        return saved


__all__ = ["CampaignFormData", "CampaignFormView", "validate_form"]
