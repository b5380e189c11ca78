"""
Campaign Detail View

Shows one campaign; performance insights are fetched on demand and keep
their own state next to the campaign's.
"""

import logging
from typing import Optional

from ..models import Campaign, CampaignInsights
from ..protocols import CampaignApiError
from .base import BaseView, ViewState

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR = "Campaign not found"
LOAD_ERROR = "Failed to load campaign"
INSIGHTS_ERROR = "Failed to fetch insights. Please try again."


class CampaignDetailView(BaseView):
    """Campaign detail screen with lazy insights"""

    def __init__(self, api, campaign_id: str, event_bus=None):
        super().__init__(api, event_bus)
        self.campaign_id = campaign_id
        self.campaign: Optional[Campaign] = None
        self.insights: Optional[CampaignInsights] = None
        # None until insights are first requested
        self.insights_state: Optional[ViewState] = None
        self.insights_error: Optional[str] = None

    async def load(self) -> None:
        self._set_loading()
        try:
            campaign = await self.api.get_campaign(self.campaign_id)
        except CampaignApiError as e:
            logger.error(f"Loading campaign {self.campaign_id} failed: {e}")
            if self.is_mounted:
                self._set_error(LOAD_ERROR)
            return

        if not self.is_mounted:
            return
        if campaign is None:
            self._set_error(NOT_FOUND_ERROR)
            return
        self.campaign = campaign
        self._set_loaded()

    async def fetch_insights(self) -> Optional[CampaignInsights]:
        """Request insights for the campaign"""
        self.insights_state = ViewState.LOADING
        self.insights_error = None
        try:
            insights = await self.api.get_campaign_insights(self.campaign_id)
        except CampaignApiError as e:
            logger.error(f"Insights for campaign {self.campaign_id} failed: {e}")
            if self.is_mounted:
                self.insights_state = ViewState.ERROR
                self.insights_error = INSIGHTS_ERROR
            return None

        if not self.is_mounted:
            return None
        self.insights = insights
        self.insights_state = ViewState.LOADED
        return insights


__all__ = ["CampaignDetailView"]
