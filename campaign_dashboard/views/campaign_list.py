"""
Campaign List View

Lists campaigns with search and status/platform filters, and deletes
campaigns after explicit confirmation.
"""

import logging
from typing import Callable, List, Optional

from ..models import Campaign
from ..protocols import CampaignApiError
from .base import BaseView

logger = logging.getLogger(__name__)

ALL = "all"
LOAD_ERROR = "Failed to load campaigns"
DELETE_ERROR = "Failed to delete campaign"


class CampaignListView(BaseView):
    """Campaign table with search, filters and delete"""

    def __init__(self, api, event_bus=None):
        super().__init__(api, event_bus)
        self.campaigns: List[Campaign] = []
        self.search_term = ""
        self.status_filter = ALL
        self.platform_filter = ALL
        self.deleting_id: Optional[str] = None
        self.action_error: Optional[str] = None

    async def load(self) -> None:
        self._set_loading()
        try:
            campaigns = await self.api.list_campaigns()
        except CampaignApiError as e:
            logger.error(f"Listing campaigns failed: {e}")
            if self.is_mounted:
                self._set_error(LOAD_ERROR)
            return

        if not self.is_mounted:
            return
        self.campaigns = campaigns
        self._set_loaded(empty=not campaigns)

    @property
    def filtered_campaigns(self) -> List[Campaign]:
        """Campaigns matching the search term and both filters"""
        term = self.search_term.lower()

        def matches(campaign: Campaign) -> bool:
            matches_search = (
                term in campaign.name.lower()
                or term in campaign.platform.value
                or term in campaign.status.value
            )
            matches_status = self.status_filter in (ALL, campaign.status.value)
            matches_platform = self.platform_filter in (ALL, campaign.platform.value)
            return matches_search and matches_status and matches_platform

        return [c for c in self.campaigns if matches(c)]

    async def delete(
        self, campaign_id: str, confirm: Callable[[Campaign], bool]
    ) -> bool:
        """
        Delete a campaign once the user confirms.

        Args:
            campaign_id: Campaign to delete
            confirm: Asked with the campaign; must return True to proceed

        Returns:
            True if the campaign was deleted
        """
        campaign = next((c for c in self.campaigns if c.id == campaign_id), None)
        if campaign is None or not confirm(campaign):
            return False

        self.deleting_id = campaign_id
        self.action_error = None
        try:
            await self.api.delete_campaign(campaign_id)
        except CampaignApiError as e:
            logger.error(f"Deleting campaign {campaign_id} failed: {e}")
            if self.is_mounted:
                self.action_error = DELETE_ERROR
            return False
        finally:
            self.deleting_id = None

        if self.is_mounted:
            self.campaigns = [c for c in self.campaigns if c.id != campaign_id]
            self._set_loaded(empty=not self.campaigns)
        await self.publisher.publish_campaigns_updated()
        return True


__all__ = ["CampaignListView", "ALL"]
