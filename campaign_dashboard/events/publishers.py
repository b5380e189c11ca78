"""
Campaign Event Publishers

Publishes campaign mutation notifications to the event bus.
"""

import logging
from typing import Optional

from ..protocols import EventBusProtocol
from .models import CampaignEventType

logger = logging.getLogger(__name__)


class CampaignEventPublisher:
    """Publisher for campaign dashboard events"""

    def __init__(self, event_bus: Optional[EventBusProtocol] = None):
        self.event_bus = event_bus

    async def publish(self, event_type: CampaignEventType) -> bool:
        """
        Publish an event to the bus.

        Args:
            event_type: The event type enum

        Returns:
            True if published, False when no bus is configured
        """
        if not self.event_bus:
            logger.debug(f"Event bus not configured, skipping publish: {event_type.value}")
            return False

        await self.event_bus.publish(event_type)
        logger.debug(f"Published event: {event_type.value}")
        return True

    async def publish_campaigns_updated(self) -> bool:
        """Publish campaigns.updated after a create, update or delete"""
        return await self.publish(CampaignEventType.CAMPAIGNS_UPDATED)


__all__ = ["CampaignEventPublisher"]
