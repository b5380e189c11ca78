"""
Campaign Dashboard Events

Cross-view notification: event types, the in-process bus and the
publisher used by mutating views.
"""

from .models import CampaignEventType
from .bus import CampaignEventBus
from .publishers import CampaignEventPublisher

__all__ = [
    "CampaignEventType",
    "CampaignEventBus",
    "CampaignEventPublisher",
]
