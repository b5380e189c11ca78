"""
Campaign Event Definitions

Event identifiers broadcast inside the dashboard process.
"""

from enum import Enum


class CampaignEventType(str, Enum):
    """
    Events published after campaign mutations.

    Events carry no payload; subscribers re-query the adapter for
    current state.
    """
    CAMPAIGNS_UPDATED = "campaigns.updated"


__all__ = ["CampaignEventType"]
