"""
Campaign Dashboard Views

Headless screen controllers consuming the campaign adapter.
"""

from .base import BaseView, ViewState
from .dashboard import DashboardView
from .campaign_list import CampaignListView
from .campaign_detail import CampaignDetailView
from .campaign_form import CampaignFormData, CampaignFormView, validate_form

__all__ = [
    "BaseView",
    "ViewState",
    "DashboardView",
    "CampaignListView",
    "CampaignDetailView",
    "CampaignFormData",
    "CampaignFormView",
    "validate_form",
]
