"""
Dashboard metric aggregation

Pure functions over a campaign collection; used by the local mock
adapter and the development backend.
"""

from typing import Iterable

from .models import Campaign, CampaignStatus, DashboardMetrics, Platform


def compute_dashboard_metrics(campaigns: Iterable[Campaign]) -> DashboardMetrics:
    """
    Aggregate counts per status, budget per platform and active budget.

    Every status and platform key is present in the result, zero when no
    campaign contributes to it.
    """
    by_status = {status: 0 for status in CampaignStatus}
    by_platform = {platform: 0.0 for platform in Platform}
    total_active_budget = 0.0

    for campaign in campaigns:
        by_status[campaign.status] += 1
        by_platform[campaign.platform] += campaign.budget
        if campaign.status == CampaignStatus.ACTIVE:
            total_active_budget += campaign.budget

    return DashboardMetrics(
        campaigns_by_status=by_status,
        budget_by_platform=by_platform,
        total_active_budget=total_active_budget,
    )


__all__ = ["compute_dashboard_metrics"]
