"""
Dashboard View

Aggregate metrics screen. Reloads whenever a campaigns.updated event is
published while it is mounted.
"""

import logging
from typing import Any, Dict, List, Optional

from ..events import CampaignEventType
from ..models import DashboardMetrics
from ..protocols import CampaignApiError
from .base import BaseView

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load dashboard metrics"


class DashboardView(BaseView):
    """Campaign performance dashboard"""

    def __init__(self, api, event_bus=None):
        super().__init__(api, event_bus)
        self.metrics: Optional[DashboardMetrics] = None
        self._subscription_id: Optional[str] = None

    async def mount(self) -> None:
        self._mounted = True
        if self.event_bus and self._subscription_id is None:
            self._subscription_id = self.event_bus.subscribe(
                CampaignEventType.CAMPAIGNS_UPDATED, self.load
            )
        await self.load()

    def unmount(self) -> None:
        super().unmount()
        if self.event_bus and self._subscription_id:
            self.event_bus.unsubscribe(self._subscription_id)
            self._subscription_id = None

    async def load(self) -> None:
        self._set_loading()
        try:
            metrics = await self.api.get_dashboard_metrics()
        except CampaignApiError as e:
            logger.error(f"Dashboard metrics failed: {e}")
            if self.is_mounted:
                self._set_error(LOAD_ERROR)
            return

        if not self.is_mounted:
            return
        self.metrics = metrics
        self._set_loaded(empty=metrics.total_campaigns == 0)

    # ====================
    # Chart Data
    # ====================

    @property
    def total_campaigns(self) -> int:
        return self.metrics.total_campaigns if self.metrics else 0

    def status_chart_data(self) -> List[Dict[str, Any]]:
        """One pie slice per status, zero counts included"""
        if not self.metrics:
            return []
        return [
            {"name": status.value.capitalize(), "value": count}
            for status, count in self.metrics.campaigns_by_status.items()
        ]

    def platform_chart_data(self) -> List[Dict[str, Any]]:
        """One bar per platform with a positive budget"""
        if not self.metrics:
            return []
        return [
            {
                "name": platform.value.capitalize(),
                "budget": budget,
                "platform": platform.value,
            }
            for platform, budget in self.metrics.budget_by_platform.items()
            if budget > 0
        ]


__all__ = ["DashboardView"]
