"""
Local Campaign API

Mock adapter that keeps the whole campaign collection in a single
storage slot. Every call loads the full collection, works on it in
memory and, when mutating, writes the full collection back.

Calls sleep for a fixed per-operation delay (scaled by latency_scale)
to behave like a network backend.
"""

import asyncio
import json
import logging
import random
import re
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from pydantic import ValidationError

from .metrics import compute_dashboard_metrics
from .models import (
    Campaign,
    CampaignCreate,
    CampaignInsights,
    CampaignUpdate,
    DashboardMetrics,
    Engagement,
)
from .protocols import (
    CampaignNotFoundError,
    CampaignStorageError,
    SlotStoreProtocol,
    coerce_model,
    validation_error_from,
)
from .seed import initial_campaigns
from .storage import MemorySlotStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "campaigns_data"

# Simulated latency per operation, in milliseconds
LATENCY_MS = {
    "list": 300,
    "get": 200,
    "create": 400,
    "update": 400,
    "delete": 300,
    "insights": 800,  # slower third-party analytics
    "metrics": 300,
}

_LEADING_DIGITS = re.compile(r"\s*\+?(\d+)")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def insights_seed(campaign_id: str) -> int:
    """Leading integer of the id (an optional + sign is allowed), or 1 when there is none or it is zero"""
    match = _LEADING_DIGITS.match(campaign_id)
    value = int(match.group(1)) if match else 0
    return value or 1


class LocalCampaignApi:
    """Campaign adapter backed by a local storage slot"""

    def __init__(
        self,
        store: Optional[SlotStoreProtocol] = None,
        latency_scale: float = 1.0,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store if store is not None else MemorySlotStore()
        self.latency_scale = latency_scale
        self.rng = rng or random.Random()
        self.clock = clock or _utcnow

    # ====================
    # Persistence
    # ====================

    def _load(self) -> List[Campaign]:
        raw = self.store.get(STORAGE_KEY)
        if not raw:
            campaigns = initial_campaigns()
            self._save(campaigns)
            logger.info(f"Seeded campaign storage with {len(campaigns)} campaigns")
            return campaigns

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Campaign storage is not valid JSON: {e}")
            raise CampaignStorageError(f"Campaign storage is corrupted: {e}") from e

        if not isinstance(records, list):
            logger.error(f"Campaign storage holds {type(records).__name__}, expected list")
            raise CampaignStorageError("Campaign storage is corrupted: expected a list of campaigns")

        try:
            return [Campaign.model_validate(record) for record in records]
        except ValidationError as e:
            logger.error(f"Campaign storage holds an invalid record: {e}")
            raise CampaignStorageError(
                f"Campaign storage is corrupted: {validation_error_from(e).message}"
            ) from e

    def _save(self, campaigns: List[Campaign]) -> None:
        self.store.set(STORAGE_KEY, json.dumps([c.to_wire() for c in campaigns]))

    async def _delay(self, operation: str) -> None:
        if self.latency_scale > 0:
            await asyncio.sleep(LATENCY_MS[operation] / 1000 * self.latency_scale)

    def _next_id(self, campaigns: List[Campaign]) -> str:
        taken = {c.id for c in campaigns}
        candidate = int(self.clock().timestamp() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def reset(self) -> List[Campaign]:
        """Overwrite storage with the seed campaigns"""
        campaigns = initial_campaigns()
        self._save(campaigns)
        logger.info("Campaign storage reset to seed data")
        return campaigns

    # ====================
    # Campaign CRUD
    # ====================

    async def list_campaigns(self) -> List[Campaign]:
        await self._delay("list")
        return self._load()

    async def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        await self._delay("get")
        for campaign in self._load():
            if campaign.id == campaign_id:
                return campaign
        return None

    async def create_campaign(self, data: Union[CampaignCreate, dict]) -> Campaign:
        await self._delay("create")
        payload = coerce_model(CampaignCreate, data)

        campaigns = self._load()
        now = self.clock()
        campaign = Campaign(
            **payload.model_dump(),
            id=self._next_id(campaigns),
            created_at=now,
            updated_at=now,
        )
        campaigns.append(campaign)
        self._save(campaigns)

        logger.debug(f"Created campaign {campaign.id}")
        return campaign

    async def update_campaign(
        self, campaign_id: str, data: Union[CampaignUpdate, dict]
    ) -> Campaign:
        await self._delay("update")
        update = coerce_model(CampaignUpdate, data)

        campaigns = self._load()
        index = next(
            (i for i, c in enumerate(campaigns) if c.id == campaign_id), None
        )
        if index is None:
            raise CampaignNotFoundError("Campaign not found")

        current = campaigns[index]
        merged = {
            **current.model_dump(),
            **update.changes(),
            "id": current.id,
            "created_at": current.created_at,
            "updated_at": max(self.clock(), current.updated_at),
        }
        try:
            updated = Campaign.model_validate(merged)
        except ValidationError as e:
            raise validation_error_from(e) from e

        campaigns[index] = updated
        self._save(campaigns)

        logger.debug(f"Updated campaign {campaign_id}: {sorted(update.changes())}")
        return updated

    async def delete_campaign(self, campaign_id: str) -> None:
        await self._delay("delete")
        campaigns = self._load()
        remaining = [c for c in campaigns if c.id != campaign_id]
        self._save(remaining)
        if len(remaining) == len(campaigns):
            logger.debug(f"Delete of unknown campaign {campaign_id} ignored")

    # ====================
    # Derived Data
    # ====================

    async def get_campaign_insights(self, campaign_id: str) -> CampaignInsights:
        await self._delay("insights")

        seed = insights_seed(campaign_id)
        return CampaignInsights(
            impressions=10000 + seed * 5432,
            clicks=500 + seed * 123,
            conversions=50 + seed * 12,
            ctr=round(2.5 + self.rng.random() * 2, 2),
            cpc=round(0.5 + self.rng.random() * 1.5, 2),
            roi=round(150 + self.rng.random() * 100, 2),
            engagement=Engagement(
                likes=200 + seed * 45,
                shares=50 + seed * 12,
                comments=30 + seed * 8,
            ),
        )

    async def get_dashboard_metrics(self) -> DashboardMetrics:
        await self._delay("metrics")
        return compute_dashboard_metrics(self._load())


__all__ = ["LocalCampaignApi", "STORAGE_KEY", "LATENCY_MS", "insights_seed"]
