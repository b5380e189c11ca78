"""
Campaign Dashboard Data Models

Canonical data structures shared by both adapter implementations,
the view layer and the development backend.

Python attributes are snake_case; the wire form (HTTP bodies and the
persisted campaign slot) uses camelCase aliases.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================

class CampaignStatus(str, Enum):
    """Campaign lifecycle status"""
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    DRAFT = "draft"


class Platform(str, Enum):
    """Advertising platform the campaign runs on"""
    FACEBOOK = "facebook"
    GOOGLE = "google"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"


# =============================================================================
# BASE MODELS
# =============================================================================

class BaseContract(BaseModel):
    """Base model for all contracts"""

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        # Unknown wire fields are dropped on read
        "extra": "ignore",
    }

    def to_wire(self, **kwargs) -> Dict[str, Any]:
        """Dump to the camelCase JSON-compatible wire form"""
        return self.model_dump(mode="json", by_alias=True, **kwargs)


def _require_text(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


# =============================================================================
# CAMPAIGN MODELS
# =============================================================================

class CampaignCreate(BaseContract):
    """Campaign fields supplied by the caller on creation"""
    name: str = Field(..., min_length=1)
    status: CampaignStatus
    platform: Platform
    budget: float = Field(..., ge=0)
    start_date: date
    end_date: date
    description: str = Field(..., min_length=1)
    target_audience: str = Field(..., min_length=1)

    @field_validator("name", "description", "target_audience")
    @classmethod
    def validate_text(cls, v):
        return _require_text(v)

    @model_validator(mode="after")
    def validate_date_range(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class Campaign(CampaignCreate):
    """Core Campaign model"""
    id: str = Field(..., min_length=1)
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v):
        # Naive timestamps are UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class CampaignUpdate(BaseContract):
    """Partial campaign update; only explicitly set fields are applied"""
    name: Optional[str] = Field(None, min_length=1)
    status: Optional[CampaignStatus] = None
    platform: Optional[Platform] = None
    budget: Optional[float] = Field(None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = Field(None, min_length=1)
    target_audience: Optional[str] = Field(None, min_length=1)

    @field_validator("name", "description", "target_audience")
    @classmethod
    def validate_text(cls, v):
        return _require_text(v)

    @model_validator(mode="after")
    def validate_date_range(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually set, keyed by attribute name"""
        return self.model_dump(exclude_unset=True, exclude_none=True)

    def to_wire(self, **kwargs) -> Dict[str, Any]:
        kwargs.setdefault("exclude_unset", True)
        kwargs.setdefault("exclude_none", True)
        return super().to_wire(**kwargs)


# =============================================================================
# DERIVED MODELS
# =============================================================================

class Engagement(BaseContract):
    """Social engagement counters"""
    likes: int = Field(..., ge=0)
    shares: int = Field(..., ge=0)
    comments: int = Field(..., ge=0)


class CampaignInsights(BaseContract):
    """Simulated performance insights for one campaign (never persisted)"""
    impressions: int = Field(..., ge=0)
    clicks: int = Field(..., ge=0)
    conversions: int = Field(..., ge=0)
    ctr: float = Field(..., ge=0)
    cpc: float = Field(..., ge=0)
    roi: float = Field(..., ge=0)
    engagement: Engagement


class DashboardMetrics(BaseContract):
    """Aggregates over the full campaign collection"""
    campaigns_by_status: Dict[CampaignStatus, int] = Field(default_factory=dict, validate_default=True)
    budget_by_platform: Dict[Platform, float] = Field(default_factory=dict, validate_default=True)
    total_active_budget: float = 0

    @field_validator("campaigns_by_status")
    @classmethod
    def fill_statuses(cls, v):
        return {status: v.get(status, 0) for status in CampaignStatus}

    @field_validator("budget_by_platform")
    @classmethod
    def fill_platforms(cls, v):
        return {platform: v.get(platform, 0) for platform in Platform}

    @property
    def total_campaigns(self) -> int:
        return sum(self.campaigns_by_status.values())


# =============================================================================
# SERVICE MODELS
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str
    campaigns: int


class ErrorResponse(BaseModel):
    """Standard error body; the remote adapter reads `message` first"""
    message: str


__all__ = [
    # Enums
    "CampaignStatus",
    "Platform",
    # Core Models
    "BaseContract",
    "Campaign",
    "CampaignCreate",
    "CampaignUpdate",
    # Derived
    "Engagement",
    "CampaignInsights",
    "DashboardMetrics",
    # Service Models
    "HealthResponse",
    "ErrorResponse",
]
