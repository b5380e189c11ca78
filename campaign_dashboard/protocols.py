"""
Campaign Dashboard Protocols

Defines interfaces for dependency injection and testing.
Views depend on CampaignApiProtocol only; the remote and local-mock
adapters are interchangeable implementations chosen at composition time.
"""

from typing import Any, Callable, List, Optional, Protocol

from pydantic import ValidationError

from .models import (
    Campaign,
    CampaignCreate,
    CampaignInsights,
    CampaignUpdate,
    DashboardMetrics,
)


# ====================
# Adapter Protocol
# ====================


class CampaignApiProtocol(Protocol):
    """Protocol for the campaign data-access adapter"""

    async def list_campaigns(self) -> List[Campaign]:
        """List all campaigns in storage order"""
        ...

    async def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        """Get campaign by ID, None when it does not exist"""
        ...

    async def create_campaign(self, data: CampaignCreate) -> Campaign:
        """Create a campaign and return it with id and timestamps"""
        ...

    async def update_campaign(
        self, campaign_id: str, data: CampaignUpdate
    ) -> Campaign:
        """Apply a partial update and return the full campaign"""
        ...

    async def delete_campaign(self, campaign_id: str) -> None:
        """Delete a campaign; deleting a missing id is not an error"""
        ...

    async def get_campaign_insights(self, campaign_id: str) -> CampaignInsights:
        """Get performance insights for a campaign"""
        ...

    async def get_dashboard_metrics(self) -> DashboardMetrics:
        """Get aggregate metrics over all campaigns"""
        ...


# ====================
# Storage Protocol
# ====================


class SlotStoreProtocol(Protocol):
    """Protocol for named string slots (the local mock's persistence)"""

    def get(self, key: str) -> Optional[str]:
        """Read a slot, None when it has never been written"""
        ...

    def set(self, key: str, value: str) -> None:
        """Overwrite a slot"""
        ...

    def remove(self, key: str) -> None:
        """Remove a slot if present"""
        ...


# ====================
# Event Bus Protocol
# ====================


class EventBusProtocol(Protocol):
    """Protocol for the in-process notification bus"""

    def subscribe(self, event_type: Any, handler: Callable[[], Any]) -> str:
        """Register a handler and return its subscription id"""
        ...

    def unsubscribe(self, subscription_id: str) -> bool:
        """Remove a subscription"""
        ...

    async def publish(self, event_type: Any) -> int:
        """Notify every handler subscribed to event_type"""
        ...


# ====================
# Custom Exceptions
# ====================


class CampaignApiError(Exception):
    """Base exception for campaign data-access errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CampaignNotFoundError(CampaignApiError):
    """Raised when a mutation targets a campaign that does not exist"""
    pass


class CampaignValidationError(CampaignApiError):
    """Raised when campaign data fails validation"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class CampaignRequestError(CampaignApiError):
    """Raised when the backend answers with a non-2xx status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CampaignTransportError(CampaignApiError):
    """Raised when the backend cannot be reached"""
    pass


class CampaignStorageError(CampaignApiError):
    """Raised when the persisted campaign slot is malformed"""
    pass


def validation_error_from(exc: ValidationError) -> CampaignValidationError:
    """Collapse a pydantic ValidationError into a single CampaignValidationError"""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    detail = first.get("msg", str(exc))
    message = f"{field}: {detail}" if field else detail
    return CampaignValidationError(message, field=field)


def coerce_model(model_cls, data):
    """Validate a mapping into model_cls, passing model instances through"""
    if isinstance(data, model_cls):
        return data
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise validation_error_from(e) from e


__all__ = [
    "CampaignApiProtocol",
    "SlotStoreProtocol",
    "EventBusProtocol",
    "CampaignApiError",
    "CampaignNotFoundError",
    "CampaignValidationError",
    "CampaignRequestError",
    "CampaignTransportError",
    "CampaignStorageError",
    "validation_error_from",
    "coerce_model",
]
