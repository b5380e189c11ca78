"""
Remote Campaign API

Adapter that maps each campaign operation onto the REST backend and
normalizes HTTP responses and failures into typed results.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from core.config import DashboardConfig

from .models import (
    Campaign,
    CampaignCreate,
    CampaignInsights,
    CampaignUpdate,
    DashboardMetrics,
)
from .protocols import (
    CampaignRequestError,
    CampaignTransportError,
    CampaignValidationError,
    coerce_model,
    validation_error_from,
)

logger = logging.getLogger(__name__)


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def extract_error_message(response: httpx.Response) -> str:
    """
    Pick a human-readable message out of a failed response.

    Priority: JSON `message`, JSON `error`, raw body text, then a
    synthesized status message.
    """
    if _is_json(response):
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            if isinstance(data.get("message"), str):
                return data["message"]
            if isinstance(data.get("error"), str):
                return data["error"]

    if response.text:
        return response.text

    return f"Request failed with status {response.status_code}"


class RemoteCampaignApi:
    """Campaign adapter for the REST backend"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[DashboardConfig] = None,
    ):
        """
        Initialize the remote adapter.

        Args:
            base_url: Backend base URL (defaults to the configured one)
            timeout: Request timeout in seconds
            client: Pre-built httpx client (e.g. bound to an ASGI transport)
            config: Adapter configuration, loaded from env when omitted
        """
        if config is None:
            config = DashboardConfig.from_env()

        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api_timeout

        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": "campaign-dashboard-client",
            },
        )

        logger.debug(f"Initialized remote campaign API: {self.base_url}")

    async def close(self):
        """Close the HTTP client if this adapter created it"""
        if self._owns_client:
            await self.client.aclose()
            logger.debug("Closed remote campaign API client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ====================
    # HTTP Plumbing
    # ====================

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _send(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        url = self.build_url(path)
        logger.debug(f"{method} {url}")
        try:
            return await self.client.request(method, url, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e!r}")
            raise CampaignTransportError(
                f"Could not reach campaign backend: {str(e) or type(e).__name__}"
            ) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        message = extract_error_message(response)
        logger.warning(
            f"{response.request.method} {response.request.url} "
            f"returned {response.status_code}: {message}"
        )
        raise CampaignRequestError(message, status_code=response.status_code)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204:
            return None
        if _is_json(response):
            try:
                return response.json()
            except ValueError as e:
                logger.error(
                    f"{response.request.method} {response.request.url} "
                    f"returned invalid JSON: {e}"
                )
                raise CampaignValidationError(
                    "Backend returned invalid JSON"
                ) from e
        return response.text

    async def _request(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> Any:
        response = await self._send(method, path, json=json)
        self._raise_for_status(response)
        return self._decode(response)

    @staticmethod
    def _parse(model_cls, data: Any):
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            logger.error(f"Backend returned an invalid {model_cls.__name__}: {e}")
            raise validation_error_from(e) from e

    # ====================
    # Campaign CRUD
    # ====================

    async def list_campaigns(self) -> List[Campaign]:
        """
        List all campaigns.

        Returns:
            Campaigns in backend order
        """
        data = await self._request("GET", "campaigns")
        if not isinstance(data, list):
            raise CampaignValidationError("Expected a list of campaigns from backend")
        return [self._parse(Campaign, item) for item in data]

    async def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        """
        Get campaign by ID.

        Args:
            campaign_id: Campaign ID

        Returns:
            Campaign, or None if the backend answers 404
        """
        response = await self._send("GET", f"campaigns/{campaign_id}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return self._parse(Campaign, self._decode(response))

    async def create_campaign(self, data: Union[CampaignCreate, dict]) -> Campaign:
        """
        Create a new campaign.

        Args:
            data: Campaign fields without id and timestamps

        Returns:
            Created campaign with backend-assigned id and timestamps
        """
        payload = coerce_model(CampaignCreate, data)
        created = await self._request("POST", "campaigns", json=payload.to_wire())
        return self._parse(Campaign, created)

    async def update_campaign(
        self, campaign_id: str, data: Union[CampaignUpdate, dict]
    ) -> Campaign:
        """
        Apply a partial update.

        Args:
            campaign_id: Campaign ID
            data: Fields to change

        Returns:
            Full updated campaign
        """
        update = coerce_model(CampaignUpdate, data)
        updated = await self._request(
            "PATCH", f"campaigns/{campaign_id}", json=update.to_wire()
        )
        return self._parse(Campaign, updated)

    async def delete_campaign(self, campaign_id: str) -> None:
        """Delete a campaign"""
        await self._request("DELETE", f"campaigns/{campaign_id}")

    # ====================
    # Derived Data
    # ====================

    async def get_campaign_insights(self, campaign_id: str) -> CampaignInsights:
        """Get performance insights for a campaign"""
        data = await self._request("GET", f"campaigns/{campaign_id}/insights")
        return self._parse(CampaignInsights, data)

    async def get_dashboard_metrics(self) -> DashboardMetrics:
        """Get aggregate metrics over all campaigns"""
        data = await self._request("GET", "dashboard/metrics")
        return self._parse(DashboardMetrics, data)

    async def health_check(self) -> bool:
        """Check if the campaign backend is healthy"""
        try:
            response = await self._send("GET", "health")
            return response.status_code == 200
        except CampaignTransportError:
            return False


__all__ = ["RemoteCampaignApi", "extract_error_message"]
