"""
Campaign Dashboard Development Backend

FastAPI application serving the campaign HTTP surface under /api, backed
by the local campaign adapter. Lets the remote adapter run end to end
without a separate backend.
Port: 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import get_settings
from core.logger import setup_service_logger

from .factory import create_local_campaign_api
from .mock_api import LocalCampaignApi
from .models import (
    Campaign,
    CampaignCreate,
    CampaignInsights,
    CampaignUpdate,
    DashboardMetrics,
    ErrorResponse,
    HealthResponse,
)
from .protocols import (
    CampaignApiError,
    CampaignNotFoundError,
    CampaignStorageError,
    CampaignValidationError,
)

logger = logging.getLogger(__name__)

# Service configuration
SERVICE_NAME = "campaign_dashboard"
SERVICE_VERSION = "1.0.0"
API_PREFIX = "/api"

NOT_FOUND_MESSAGE = "Campaign not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    settings = get_settings()
    setup_service_logger(SERVICE_NAME, config=settings.logging)

    config = settings.dashboard
    logger.info(f"Starting {SERVICE_NAME} on port {config.server_port}")

    app.state.campaign_api = create_local_campaign_api(config)

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")
    app.state.campaign_api = None


# Create FastAPI application
app = FastAPI(
    title="Campaign Dashboard Backend",
    description="Development backend for campaign management and dashboard metrics",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)


# ====================
# Exception Handlers
# ====================


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@app.exception_handler(CampaignNotFoundError)
async def campaign_not_found_handler(request: Request, exc: CampaignNotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(CampaignValidationError)
async def validation_error_handler(request: Request, exc: CampaignValidationError):
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid request")
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "Invalid value")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        f"{field}: {detail}" if field else detail,
    )


@app.exception_handler(CampaignStorageError)
async def storage_error_handler(request: Request, exc: CampaignStorageError):
    logger.error(f"Campaign storage failure on {request.url.path}: {exc.message}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(CampaignApiError)
async def campaign_error_handler(request: Request, exc: CampaignApiError):
    logger.error(f"Campaign error on {request.url.path}: {exc.message}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


# ====================
# Dependencies
# ====================


def get_campaign_api(request: Request) -> LocalCampaignApi:
    """Get the campaign adapter the backend serves from"""
    api = getattr(request.app.state, "campaign_api", None)
    if api is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return api


router = APIRouter(prefix=API_PREFIX)


# ====================
# Health Endpoints
# ====================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(api: LocalCampaignApi = Depends(get_campaign_api)):
    """Health check endpoint"""
    campaigns = await api.list_campaigns()
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        campaigns=len(campaigns),
    )


# ====================
# Campaign CRUD Endpoints
# ====================


@router.get("/campaigns", response_model=List[Campaign], tags=["Campaigns"])
async def list_campaigns(api: LocalCampaignApi = Depends(get_campaign_api)):
    """List all campaigns in storage order"""
    return await api.list_campaigns()


@router.get("/campaigns/{campaign_id}", response_model=Campaign, tags=["Campaigns"])
async def get_campaign(campaign_id: str, api: LocalCampaignApi = Depends(get_campaign_api)):
    """Get campaign by ID"""
    campaign = await api.get_campaign(campaign_id)
    if campaign is None:
        raise CampaignNotFoundError(NOT_FOUND_MESSAGE)
    return campaign


@router.post(
    "/campaigns",
    response_model=Campaign,
    status_code=status.HTTP_201_CREATED,
    tags=["Campaigns"],
)
async def create_campaign(
    request: CampaignCreate,
    api: LocalCampaignApi = Depends(get_campaign_api),
):
    """Create a new campaign"""
    campaign = await api.create_campaign(request)
    logger.info(f"Created campaign {campaign.id}: {campaign.name}")
    return campaign


@router.patch("/campaigns/{campaign_id}", response_model=Campaign, tags=["Campaigns"])
async def update_campaign(
    campaign_id: str,
    request: CampaignUpdate,
    api: LocalCampaignApi = Depends(get_campaign_api),
):
    """Apply a partial update to a campaign"""
    return await api.update_campaign(campaign_id, request)


@router.delete(
    "/campaigns/{campaign_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Campaigns"],
)
async def delete_campaign(campaign_id: str, api: LocalCampaignApi = Depends(get_campaign_api)):
    """Delete a campaign; unknown ids succeed"""
    await api.delete_campaign(campaign_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ====================
# Derived Data Endpoints
# ====================


@router.get(
    "/campaigns/{campaign_id}/insights",
    response_model=CampaignInsights,
    tags=["Insights"],
)
async def get_campaign_insights(
    campaign_id: str,
    api: LocalCampaignApi = Depends(get_campaign_api),
):
    """Simulated performance insights for an existing campaign"""
    if await api.get_campaign(campaign_id) is None:
        raise CampaignNotFoundError(NOT_FOUND_MESSAGE)
    return await api.get_campaign_insights(campaign_id)


@router.get("/dashboard/metrics", response_model=DashboardMetrics, tags=["Dashboard"])
async def get_dashboard_metrics(api: LocalCampaignApi = Depends(get_campaign_api)):
    """Aggregate metrics over all campaigns"""
    return await api.get_dashboard_metrics()


app.include_router(router)


# ====================
# Main Entry Point
# ====================


def main():
    """Run the development backend"""
    import uvicorn

    config = get_settings().dashboard
    uvicorn.run(
        "campaign_dashboard.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=get_settings().logging.log_level.lower(),
    )


if __name__ == "__main__":
    main()
