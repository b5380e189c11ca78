#!/usr/bin/env python3
"""Campaign data-access configuration

Selects the adapter implementation (remote REST backend or local mock) and
holds the settings each implementation needs.
"""
import os
from dataclasses import dataclass

DEFAULT_API_BASE_URL = "http://127.0.0.1:3000/api"

API_MODE_REMOTE = "remote"
API_MODE_MOCK = "mock"


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class DashboardConfig:
    """Campaign API adapter settings"""

    # ===========================================
    # Adapter selection
    # ===========================================
    # "remote" talks to the REST backend, "mock" uses the local store
    api_mode: str = API_MODE_REMOTE

    # ===========================================
    # Remote adapter
    # ===========================================
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = 30.0

    # ===========================================
    # Local mock adapter
    # ===========================================
    # Empty storage_dir keeps the campaign slot in process memory
    storage_dir: str = ""
    mock_latency_scale: float = 1.0

    # ===========================================
    # Development backend
    # ===========================================
    server_host: str = "0.0.0.0"
    server_port: int = 3000

    @classmethod
    def from_env(cls) -> 'DashboardConfig':
        """Load adapter configuration from environment variables"""
        return cls(
            api_mode=os.getenv("CAMPAIGN_API_MODE", API_MODE_REMOTE).lower(),
            api_base_url=os.getenv("CAMPAIGN_API_BASE_URL") or DEFAULT_API_BASE_URL,
            api_timeout=_float(os.getenv("CAMPAIGN_API_TIMEOUT", "30"), 30.0),
            storage_dir=os.getenv("CAMPAIGN_STORAGE_DIR", ""),
            mock_latency_scale=_float(os.getenv("CAMPAIGN_MOCK_LATENCY_SCALE", "1"), 1.0),
            server_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            server_port=_int(os.getenv("SERVICE_PORT", "3000"), 3000),
        )
