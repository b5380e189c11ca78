#!/usr/bin/env python3
"""
Core Module for the Campaign Dashboard

Shared infrastructure used by the campaign_dashboard package.

COMPONENTS:
    - config/: Environment-driven configuration (adapter mode, logging)
    - logger.py: Named logger setup from LoggingConfig

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("campaign_dashboard")
"""

from .config import AppConfig, get_settings, reload_settings
from .logger import setup_service_logger

__all__ = [
    "AppConfig",
    "get_settings",
    "reload_settings",
    "setup_service_logger",
]
