#!/usr/bin/env python3
"""
Service logger setup

Configures named loggers from LoggingConfig so every entry point
(development backend, scripts) logs the same way.
"""

import logging
from typing import Optional

from core.config import LoggingConfig


def setup_service_logger(
    name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure and return a logger for a service.

    Args:
        name: Logger name (usually the service name)
        level: Optional level override (e.g. "DEBUG")
        config: Logging configuration, loaded from env when omitted

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel((level or config.log_level).upper())

    # Avoid stacking handlers when called more than once
    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


__all__ = ["setup_service_logger"]
