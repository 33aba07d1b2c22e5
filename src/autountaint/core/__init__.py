"""Core infrastructure: settings and structured logging."""

from autountaint.core.config import Settings, get_settings
from autountaint.core.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
