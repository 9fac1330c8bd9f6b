"""Core module for alert destinations.

Provides exceptions and logging configuration.

Created: 2026-10-19
Version: 1.0.0
"""

from alert_destination.core.exceptions import (
    BuilderConsumedError,
    DestinationConfigError,
    DestinationError,
    InvalidDestinationTypeError,
    MissingFieldError,
)
from alert_destination.core.logger import (
    get_logger,
    log_context,
    mask_secret,
    setup_logging,
)

__all__ = [
    # Exceptions
    "DestinationError",
    "DestinationConfigError",
    "InvalidDestinationTypeError",
    "MissingFieldError",
    "BuilderConsumedError",
    # Logging
    "get_logger",
    "setup_logging",
    "log_context",
    "mask_secret",
]
