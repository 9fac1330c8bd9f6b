"""Alert Destination - validated notification messages for alerting.

Provides the message values an alerting pipeline hands to its senders:
- Destination types (mail, chime, slack, custom webhook)
- Immutable MailMessage built through a single-use builder
- Stored mail destination configuration

Modules:
    - core: Exceptions, logger
    - config: Pydantic v2 settings
    - models: Destination and message models

Usage:
    from alert_destination import MailMessage

    message = (
        MailMessage.builder("ops-mail")
        .with_host("smtp.example.com")
        .with_from("noreply@example.com")
        .with_recipients("ops@example.com,oncall@example.com")
        .with_body("Disk usage 95%")
        .build()
    )

Created: 2026-10-19
Version: 1.0.0
"""

__version__ = "1.0.0"

# Configuration
from alert_destination.config import DestinationSettings, get_settings

# Core utilities
from alert_destination.core import (
    BuilderConsumedError,
    DestinationConfigError,
    DestinationError,
    InvalidDestinationTypeError,
    MissingFieldError,
    get_logger,
    setup_logging,
)

# Models
from alert_destination.models import (
    BaseMessage,
    DestinationType,
    MailDestination,
    MailMessage,
    MailMessageBuilder,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "DestinationError",
    "DestinationConfigError",
    "InvalidDestinationTypeError",
    "MissingFieldError",
    "BuilderConsumedError",
    "get_logger",
    "setup_logging",
    # Configuration
    "DestinationSettings",
    "get_settings",
    # Models
    "DestinationType",
    "BaseMessage",
    "MailMessage",
    "MailMessageBuilder",
    "MailDestination",
]
