"""Models module for alert destinations.

Defines Pydantic v2 data models for destination messages and stored
destination configuration.

Created: 2026-10-19
Version: 1.0.0
"""

from alert_destination.models.destination import BaseMessage, DestinationType
from alert_destination.models.mail import MailMessage, MailMessageBuilder
from alert_destination.models.mail_destination import MailDestination

__all__ = [
    # Enums
    "DestinationType",
    # Messages
    "BaseMessage",
    "MailMessage",
    "MailMessageBuilder",
    # Configuration
    "MailDestination",
]
