"""Destination data models.

Defines the destination type enumeration and the base message shared by
every destination variant.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DestinationType(str, Enum):
    """Destination channel enumeration.

    Attributes:
        MAIL: Email delivered over SMTP.
        CHIME: Amazon Chime webhook.
        SLACK: Slack incoming webhook.
        CUSTOMWEBHOOK: Arbitrary HTTP webhook.
    """

    MAIL = "mail"
    CHIME = "chime"
    SLACK = "slack"
    CUSTOMWEBHOOK = "custom_webhook"


class BaseMessage(BaseModel):
    """Fields common to every destination message.

    Attributes:
        destination_type: Channel the message is meant for.
        destination_name: Name of the configured destination.
        body: Rendered message content.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    destination_type: DestinationType = Field(..., description="Destination channel")
    destination_name: str = Field(
        ..., min_length=1, description="Configured destination name"
    )
    body: str = Field(..., description="Message content")

    def __str__(self) -> str:
        return (
            f"DestinationType: {self.destination_type.name}, "
            f"DestinationName:{self.destination_name}, Message: {self.body}"
        )
