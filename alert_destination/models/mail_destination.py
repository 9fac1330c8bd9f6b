"""Stored mail destination model.

Defines the Pydantic model for a configured mail destination and the
bridge from it to per-alert MailMessage instances.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr, field_validator

from alert_destination.models.mail import MailMessage, MailMessageBuilder


class MailDestination(BaseModel):
    """Mail destination configuration model.

    Validated when the destination is saved, long before any alert fires.
    Every alert then gets its own MailMessage from create_message().

    Attributes:
        name: Destination name (default subject of messages).
        host: SMTP server hostname.
        port: SMTP server port (1-65535), optional.
        method: Authentication method, optional.
        from_address: Sender email address.
        recipients: Comma-separated recipient addresses.
        subject: Fixed subject line, optional.
        username: SMTP authentication username, optional.
        password: SMTP authentication password, optional.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Destination name")
    host: str = Field(..., min_length=1, description="SMTP server hostname")
    port: int | None = Field(default=None, ge=1, le=65535, description="SMTP server port")
    method: str | None = Field(default=None, description="Authentication method")
    from_address: EmailStr = Field(..., alias="from", description="Sender email address")
    recipients: str = Field(..., min_length=1, description="Comma-separated recipients")
    subject: str | None = Field(default=None, description="Fixed subject line")
    username: SecretStr | None = Field(default=None, description="SMTP username")
    password: SecretStr | None = Field(default=None, description="SMTP password")

    @field_validator("host", "recipients")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate value is not whitespace-only.

        Args:
            v: Value to validate.

        Returns:
            Trimmed value.

        Raises:
            ValueError: If value is only whitespace.
        """
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()

    def to_builder(self) -> MailMessageBuilder:
        """Get a builder prefilled with everything except the body.

        Returns:
            MailMessageBuilder for this destination.
        """
        return (
            MailMessage.builder(self.name)
            .with_host(self.host)
            .with_port(self.port)
            .with_method(self.method)
            .with_from(str(self.from_address))
            .with_recipients(self.recipients)
            .with_subject(self.subject)
            .with_username(self.username)
            .with_password(self.password)
        )

    def create_message(self, body: str, subject: str | None = None) -> MailMessage:
        """Build the message for one alert.

        Args:
            body: Rendered alert body.
            subject: Subject override; the stored subject is used when None.

        Returns:
            Validated MailMessage.

        Raises:
            MissingFieldError: If body is empty.
        """
        builder = self.to_builder().with_body(body)
        if subject is not None:
            builder.with_subject(subject)
        return builder.build()
