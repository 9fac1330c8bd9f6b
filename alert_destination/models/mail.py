"""Mail message model and builder.

Defines the immutable MailMessage handed to a mail-sending collaborator
and the single-use builder that assembles it.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, model_validator

from alert_destination.core.exceptions import (
    BuilderConsumedError,
    DestinationError,
    InvalidDestinationTypeError,
    MissingFieldError,
)
from alert_destination.core.logger import get_logger, log_context, mask_secret
from alert_destination.models.destination import BaseMessage, DestinationType

logger = get_logger(__name__)

DEFAULT_PORT = 25
DEFAULT_METHOD = "none"


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_secret(value: str | SecretStr | None) -> SecretStr | None:
    if value is None or isinstance(value, SecretStr):
        return value
    return SecretStr(value)


class MailMessage(BaseMessage):
    """Validated content of a mail notification.

    Instances are frozen. Build them with MailMessage.builder(name);
    direct construction runs the same checks.

    Attributes:
        host: SMTP server hostname.
        port: SMTP server port (25 when not supplied).
        method: Authentication/transport method ("none" when not supplied).
        from_address: Sender address (alias "from").
        recipients: Comma-separated recipient list, kept verbatim.
        subject: Subject line (destination name when not supplied or blank).
        username: Optional SMTP username.
        password: Optional SMTP password.
    """

    host: str = Field(..., description="SMTP server hostname")
    port: int = Field(default=DEFAULT_PORT, description="SMTP server port")
    method: str = Field(default=DEFAULT_METHOD, description="Authentication method")
    from_address: str = Field(..., alias="from", description="Sender address")
    recipients: str = Field(..., description="Comma-separated recipients")
    subject: str = Field(..., description="Subject line")
    username: SecretStr | None = Field(default=None, description="SMTP username")
    password: SecretStr | None = Field(default=None, description="SMTP password")

    @model_validator(mode="before")
    @classmethod
    def check_fields_and_apply_defaults(cls, data: Any) -> Any:
        """Check required fields in order and resolve defaults.

        Args:
            data: Raw constructor input.

        Returns:
            Input with port, method and subject resolved.

        Raises:
            InvalidDestinationTypeError: If the type tag is not MAIL.
            MissingFieldError: If body, host, from or recipients is empty.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        destination_type = data.get("destination_type")
        if destination_type != DestinationType.MAIL:
            raise InvalidDestinationTypeError(
                destination_type, expected=DestinationType.MAIL.value
            )

        if "from" in data and "from_address" not in data:
            data["from_address"] = data.pop("from")

        for key, field_name in (
            ("body", "body"),
            ("host", "host"),
            ("from_address", "from"),
            ("recipients", "recipients"),
        ):
            if _is_missing(data.get(key)):
                raise MissingFieldError(field_name)

        if data.get("port") is None:
            data["port"] = DEFAULT_PORT
        if data.get("method") is None:
            data["method"] = DEFAULT_METHOD
        if _is_blank(data.get("subject")):
            data["subject"] = data.get("destination_name")

        return data

    @classmethod
    def builder(cls, destination_name: str) -> MailMessageBuilder:
        """Start a builder for a mail message."""
        return MailMessageBuilder(destination_name)

    @property
    def has_credentials(self) -> bool:
        """Whether both username and password were supplied."""
        return self.username is not None and self.password is not None

    def __str__(self) -> str:
        # Credentials are never part of the summary
        return (
            f"DestinationType: {self.destination_type.name}, "
            f"DestinationName:{self.destination_name}, "
            f"Host: {self.host}, Port: {self.port}, Message: {self.body}"
        )


class MailMessageBuilder:
    """Single-use builder for MailMessage.

    Setters only record values; build() validates and returns the
    frozen message. A successful build() consumes the builder.

    Example:
        message = (
            MailMessage.builder("alert-dest")
            .with_host("smtp.example.com")
            .with_from("noreply@example.com")
            .with_recipients("ops@example.com")
            .with_body("Disk usage 95%")
            .build()
        )
    """

    def __init__(
        self,
        destination_name: str,
        destination_type: DestinationType | str = DestinationType.MAIL,
    ) -> None:
        """Initialize builder.

        Args:
            destination_name: Name of the destination, default subject.
            destination_type: Channel tag; anything but MAIL fails at build().
        """
        self._fields: dict[str, Any] = {
            "destination_type": destination_type,
            "destination_name": destination_name,
        }
        self._consumed = False

    def _set(self, key: str, value: Any) -> MailMessageBuilder:
        if self._consumed:
            raise BuilderConsumedError("MailMessageBuilder was already built")
        self._fields[key] = value
        return self

    def with_host(self, host: str) -> MailMessageBuilder:
        return self._set("host", host)

    def with_port(self, port: int | None) -> MailMessageBuilder:
        return self._set("port", port)

    def with_method(self, method: str | None) -> MailMessageBuilder:
        return self._set("method", method)

    def with_from(self, from_address: str) -> MailMessageBuilder:
        return self._set("from_address", from_address)

    def with_recipients(self, recipients: str) -> MailMessageBuilder:
        return self._set("recipients", recipients)

    def with_subject(self, subject: str | None) -> MailMessageBuilder:
        return self._set("subject", subject)

    def with_body(self, body: str) -> MailMessageBuilder:
        return self._set("body", body)

    def with_username(self, username: str | SecretStr | None) -> MailMessageBuilder:
        return self._set("username", _as_secret(username))

    def with_password(self, password: str | SecretStr | None) -> MailMessageBuilder:
        return self._set("password", _as_secret(password))

    def build(self) -> MailMessage:
        """Validate collected fields and produce the message.

        Returns:
            Frozen MailMessage.

        Raises:
            BuilderConsumedError: If build() already succeeded once.
            InvalidDestinationTypeError: If the type tag is not MAIL.
            MissingFieldError: If body, host, from or recipients is empty.
        """
        if self._consumed:
            raise BuilderConsumedError("MailMessageBuilder was already built")

        destination_name = self._fields.get("destination_name")
        username = mask_secret(self._fields.get("username"))
        try:
            message = MailMessage.model_validate(self._fields)
        except DestinationError as e:
            logger.warning(
                f"{log_context('build_mail_message', destination_name, username=username)} "
                f"rejected: {e}"
            )
            raise

        self._consumed = True
        self._fields = {}

        logger.debug(
            f"{log_context('build_mail_message', destination_name)}: {message}"
        )
        return message
