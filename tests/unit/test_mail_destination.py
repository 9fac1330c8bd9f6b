"""Unit tests for stored mail destinations.

Tests configuration validation and per-alert message creation.

Version: 1.0.0
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from alert_destination.core.exceptions import MissingFieldError
from alert_destination.models.destination import BaseMessage, DestinationType
from alert_destination.models.mail import MailMessage
from alert_destination.models.mail_destination import MailDestination


class TestMailDestinationValidation:
    """Tests for destination configuration validation."""

    def test_valid_destination(self, sample_destination):
        """Test a complete destination loads with alias field names."""
        destination = MailDestination.model_validate(sample_destination)

        assert destination.name == "ops-mail"
        assert destination.from_address == "alerts@example.com"
        assert destination.password.get_secret_value() == "hunter2-9c1e"

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range(self, sample_destination, port):
        """Test port must be a valid TCP port."""
        sample_destination["port"] = port

        with pytest.raises(ValidationError):
            MailDestination.model_validate(sample_destination)

    def test_invalid_from_address(self, sample_destination):
        """Test sender must be an email address."""
        sample_destination["from"] = "not-an-email"

        with pytest.raises(ValidationError):
            MailDestination.model_validate(sample_destination)

    @pytest.mark.parametrize("field", ["host", "recipients"])
    def test_blank_fields_rejected(self, sample_destination, field):
        """Test whitespace-only host and recipients are rejected."""
        sample_destination[field] = "   "

        with pytest.raises(ValidationError):
            MailDestination.model_validate(sample_destination)

    def test_repr_hides_password(self, sample_destination):
        """Test stored credentials are masked in repr."""
        destination = MailDestination.model_validate(sample_destination)

        assert "hunter2-9c1e" not in repr(destination)


class TestCreateMessage:
    """Tests for building messages from a destination."""

    def test_create_message(self, sample_destination):
        """Test message carries destination settings and alert body."""
        destination = MailDestination.model_validate(sample_destination)

        message = destination.create_message("CPU above 90%")

        assert isinstance(message, MailMessage)
        assert isinstance(message, BaseMessage)
        assert message.destination_type == DestinationType.MAIL
        assert message.destination_name == "ops-mail"
        assert message.host == "smtp.example.com"
        assert message.port == 587
        assert message.method == "starttls"
        assert message.from_address == "alerts@example.com"
        assert message.recipients == "ops@example.com,oncall@example.com"
        assert message.subject == "ops-mail"
        assert message.body == "CPU above 90%"
        assert message.has_credentials is True

    def test_defaults_when_port_and_method_absent(self, sample_destination):
        """Test unset port and method resolve to message defaults."""
        del sample_destination["port"]
        del sample_destination["method"]
        destination = MailDestination.model_validate(sample_destination)

        message = destination.create_message("CPU above 90%")

        assert message.port == 25
        assert message.method == "none"

    def test_stored_subject_and_override(self, sample_destination):
        """Test stored subject is used unless overridden."""
        sample_destination["subject"] = "Production alert"
        destination = MailDestination.model_validate(sample_destination)

        assert destination.create_message("x").subject == "Production alert"
        assert (
            destination.create_message("x", subject="Weekly Report").subject
            == "Weekly Report"
        )

    def test_empty_body_rejected(self, sample_destination):
        """Test alert body is required."""
        destination = MailDestination.model_validate(sample_destination)

        with pytest.raises(MissingFieldError) as exc_info:
            destination.create_message("")

        assert exc_info.value.field_name == "body"

    def test_to_builder_returns_fresh_builder(self, sample_destination):
        """Test each call yields an independent builder."""
        destination = MailDestination.model_validate(sample_destination)

        first = destination.to_builder()
        second = destination.to_builder()

        assert first is not second
        first.with_body("first").build()
        assert second.with_body("second").build().body == "second"
