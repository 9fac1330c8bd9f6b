"""Pytest configuration and fixtures for alert destination tests.

Provides reusable fixtures for mail message and destination tests.

Version: 1.0.0
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from typing import Any, Generator

import pytest

# Set test environment before importing application modules
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from alert_destination.models.mail import MailMessage, MailMessageBuilder  # noqa: E402


# =============================================================================
# Mail Message Fixtures
# =============================================================================
@pytest.fixture
def mail_builder() -> MailMessageBuilder:
    """Create a builder with every required field set."""
    return (
        MailMessage.builder("alert-dest")
        .with_host("smtp.example.com")
        .with_from("noreply@example.com")
        .with_recipients("ops@example.com")
        .with_body("Disk usage 95%")
    )


@pytest.fixture
def credentials() -> dict[str, str]:
    """Credential values that must never show up in rendered output."""
    return {"username": "smtp-user-7f3a", "password": "hunter2-9c1e"}


# =============================================================================
# Destination Fixtures
# =============================================================================
@pytest.fixture
def sample_destination() -> dict[str, Any]:
    """Create a stored mail destination, as loaded from configuration."""
    return {
        "name": "ops-mail",
        "host": "smtp.example.com",
        "port": 587,
        "method": "starttls",
        "from": "alerts@example.com",
        "recipients": "ops@example.com,oncall@example.com",
        "username": "smtp-user-7f3a",
        "password": "hunter2-9c1e",
    }


# =============================================================================
# Logging Fixtures
# =============================================================================
@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Remove handlers installed by setup_logging() and restore root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        # pytest's own capture handlers are subclasses and stay untouched
        if type(handler) in (
            logging.StreamHandler,
            logging.handlers.RotatingFileHandler,
        ):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
