"""Centralized logging configuration for alert destinations.

Provides a logger factory with file rotation, multiple handlers and
consistent formatting across all package components.

Features:
    - Dual output: Console (stdout) + File handlers
    - Automatic log file rotation
    - Configurable log levels per module
    - Secret masking for diagnostic output

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import SecretStr

if TYPE_CHECKING:
    from alert_destination.config.settings import DestinationSettings

# Global configuration
_ROOT_LOGGER: logging.Logger | None = None
_DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
_LOG_FILE_NAME = "alert_destination.log"
_ERROR_LOG_FILE_NAME = "alert_destination.error.log"
_LOG_FORMAT_DETAILED = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)
_LOG_FORMAT_SIMPLE = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level logger configuration
_MODULE_LEVELS = {
    "alert_destination.models": logging.DEBUG,
    "alert_destination.config": logging.INFO,
}


def mask_secret(value: str | SecretStr | None) -> str:
    """Mask a secret for display, showing only first and last char.

    Args:
        value: Secret to mask, plain or wrapped in SecretStr.

    Returns:
        Masked secret string.
    """
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    if not value:
        return "(not set)"
    if len(value) <= 2:
        return "***"
    return f"{value[0]}{'*' * (len(value) - 2)}{value[-1]}"


def setup_logging(
    log_dir: Path | None = None,
    log_level: str = "INFO",
    file_level: str = "DEBUG",
    console_level: str = "INFO",
    enable_file: bool = True,
    settings: Optional["DestinationSettings"] = None,
    max_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """Configure root logger with file and console handlers.

    Should be called once at application startup by whatever embeds
    the package.

    Args:
        log_dir: Directory for log files. Defaults to alert_destination/logs.
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_level: File handler level (usually DEBUG).
        console_level: Console handler level (usually INFO to reduce noise).
        enable_file: Whether to write logs to files.
        settings: Optional DestinationSettings; its LOG_* values take
            precedence over the keyword arguments.
        max_size_mb: Size in megabytes before a log file is rotated.
        backup_count: Number of rotated files to keep.

    Example:
        setup_logging(
            log_level="INFO",
            console_level="WARNING",
            settings=config,
        )
    """
    global _ROOT_LOGGER

    if settings is not None:
        settings.validate_logging_config()
        log_dir = Path(settings.LOG_DIR)
        log_level = settings.LOG_LEVEL
        console_level = settings.LOG_LEVEL
        enable_file = settings.LOG_TO_FILE
        max_size_mb = settings.LOG_MAX_SIZE_MB
        backup_count = settings.LOG_BACKUP_COUNT

    logs_dir = Path(log_dir) if log_dir else _DEFAULT_LOG_DIR

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(
        logging.Formatter(_LOG_FORMAT_SIMPLE, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    if enable_file:
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / _LOG_FILE_NAME,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        file_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

        # Errors additionally go to alert_destination.error.log
        error_handler = logging.handlers.RotatingFileHandler(
            logs_dir / _ERROR_LOG_FILE_NAME,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT_DETAILED, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(error_handler)

    for module_name, level in _MODULE_LEVELS.items():
        logging.getLogger(module_name).setLevel(level)

    _ROOT_LOGGER = root_logger


def get_logger(name: str, log_level: str | None = None) -> logging.Logger:
    """Get a configured logger instance for a module.

    Call setup_logging() once at startup for full configuration.

    Args:
        name: Logger name (typically __name__ of calling module).
        log_level: Optional override for logger level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Configured logger instance ready for use.

    Example:
        from alert_destination.core.logger import get_logger

        logger = get_logger(__name__)
        logger.debug("Built mail message")
    """
    logger = logging.getLogger(name)

    if log_level:
        logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


def log_context(
    operation: str,
    destination_name: str | None = None,
    **kwargs,
) -> str:
    """Format a log context string with metadata.

    Args:
        operation: Operation name (e.g., "build_mail_message").
        destination_name: Destination the operation concerns, if any.
        **kwargs: Additional context key-value pairs.

    Returns:
        Formatted context string for logging.

    Example:
        msg = log_context("build", destination_name="ops-mail", port=25)
        # Output: [ops-mail] build (port=25)
    """
    context = operation

    if destination_name:
        context = f"[{destination_name}] {context}"

    if kwargs:
        extra = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        context = f"{context} ({extra})"

    return context
