"""Alert destination configuration with Pydantic v2.

Manages logging settings loaded from environment variables or .env file.
All settings can be overridden via environment variables.

Created: 2026-10-19
Version: 1.0.0
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from alert_destination.core.exceptions import DestinationConfigError


class DestinationSettings(BaseSettings):
    """Alert destination configuration.

    Loads settings from environment variables and .env file using Pydantic v2.

    Attributes:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_TO_FILE: Whether to log to file.
        LOG_DIR: Directory for log files.
        LOG_MAX_SIZE_MB: Maximum log file size before rotation.
        LOG_BACKUP_COUNT: Number of rotated log files to keep.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        description="Whether to log to file",
    )
    LOG_DIR: str = Field(
        default="./logs",
        description="Directory for log files",
    )
    LOG_MAX_SIZE_MB: int = Field(
        default=10,
        gt=0,
        description="Maximum log file size in megabytes",
    )
    LOG_BACKUP_COUNT: int = Field(
        default=5,
        gt=0,
        description="Number of backup log files to keep",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the log level so "debug" is accepted.

        Args:
            v: Raw log level value.

        Returns:
            Upper-cased log level.
        """
        return v.strip().upper() if isinstance(v, str) else v

    def validate_logging_config(self) -> None:
        """Validate logging configuration before handlers are installed.

        Raises:
            DestinationConfigError: If file logging is enabled without a
                usable log directory.
        """
        if self.LOG_TO_FILE and not self.LOG_DIR.strip():
            raise DestinationConfigError(
                "LOG_DIR cannot be empty when LOG_TO_FILE is enabled"
            )
