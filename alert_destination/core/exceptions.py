"""Custom exceptions for alert destinations.

Defines specific exception types for destination message construction
failures to enable precise error handling and logging.

None of these derive from ValueError, so raising them inside a pydantic
validator propagates the exception itself instead of a ValidationError.

Created: 2026-10-19
Version: 1.0.0
"""

from __future__ import annotations


class DestinationError(Exception):
    """Base exception for all alert destination errors.

    Serves as the parent class for all custom exceptions in the package,
    allowing consumers to catch all destination-related errors with a single
    except block.

    Example:
        try:
            message = builder.build()
        except DestinationError as e:
            logger.error(f"Rejected destination config: {e}")
    """

    pass


class DestinationConfigError(DestinationError):
    """Exception raised for configuration errors.

    Indicates invalid or missing values in DestinationSettings.

    Example:
        raise DestinationConfigError("LOG_DIR cannot be empty")
    """

    pass


class InvalidDestinationTypeError(DestinationError):
    """Exception raised when a message is built for the wrong destination type.

    Attributes:
        destination_type: The type tag that was supplied.
        expected: The type tag the message class requires.

    Example:
        raise InvalidDestinationTypeError("slack", expected="mail")
    """

    def __init__(self, destination_type: object, expected: object) -> None:
        """Initialize destination type error.

        Args:
            destination_type: Supplied type tag.
            expected: Required type tag.
        """
        super().__init__(
            f"Channel type {destination_type!s} does not match {expected!s}"
        )
        self.destination_type = destination_type
        self.expected = expected


class MissingFieldError(DestinationError):
    """Exception raised when a required message field is absent or empty.

    Attributes:
        field_name: Name of the missing field (body, host, from, recipients).

    Example:
        raise MissingFieldError("host")
    """

    def __init__(self, field_name: str) -> None:
        """Initialize missing field error.

        Args:
            field_name: Name of the missing field.
        """
        super().__init__(f"Required field '{field_name}' is missing or empty")
        self.field_name = field_name


class BuilderConsumedError(DestinationError):
    """Exception raised when a builder is reused after build().

    Example:
        raise BuilderConsumedError("MailMessageBuilder was already built")
    """

    pass
