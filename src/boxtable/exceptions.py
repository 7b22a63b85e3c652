"""Exceptions for boxtable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class BoxTableError(Exception):
    """
    Root of the boxtable error hierarchy.

    Rendering itself never raises; errors come from rejected settings,
    so catching this class around table construction and setting
    changes covers every failure the package reports.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(BoxTableError):
    """
    Base exception for invalid table settings.

    Raised synchronously when a setting is assigned, never deferred
    to render time.
    """

    pass


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ConfigurationError, ValueError):
    """
    Raised when a setting value fails validation.

    Attributes:
        field: Name of the rejected setting
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class InvalidPaddingError(ValidationError):
    """Raised when padding is negative or not an integer."""

    def __init__(
        self,
        value: Any,
        reason: str = "Padding must be greater than or equal to 0",
    ) -> None:
        super().__init__("padding", value, reason)
