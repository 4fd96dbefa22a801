"""Custom exception definitions for jardoc."""

from typing import Any


class JardocError(Exception):
    """Base exception for all jardoc errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class DeclarationParseError(JardocError):
    """Raised when a class/interface header does not match the expected grammar."""

    def __init__(
        self,
        message: str,
        class_name: str | None = None,
        position: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize declaration parse error.

        Args:
            message: Error message.
            class_name: Name of the class being parsed, if known.
            position: Index of the offending token.
            details: Additional error details.
        """
        details = details or {}
        if class_name:
            details["class_name"] = class_name
        if position is not None:
            details["position"] = position
        super().__init__(message, details)
        self.class_name = class_name
        self.position = position


class MissingInputError(JardocError):
    """Raised when an analysis is requested without any input collection."""

    def __init__(
        self,
        message: str = "input required",
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize missing input error.

        Args:
            message: Error message.
            argument: Name of the missing argument.
            details: Additional error details.
        """
        details = details or {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class SourceUnitValidationError(JardocError):
    """Raised when an extracted source unit is structurally incomplete."""

    def __init__(
        self,
        message: str,
        class_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize source unit validation error.

        Args:
            message: Error message.
            class_name: Class the unit describes.
            details: Additional error details.
        """
        details = details or {}
        if class_name:
            details["class_name"] = class_name
        super().__init__(message, details)


class ConfigurationError(JardocError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
