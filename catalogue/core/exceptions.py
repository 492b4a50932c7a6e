"""
Exception hierarchy for the catalogue pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the pipeline
"""

from typing import Any


class CatalogueException(Exception):
    """Base exception for all catalogue pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class JSONValueError(CatalogueException):
    """Base exception for JSON value codec errors."""

    pass


class JSONValueDecodeError(JSONValueError):
    """Raised when text cannot be decoded into a JSON value."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize decode error.

        Args:
            message: Error message
            position: Character offset where decoding failed
            details: Additional context
        """
        details = details or {}
        if position is not None:
            details["position"] = position
        super().__init__(message, details)


class JSONValueEncodeError(JSONValueError):
    """Raised when a JSON value cannot be written as standard JSON."""

    pass


class UnsupportedJSONTypeError(JSONValueError):
    """Raised when a Python object has no JSON value counterpart."""

    def __init__(self, python_type: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize unsupported type error.

        Args:
            python_type: Name of the offending Python type
            details: Additional context
        """
        details = details or {}
        details["python_type"] = python_type
        super().__init__(f"Unsupported JSON type: {python_type}", details)
