"""
Exception hierarchy for the troubleshooting assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Transport and authentication errors raised by the OCI SDK are not wrapped;
they propagate to the caller as-is.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AssistantError(Exception):
    """Base exception for all assistant errors."""

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


class ConfigurationError(AssistantError):
    """Raised when the credential file cannot be read or is invalid."""

    def __init__(
        self,
        message: str,
        config_location: str | None = None,
        profile: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_location: Credential file path
            profile: Profile name inside the credential file
            details: Additional context
        """
        details = details or {}
        if config_location:
            details["config_location"] = config_location
        if profile:
            details["profile"] = profile
        super().__init__(message, details)


class UnexpectedResponseError(AssistantError):
    """Raised when a chat response does not match a known variant."""

    def __init__(
        self,
        message: str = "Unexpected ChatResponse",
        api_format: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if api_format:
            details["api_format"] = api_format
        super().__init__(message, details)


class DocumentProcessingError(AssistantError):
    """Base exception for document processing errors."""


class ParsingError(DocumentProcessingError):
    """Raised when a knowledge directory or PDF cannot be parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            file_path: Directory or file that failed
            details: Additional context
        """
        self.file_path = file_path
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)


class VectorStoreError(AssistantError):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (add, query, remove_all, count)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
