"""
Custom exception hierarchy for the Prompt Library application.

Catalog queries never raise these; they report failures as ErrorResult
values. Exceptions are reserved for startup problems and for malformed
requests at the tool dispatch boundary.
"""

from typing import Any


class PromptLibraryError(Exception):
    """
    Base exception for all Prompt Library-specific errors.

    All application errors should inherit from this class.
    """

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """
        Initialize a Prompt Library error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for categorization
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class ConfigurationError(PromptLibraryError):
    """
    Raised when there's an error in application configuration.

    Typically thrown during startup when settings are invalid.
    """


class CatalogInitializationError(PromptLibraryError):
    """
    Raised when embedded prompt content cannot be loaded into a catalog.

    Caught by build_catalog, which falls back to an empty catalog.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="CATALOG_INITIALIZATION_FAILED")


class ValidationError(PromptLibraryError):
    """
    Raised when input validation fails.

    Indicates that provided data doesn't meet requirements.
    """


class InvalidToolParamsError(ValidationError):
    """Raised when a tool's parameter record fails validation."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]) -> None:
        """
        Initialize an invalid tool parameters error.

        Args:
            tool_name: Name of the tool that was called
            errors: Field-level validation errors
        """
        message = f"Invalid parameters for tool '{tool_name}'"
        super().__init__(message, error_code="INVALID_PARAMS")
        self.tool_name = tool_name
        self.errors = errors
        self.status_code = 422


class RequestSizeError(ValidationError):
    """Raised when request body exceeds size limit."""

    def __init__(self, actual_size: int, max_size: int) -> None:
        """
        Initialize a request size error.

        Args:
            actual_size: Actual size of request body in bytes
            max_size: Maximum allowed size in bytes
        """
        message = (
            f"Request body size ({actual_size} bytes) exceeds maximum allowed ({max_size} bytes)"
        )
        super().__init__(message, error_code="REQUEST_TOO_LARGE")
        self.actual_size = actual_size
        self.max_size = max_size
        self.status_code = 413


class UnknownToolError(PromptLibraryError):
    """Raised when a caller names a tool that is not registered."""

    def __init__(self, tool_name: str, available: list[str]) -> None:
        message = f"Tool '{tool_name}' not found. Available tools: {', '.join(available)}"
        super().__init__(message, error_code="UNKNOWN_TOOL")
        self.tool_name = tool_name
        self.status_code = 404
