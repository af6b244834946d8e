"""
Utility modules for the Prompt Library.

This module provides error handling, logging, and request context helpers.
"""

from prompt_library.utils.errors import (
    CatalogInitializationError,
    ConfigurationError,
    InvalidToolParamsError,
    PromptLibraryError,
    RequestSizeError,
    UnknownToolError,
    ValidationError,
)
from prompt_library.utils.logging import get_logger, setup_logging

__all__ = [
    # Errors
    "PromptLibraryError",
    "ConfigurationError",
    "CatalogInitializationError",
    "ValidationError",
    "InvalidToolParamsError",
    "RequestSizeError",
    "UnknownToolError",
    # Logging
    "get_logger",
    "setup_logging",
]
