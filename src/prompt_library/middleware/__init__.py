"""
Middleware components for the Prompt Library.

Provides request validation and security middleware for the FastAPI application.
"""

from prompt_library.middleware.request_size import request_size_validator
from prompt_library.middleware.security_headers import security_headers_middleware

__all__ = ["request_size_validator", "security_headers_middleware"]
