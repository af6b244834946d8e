"""
Rate limiting configuration using SlowAPI.

Callers are identified by client IP address. The limiter is disabled with
RATE_LIMIT_ENABLED=false, which the test suite sets before import.
"""

import os

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from prompt_library.config import Settings
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)


def get_client_key(request: Request) -> str:
    """
    Build the rate limit key for a request.

    Args:
        request: Incoming request

    Returns:
        "ip_{client_address}"
    """
    key = f"ip_{get_remote_address(request)}"
    logger.debug(
        "Rate limit key resolved",
        extra={"key": key, "path": str(request.url.path)},
    )
    return key


_settings = Settings()

limiter = Limiter(
    key_func=get_client_key,
    default_limits=[_settings.rate_limit_default],
    headers_enabled=True,  # Include X-RateLimit-* headers in responses
    enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true",
)


def get_limiter_status() -> dict[str, str | bool]:
    """
    Get a structured dump of the rate limiter's configuration.

    Returns:
        Dictionary suitable for logging as structured extra fields
    """
    return {
        "enabled": limiter.enabled,
        "default_limit": _settings.rate_limit_default,
        "tools_limit": _settings.rate_limit_tools,
        "key_function_type": "ip-based",
    }
