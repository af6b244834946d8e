"""
Security headers middleware.

Adds security headers to all responses to protect against common web vulnerabilities.
"""

from fastapi import Request

from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}

HSTS_HEADER = "max-age=31536000; includeSubDomains"


def is_https_request(request: Request) -> bool:
    """True for direct HTTPS or HTTPS terminated at a reverse proxy."""
    return (
        request.url.scheme == "https"
        or request.headers.get("X-Forwarded-Proto", "").lower() == "https"
    )


async def security_headers_middleware(request: Request, call_next):  # type: ignore
    """Middleware to add security headers to all responses.

    SECURITY_HEADERS are always set. Strict-Transport-Security is only set
    for HTTPS requests so plain HTTP deployments are not pinned.

    Args:
        request: FastAPI Request object
        call_next: Next middleware/route handler

    Returns:
        Response with security headers added
    """
    response = await call_next(request)

    for header, value in SECURITY_HEADERS.items():
        response.headers[header] = value

    hsts = is_https_request(request)
    if hsts:
        response.headers["Strict-Transport-Security"] = HSTS_HEADER

    logger.debug(
        "Security headers applied",
        extra={"path": str(request.url.path), "hsts": hsts},
    )
    return response
