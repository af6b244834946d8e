"""
Request size validation middleware.

Rejects tool calls whose declared body size exceeds the configured limit
before the body is read.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from prompt_library.utils.errors import RequestSizeError
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)


async def request_size_validator(request: Request, call_next):  # type: ignore
    """Middleware to validate request body size.

    Checks the Content-Length header against settings.max_request_body_size
    and answers 413 Payload Too Large when it is exceeded. GET requests and
    health endpoints are not checked. A missing or unparsable header lets
    the request through.

    Args:
        request: FastAPI Request object
        call_next: Next middleware/route handler

    Returns:
        Response from next middleware/route handler or 413 error response
    """
    if request.method == "GET" or request.url.path.startswith("/health"):
        return await call_next(request)

    content_length_header = request.headers.get("content-length")
    if content_length_header is None:
        return await call_next(request)

    try:
        content_length = int(content_length_header)
    except ValueError:
        return await call_next(request)

    max_size = request.app.state.settings.max_request_body_size
    if content_length > max_size:
        exc = RequestSizeError(content_length, max_size)
        logger.warning(
            "Request body too large",
            extra={
                "actual_size": exc.actual_size,
                "max_size": exc.max_size,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": {
                    "actual_size_bytes": exc.actual_size,
                    "max_size_bytes": exc.max_size,
                },
            },
        )

    return await call_next(request)
