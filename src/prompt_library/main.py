"""
Main FastAPI application for the Prompt Library.

Sets up the application with all routes, middleware, and startup/shutdown logic.
"""

import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from prompt_library.api.health import router as health_router
from prompt_library.api.limiter import get_limiter_status, limiter
from prompt_library.api.v1.tools import router as tools_router
from prompt_library.catalog import build_catalog
from prompt_library.config import Settings
from prompt_library.middleware.request_size import request_size_validator
from prompt_library.middleware.security_headers import security_headers_middleware
from prompt_library.utils.errors import (
    InvalidToolParamsError,
    PromptLibraryError,
    UnknownToolError,
)
from prompt_library.utils.logging import get_logger, setup_logging
from prompt_library.utils.request_context import set_request_id

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    """
    Manage application lifecycle.

    Builds the prompt catalog once, before the first request is served.
    build_catalog never raises; malformed content yields an empty catalog.

    Args:
        app: FastAPI application instance

    Yields:
        Control during application runtime
    """
    logger.info("Application starting up")

    catalog = build_catalog()
    app.state.catalog = catalog
    logger.info(
        "Prompt catalog ready",
        extra={
            "step": "initialization",
            "categories": [c.value for c in catalog.list_categories().categories],
            "prompt_count": len(catalog),
        },
    )

    logger.info(
        "Rate limiter initialized with status",
        extra={
            "step": "initialization",
            "component": "rate_limiter",
            **get_limiter_status(),
        },
    )

    yield

    logger.info("Application shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Optional settings override; loaded from the environment
            when omitted

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        try:
            settings = Settings()
        except Exception as exc:
            # Cannot use logger yet - settings failed to load
            print(f"CRITICAL: Failed to load settings: {exc}", file=sys.stderr)
            raise

    setup_logging(settings)

    logger.info(
        "Creating FastAPI application",
        extra={
            "environment": settings.environment,
            "api_title": settings.api_title,
            "base_url": settings.base_url,
        },
    )

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Categorized, keyword-searchable prompt library exposed as tools",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.limiter = limiter

    # Added first, executes last
    @app.middleware("http")
    async def add_request_tracking(request: Request, call_next):  # type: ignore
        """Propagate or generate X-Request-ID and report response time."""
        request_id = request.headers.get("X-Request-ID", "").strip()
        if not request_id:
            request_id = f"req_{int(time.time() * 1000)}"

        set_request_id(request_id)

        start_time = time.time()
        response = await call_next(request)
        response_time = time.time() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = str(response_time)
        logger.info(
            "Response completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "response_time": response_time,
            },
        )
        return response

    app.middleware("http")(request_size_validator)

    if settings.enable_security_headers:
        app.middleware("http")(security_headers_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.exception_handler(PromptLibraryError)
    async def prompt_library_error_handler(request: Request, exc: PromptLibraryError):  # type: ignore
        """Handle prompt library exceptions not covered by a narrower handler."""
        logger.error(
            f"Prompt library error: {exc.message}",
            extra={
                "error_code": exc.error_code,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=getattr(exc, "status_code", 400),
            content={
                "error": exc.error_code,
                "message": exc.message,
            },
        )

    @app.exception_handler(UnknownToolError)
    async def unknown_tool_handler(request: Request, exc: UnknownToolError) -> JSONResponse:  # type: ignore
        """Handle calls naming an unregistered tool."""
        logger.warning(
            "Unknown tool requested",
            extra={"tool": exc.tool_name, "path": str(request.url.path)},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": {"tool": exc.tool_name},
            },
        )

    @app.exception_handler(InvalidToolParamsError)
    async def invalid_params_handler(
        request: Request, exc: InvalidToolParamsError
    ) -> JSONResponse:  # type: ignore
        """Handle tool parameter records that fail validation."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": {"tool": exc.tool_name, "errors": exc.errors},
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore
        """Handle request bodies FastAPI cannot parse into a parameter record."""
        tool_name = request.path_params.get("tool_name", "")
        return JSONResponse(
            status_code=422,
            content={
                "error": "INVALID_PARAMS",
                "message": f"Invalid parameters for tool '{tool_name}'",
                "details": {"tool": tool_name, "errors": jsonable_encoder(exc.errors())},
            },
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:  # type: ignore
        """
        Handle rate limit exceeded errors.

        Returns HTTP 429 with Retry-After header indicating when client can retry.
        """
        logger.warning(
            "Rate limit exceeded",
            extra={
                "client": request.client.host if request.client else "unknown",
                "path": str(request.url.path),
                "method": request.method,
                "limit": str(exc.detail),
            },
        )
        return JSONResponse(
            status_code=429,
            headers={"Retry-After": "60"},
            content={"error": "RATE_LIMIT_EXCEEDED", "message": str(exc.detail)},
        )

    app.include_router(health_router)
    app.include_router(tools_router)

    logger.info("FastAPI application created successfully")

    return app


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "prompt_library.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


# Create the application instance for running with FastAPI CLI
app = create_app()
