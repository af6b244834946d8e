"""
API endpoints for the Prompt Library.

This module contains FastAPI routers for health checks and v1 API endpoints.
"""

from prompt_library.api.health import router as health_router

__all__ = ["health_router"]
