"""Health check endpoints for the Prompt Library API."""

from fastapi import APIRouter, Depends

from prompt_library.api.dependencies import get_catalog
from prompt_library.catalog import PromptCatalog
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        Status response indicating API is healthy
    """
    logger.debug("Health check (liveness) request received")
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(catalog: PromptCatalog = Depends(get_catalog)) -> dict[str, str | int]:
    """
    Readiness check endpoint.

    Reports how many categories the catalog serves. An empty catalog still
    answers queries, so the service counts as ready either way.

    Returns:
        Status response with the category count
    """
    categories = len(catalog.list_categories().categories)
    logger.debug("Readiness check request received", extra={"categories": categories})
    return {"status": "ready", "categories": categories}
