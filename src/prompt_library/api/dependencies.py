"""Shared FastAPI dependencies."""

from fastapi import Request

from prompt_library.catalog import PromptCatalog
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)


async def get_catalog(request: Request) -> PromptCatalog:
    """
    Dependency returning the catalog built during application startup.

    If startup never stored one, an empty catalog is returned so queries
    degrade to CATEGORY_NOT_FOUND instead of failing the request.

    Args:
        request: FastAPI request object

    Returns:
        The shared PromptCatalog instance
    """
    catalog = getattr(request.app.state, "catalog", None)

    if catalog is None:
        logger.error(
            "Prompt catalog not available - service initialization may have failed",
            extra={"path": str(request.url.path)},
        )
        return PromptCatalog.empty()

    return catalog
