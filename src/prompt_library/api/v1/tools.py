"""Tool discovery and invocation endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from prompt_library.api.dependencies import get_catalog
from prompt_library.api.limiter import limiter
from prompt_library.catalog import PromptCatalog
from prompt_library.config import Settings
from prompt_library.tools import dispatch, list_tools
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/v1", tags=["tools"])

_tools_limit = Settings().rate_limit_tools


@router.get("/tools")
async def get_tools() -> dict[str, Any]:
    """
    List the available tools with their parameter schemas.

    Returns:
        OpenAI-style list object of tool descriptors
    """
    tools = list_tools()
    logger.debug(f"Returning {len(tools)} tool(s)", extra={"tool_count": len(tools)})
    return {"object": "list", "data": tools}


@router.post("/tools/{tool_name}")
@limiter.limit(_tools_limit)
async def call_tool(
    request: Request,
    response: Response,
    tool_name: str,
    params: dict[str, Any] | None = Body(default=None),
    catalog: PromptCatalog = Depends(get_catalog),
) -> dict[str, Any]:
    """
    Invoke a tool with a JSON parameter record.

    Catalog-level failures (unknown category, missing prompt, no matches)
    are returned with status 200 as error payloads. Unknown tools and
    invalid parameters raise and are mapped to 404 and 422 by the
    application's exception handlers.

    Args:
        tool_name: Registered tool name
        params: Parameter record; an absent body means no parameters
        catalog: Shared catalog (injected via dependency)

    Returns:
        The tool's result record
    """
    logger.info("Tool call", extra={"tool": tool_name})
    logger.debug(
        "Tool call details",
        extra={
            "tool": tool_name,
            "params": params,
            "client": request.client.host if request.client else "unknown",
        },
    )
    return dispatch(catalog, tool_name, params)
