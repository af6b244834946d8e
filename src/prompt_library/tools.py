"""
Tool registry and dispatcher for the prompt catalog.

Each library query is exposed as a named tool with a pydantic parameter
model and a description aimed at the agent choosing between tools. The
dispatcher validates a raw parameter record, runs the query against the
injected catalog and returns the result record as JSON-ready data.

Catalog failures (unknown category, missing prompt, no matches) come back
as ordinary error payloads. Only problems with the call itself, an unknown
tool name or an invalid parameter record, are raised.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from prompt_library.catalog import DEFAULT_SEPARATOR, Category, ErrorResult, PromptCatalog
from prompt_library.utils.errors import InvalidToolParamsError, UnknownToolError
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)


class ToolParams(BaseModel):
    """Base parameter record; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class GetCategoriesParams(ToolParams):
    """get_categories takes no parameters."""


class GetPromptsByCategoryParams(ToolParams):
    category: Category = Field(description="Category to list")


class GetPromptParams(ToolParams):
    category: Category = Field(description="Category holding the prompt")
    name: str = Field(description="Exact prompt name, e.g. 'component-creation'")


class CombinePromptsParams(ToolParams):
    categories: list[Category] = Field(description="Categories to combine, in order")
    separator: str = Field(
        default=DEFAULT_SEPARATOR, description="Text placed between prompt blocks"
    )


class SearchPromptsParams(ToolParams):
    keyword: str = Field(min_length=1, description="Keyword to look for")
    categories: list[Category] | None = Field(
        default=None, description="Categories to search; all categories if omitted"
    )


@dataclass(frozen=True)
class Tool:
    """A named catalog operation callable through dispatch()."""

    name: str
    description: str
    params_model: type[ToolParams]
    handler: Callable[[PromptCatalog, Any], BaseModel]

    def descriptor(self) -> dict[str, Any]:
        """Describe the tool for discovery endpoints."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.params_model.model_json_schema(),
        }


TOOLS: dict[str, Tool] = {
    tool.name: tool
    for tool in (
        Tool(
            name="get_categories",
            description=(
                "Get all available prompt categories in the library. Use this when you need to "
                "discover what types of prompts are available (react, fe, common, etc.). This is "
                "useful for initial exploration or when you're unsure which category contains "
                "the prompts you need."
            ),
            params_model=GetCategoriesParams,
            handler=lambda catalog, params: catalog.list_categories(),
        ),
        Tool(
            name="get_prompts_by_category",
            description=(
                "Retrieve all prompts from a specific category. Use this when you know the "
                "category you want (react, fe, or common) and want to see all available prompts "
                "in that category. This gives you an overview of what's available before "
                "selecting specific prompts."
            ),
            params_model=GetPromptsByCategoryParams,
            handler=lambda catalog, params: catalog.list_by_category(params.category),
        ),
        Tool(
            name="get_prompt",
            description=(
                "Retrieve a specific prompt by its exact name and category. Use this when you "
                "know exactly which prompt you need (e.g., 'component-creation' from 'react' "
                "category). This returns the full prompt content ready to be used for code "
                "generation or guidance."
            ),
            params_model=GetPromptParams,
            handler=lambda catalog, params: catalog.get_prompt(params.category, params.name),
        ),
        Tool(
            name="combine_prompts",
            description=(
                "Combine multiple prompts from different categories into a single comprehensive "
                "prompt. Use this when you need guidance that spans multiple areas (e.g., React "
                "components + accessibility, or React + performance). This creates a unified "
                "prompt that covers all specified categories, perfect for complex coding tasks "
                "that require multiple types of expertise."
            ),
            params_model=CombinePromptsParams,
            handler=lambda catalog, params: catalog.combine_prompts(
                params.categories, params.separator
            ),
        ),
        Tool(
            name="search_prompts",
            description=(
                "Search for prompts by keyword across all or specific categories. Use this when "
                "you have a topic in mind (e.g., 'performance', 'accessibility', 'hooks') but "
                "don't know exactly which prompt contains the information you need. This returns "
                "relevant prompts ranked by relevance, with snippets to help you choose the "
                "right one."
            ),
            params_model=SearchPromptsParams,
            handler=lambda catalog, params: catalog.search_prompts(
                params.keyword, params.categories
            ),
        ),
    )
}


def list_tools() -> list[dict[str, Any]]:
    """Return descriptors for every registered tool, in registration order."""
    return [tool.descriptor() for tool in TOOLS.values()]


def dispatch(
    catalog: PromptCatalog,
    tool_name: str,
    params: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Run a named tool against the catalog.

    Args:
        catalog: Catalog to query
        tool_name: Registered tool name
        params: Raw parameter record; None means no parameters

    Returns:
        The tool's result record, either a success payload or an error
        payload with "error" and "message" keys

    Raises:
        UnknownToolError: If tool_name is not registered
        InvalidToolParamsError: If params fail validation
    """
    tool = TOOLS.get(tool_name)
    if tool is None:
        raise UnknownToolError(tool_name, list(TOOLS))

    try:
        parsed = tool.params_model.model_validate(dict(params or {}))
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        logger.warning(
            "Tool parameters rejected",
            extra={"tool": tool_name, "error_count": len(errors)},
        )
        raise InvalidToolParamsError(tool_name, errors) from exc

    result = tool.handler(catalog, parsed)

    if isinstance(result, ErrorResult):
        logger.info(
            "Tool returned error result",
            extra={"tool": tool_name, "error_kind": result.error.value},
        )
    else:
        logger.debug("Tool completed", extra={"tool": tool_name})

    return result.model_dump(mode="json")
