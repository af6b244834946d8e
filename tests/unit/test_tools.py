"""
Unit tests for the tool registry and dispatcher.
"""

import pytest

from prompt_library.catalog import DEFAULT_SEPARATOR, PromptCatalog
from prompt_library.catalog.content import COMPONENT_CREATION_PROMPT
from prompt_library.tools import TOOLS, dispatch, list_tools
from prompt_library.utils.errors import InvalidToolParamsError, UnknownToolError


class TestToolRegistry:
    """Test suite for tool descriptors."""

    def test_five_tools_in_order(self) -> None:
        assert [tool["name"] for tool in list_tools()] == [
            "get_categories",
            "get_prompts_by_category",
            "get_prompt",
            "combine_prompts",
            "search_prompts",
        ]

    def test_descriptors_carry_description_and_schema(self) -> None:
        for descriptor in list_tools():
            assert descriptor["description"]
            assert descriptor["input_schema"]["type"] == "object"

    def test_combine_description_names_its_use_case(self) -> None:
        (descriptor,) = [d for d in list_tools() if d["name"] == "combine_prompts"]
        assert descriptor["description"].endswith(
            "perfect for complex coding tasks that require multiple types of expertise."
        )

    @pytest.mark.parametrize(
        ("tool_name", "required"),
        [
            ("get_categories", set()),
            ("get_prompts_by_category", {"category"}),
            ("get_prompt", {"category", "name"}),
            ("combine_prompts", {"categories"}),
            ("search_prompts", {"keyword"}),
        ],
    )
    def test_required_parameters(self, tool_name: str, required: set[str]) -> None:
        """Only the documented parameters are required."""
        schema = TOOLS[tool_name].descriptor()["input_schema"]

        assert set(schema.get("required", [])) == required


class TestDispatch:
    """Test suite for dispatch()."""

    def test_get_categories(self, catalog: PromptCatalog) -> None:
        result = dispatch(catalog, "get_categories")

        assert result == {
            "categories": ["react", "fe", "common"],
            "description": "Available prompt categories in the library",
        }

    def test_get_categories_accepts_empty_record(self, catalog: PromptCatalog) -> None:
        assert dispatch(catalog, "get_categories", {})["categories"] == ["react", "fe", "common"]

    def test_get_prompts_by_category(self, catalog: PromptCatalog) -> None:
        result = dispatch(catalog, "get_prompts_by_category", {"category": "fe"})

        assert result["category"] == "fe"
        assert result["count"] == 2
        assert [p["name"] for p in result["prompts"]] == [
            "performance-optimization",
            "accessibility",
        ]

    def test_get_prompt(self, catalog: PromptCatalog) -> None:
        result = dispatch(
            catalog, "get_prompt", {"category": "react", "name": "component-creation"}
        )

        assert result["content"] == COMPONENT_CREATION_PROMPT

    def test_missing_prompt_is_error_payload(self, catalog: PromptCatalog) -> None:
        """Catalog failures come back as payloads, not exceptions."""
        result = dispatch(catalog, "get_prompt", {"category": "react", "name": "nope"})

        assert result["error"] == "PROMPT_NOT_FOUND"
        assert result["message"] == "Prompt 'nope' not found in category 'react'"

    def test_combine_uses_default_separator(self, sample_catalog: PromptCatalog) -> None:
        result = dispatch(sample_catalog, "combine_prompts", {"categories": ["react"]})

        assert result["total_prompts"] == 2
        assert DEFAULT_SEPARATOR in result["combined_prompt"]
        assert result["categories_processed"] == ["react"]
        assert result["included_prompts"][0] == {"category": "react", "name": "component-creation"}

    def test_combine_with_nothing_requested(self, sample_catalog: PromptCatalog) -> None:
        result = dispatch(sample_catalog, "combine_prompts", {"categories": []})

        assert result["error"] == "NO_MATCHES"
        assert result["details"]["total_prompts"] == 0

    def test_search(self, sample_catalog: PromptCatalog) -> None:
        result = dispatch(
            sample_catalog, "search_prompts", {"keyword": "performance", "categories": ["fe"]}
        )

        assert result["keyword"] == "performance"
        assert result["total_found"] == 1
        assert result["results"][0] == {
            "category": "fe",
            "name": "performance-optimization",
            "relevance": 12,
            "snippet": "Measure performance first. Performance budgets matter.",
        }

    def test_search_with_null_categories_searches_everything(
        self, sample_catalog: PromptCatalog
    ) -> None:
        result = dispatch(sample_catalog, "search_prompts", {"keyword": "use", "categories": None})

        assert result["total_found"] == 3

    def test_empty_catalog_reports_category_not_found(self) -> None:
        result = dispatch(PromptCatalog.empty(), "get_prompts_by_category", {"category": "react"})

        assert result["error"] == "CATEGORY_NOT_FOUND"


class TestDispatchRejections:
    """Problems with the call itself raise."""

    def test_unknown_tool(self, catalog: PromptCatalog) -> None:
        with pytest.raises(UnknownToolError) as exc_info:
            dispatch(catalog, "delete_prompt", {})

        assert exc_info.value.error_code == "UNKNOWN_TOOL"
        assert "get_categories" in exc_info.value.message

    @pytest.mark.parametrize(
        ("tool_name", "params"),
        [
            ("get_prompts_by_category", {}),
            ("get_prompts_by_category", {"category": "vue"}),
            ("get_prompt", {"category": "react"}),
            ("combine_prompts", {"categories": ["react", "angular"]}),
            ("search_prompts", {"keyword": ""}),
            ("search_prompts", {"keyword": "x", "limit": 5}),
            ("get_categories", {"unexpected": True}),
        ],
        ids=[
            "missing-category",
            "unknown-category",
            "missing-name",
            "unknown-category-in-list",
            "empty-keyword",
            "unknown-field",
            "params-for-parameterless-tool",
        ],
    )
    def test_invalid_params(self, catalog: PromptCatalog, tool_name: str, params: dict) -> None:
        with pytest.raises(InvalidToolParamsError) as exc_info:
            dispatch(catalog, tool_name, params)

        assert exc_info.value.tool_name == tool_name
        assert exc_info.value.error_code == "INVALID_PARAMS"
        assert exc_info.value.errors
