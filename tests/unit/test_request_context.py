"""
Unit tests for request context management.

Verifies ContextVar-based request ID tracking, isolation between concurrent
tasks, and that concurrent tool calls can share one catalog.
"""

import asyncio

import pytest

from prompt_library.catalog import PromptCatalog
from prompt_library.tools import dispatch
from prompt_library.utils.request_context import (
    _request_id_var,
    get_request_id,
    set_request_id,
)


class TestRequestContextBasics:
    """Test basic request context get/set functionality."""

    def setup_method(self) -> None:
        """Reset context before each test."""
        _request_id_var.set(None)

    def test_set_and_get_request_id(self) -> None:
        set_request_id("req_test_12345")
        assert get_request_id() == "req_test_12345"

    def test_get_request_id_default_none(self) -> None:
        assert get_request_id() is None

    def test_set_request_id_overwrites_previous(self) -> None:
        set_request_id("req_first_value")
        set_request_id("req_second_value")
        assert get_request_id() == "req_second_value"


class TestAsyncContextIsolation:
    """Test that async contexts have isolated request IDs."""

    def setup_method(self) -> None:
        """Reset context before each test."""
        _request_id_var.set(None)

    @pytest.mark.asyncio
    async def test_async_tasks_have_isolated_request_ids(self) -> None:
        """Each task sees the request ID it set, even across awaits."""

        async def task_with_id(request_id: str) -> str | None:
            set_request_id(request_id)
            await asyncio.sleep(0.01)
            return get_request_id()

        results = await asyncio.gather(
            task_with_id("req_async_1"),
            task_with_id("req_async_2"),
            task_with_id("req_async_3"),
        )

        assert results == ["req_async_1", "req_async_2", "req_async_3"]

    @pytest.mark.asyncio
    async def test_concurrent_tool_calls_share_catalog(self, catalog: PromptCatalog) -> None:
        """Overlapping calls against one catalog see full content and their own IDs."""

        async def handle(request_id: str, keyword: str) -> tuple[str | None, int]:
            set_request_id(request_id)
            await asyncio.sleep(0.001)
            result = dispatch(catalog, "search_prompts", {"keyword": keyword})
            await asyncio.sleep(0.001)
            return get_request_id(), result["total_found"]

        keywords = ["react", "performance", "accessibility", "testing"] * 5
        expected = [
            dispatch(catalog, "search_prompts", {"keyword": k})["total_found"] for k in keywords
        ]

        results = await asyncio.gather(
            *(handle(f"req_concurrent_{i}", k) for i, k in enumerate(keywords))
        )

        assert [rid for rid, _ in results] == [f"req_concurrent_{i}" for i in range(len(keywords))]
        assert [found for _, found in results] == expected
