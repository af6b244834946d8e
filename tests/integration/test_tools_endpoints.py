"""
Integration tests for the tools API.

Runs the full application (lifespan, middleware, exception handlers) through
FastAPI's TestClient.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from prompt_library.catalog import build_catalog
from prompt_library.catalog.content import CODE_QUALITY_PROMPT, COMPONENT_CREATION_PROMPT
from prompt_library.main import create_app


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Client for an application whose lifespan has run."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def empty_catalog_client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Client for an application whose catalog failed to load."""
    monkeypatch.setattr(
        "prompt_library.main.build_catalog", lambda: build_catalog({"vue": {"sfc": "x"}})
    )
    with TestClient(create_app()) as test_client:
        yield test_client


class TestHealthEndpoints:
    def test_liveness(self, client: TestClient) -> None:
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_readiness_reports_categories(self, client: TestClient) -> None:
        response = client.get("/health/ready")

        assert response.json() == {"status": "ready", "categories": 3}

    def test_readiness_with_empty_catalog(self, empty_catalog_client: TestClient) -> None:
        response = empty_catalog_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["categories"] == 0


class TestToolDiscovery:
    def test_list_tools(self, client: TestClient) -> None:
        response = client.get("/v1/tools")

        assert response.status_code == 200
        body = response.json()
        assert body["object"] == "list"
        assert [tool["name"] for tool in body["data"]] == [
            "get_categories",
            "get_prompts_by_category",
            "get_prompt",
            "combine_prompts",
            "search_prompts",
        ]


class TestToolCalls:
    def test_get_categories_without_body(self, client: TestClient) -> None:
        response = client.post("/v1/tools/get_categories")

        assert response.status_code == 200
        assert response.json()["categories"] == ["react", "fe", "common"]

    def test_get_prompts_by_category(self, client: TestClient) -> None:
        response = client.post("/v1/tools/get_prompts_by_category", json={"category": "common"})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["prompts"] == [{"name": "code-quality", "content": CODE_QUALITY_PROMPT}]

    def test_get_prompt_verbatim(self, client: TestClient) -> None:
        response = client.post(
            "/v1/tools/get_prompt", json={"category": "react", "name": "component-creation"}
        )

        assert response.json()["content"] == COMPONENT_CREATION_PROMPT

    def test_missing_prompt_is_ok_response(self, client: TestClient) -> None:
        """Catalog errors are normal responses carrying an error payload."""
        response = client.post(
            "/v1/tools/get_prompt", json={"category": "fe", "name": "component-creation"}
        )

        assert response.status_code == 200
        assert response.json()["error"] == "PROMPT_NOT_FOUND"

    def test_combine_prompts(self, client: TestClient) -> None:
        response = client.post(
            "/v1/tools/combine_prompts",
            json={"categories": ["common", "react"], "separator": "\n\n"},
        )

        body = response.json()
        assert body["total_prompts"] == 3
        assert body["combined_prompt"].startswith("# Category: COMMON\n# Prompt: code-quality\n\n")
        assert body["categories_processed"] == ["common", "react"]

    def test_search_prompts(self, client: TestClient) -> None:
        response = client.post("/v1/tools/search_prompts", json={"keyword": "hooks"})

        body = response.json()
        assert body["keyword"] == "hooks"
        assert body["total_found"] == len(body["results"]) > 0
        relevances = [match["relevance"] for match in body["results"]]
        assert relevances == sorted(relevances, reverse=True)

    def test_empty_catalog_degrades_to_category_not_found(
        self, empty_catalog_client: TestClient
    ) -> None:
        categories = empty_catalog_client.post("/v1/tools/get_categories").json()
        listing = empty_catalog_client.post(
            "/v1/tools/get_prompts_by_category", json={"category": "react"}
        )

        assert categories["categories"] == []
        assert listing.status_code == 200
        assert listing.json()["error"] == "CATEGORY_NOT_FOUND"


class TestCallErrors:
    def test_unknown_tool(self, client: TestClient) -> None:
        response = client.post("/v1/tools/delete_prompt", json={})

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "UNKNOWN_TOOL"
        assert body["details"] == {"tool": "delete_prompt"}

    def test_unknown_category_rejected_at_boundary(self, client: TestClient) -> None:
        response = client.post("/v1/tools/get_prompt", json={"category": "vue", "name": "x"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "INVALID_PARAMS"
        assert body["details"]["tool"] == "get_prompt"
        assert body["details"]["errors"][0]["loc"] == ["category"]

    def test_empty_keyword_rejected(self, client: TestClient) -> None:
        response = client.post("/v1/tools/search_prompts", json={"keyword": ""})

        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_PARAMS"

    def test_non_object_body_rejected(self, client: TestClient) -> None:
        response = client.post("/v1/tools/get_categories", json=["react"])

        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_PARAMS"

    def test_oversized_body_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/v1/tools/search_prompts",
            content=b'{"keyword": "' + b"a" * 70000 + b'"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert response.json()["error"] == "REQUEST_TOO_LARGE"


class TestResponseHeaders:
    def test_request_id_echoed(self, client: TestClient) -> None:
        response = client.get("/health/", headers={"X-Request-ID": "req_trace_42"})

        assert response.headers["X-Request-ID"] == "req_trace_42"
        assert float(response.headers["X-Response-Time"]) >= 0

    def test_request_id_generated(self, client: TestClient) -> None:
        response = client.post("/v1/tools/get_categories")

        assert response.headers["X-Request-ID"].startswith("req_")

    def test_security_headers(self, client: TestClient) -> None:
        response = client.post("/v1/tools/get_categories")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
