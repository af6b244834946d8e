"""Pytest configuration and shared fixtures."""

import os

# Must be set before prompt_library.api.limiter is imported by any test module
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from prompt_library.catalog import Category, PromptCatalog, build_catalog

SAMPLE_CONTENT = {
    Category.REACT: {
        "component-creation": "Create a component. Every component needs props. Use React.",
        "state-management": "Use state wisely.",
    },
    Category.FE: {
        "performance-optimization": "Measure performance first. Performance budgets matter.",
        "accessibility": "Use semantic HTML.",
    },
    Category.COMMON: {
        "code-quality": "Keep functions small.",
    },
}


@pytest.fixture
def catalog() -> PromptCatalog:
    """Catalog built from the embedded prompt content."""
    return build_catalog()


@pytest.fixture
def sample_catalog() -> PromptCatalog:
    """Small catalog with short, predictable bodies."""
    return build_catalog(SAMPLE_CONTENT)


@pytest.fixture
def sample_content() -> dict[Category, dict[str, str]]:
    """Raw content behind sample_catalog."""
    return {category: dict(prompts) for category, prompts in SAMPLE_CONTENT.items()}
