"""
Data models for the prompt catalog.

Category is the closed set of prompt groupings. Every catalog query returns
either one of the success models below or an ErrorResult naming the failure
kind, so callers handle both branches explicitly instead of catching
exceptions.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, NonNegativeInt


class Category(str, Enum):
    """Prompt categories known to the library."""

    REACT = "react"
    FE = "fe"
    COMMON = "common"


class ErrorKind(str, Enum):
    """Recoverable failure kinds reported by catalog queries."""

    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PROMPT_NOT_FOUND = "PROMPT_NOT_FOUND"
    NO_MATCHES = "NO_MATCHES"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class ErrorResult(BaseModel):
    """
    Uniform error payload for catalog queries.

    Returned, never raised. The HTTP layer passes it through as a normal
    response body.
    """

    error: ErrorKind = Field(description="Machine-readable failure kind")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict, description="Additional context about the failure"
    )


class CategoryList(BaseModel):
    """Registered categories in registration order."""

    categories: list[Category]
    description: str = "Available prompt categories in the library"


class PromptEntry(BaseModel):
    """A single prompt as listed within its category."""

    name: str
    content: str


class CategoryPrompts(BaseModel):
    """All prompts registered under one category."""

    category: Category
    prompts: list[PromptEntry]
    count: NonNegativeInt


class PromptBody(BaseModel):
    """One prompt body, returned verbatim."""

    category: Category
    name: str
    content: str


class PromptRef(BaseModel):
    """(category, name) pair identifying a prompt."""

    category: Category
    name: str


class CombinedPrompts(BaseModel):
    """Prompt blocks from several categories joined into one text."""

    combined_prompt: str = Field(description="All prompt blocks joined by the separator")
    included_prompts: list[PromptRef] = Field(
        description="Prompts included in the combined text, in order"
    )
    total_prompts: NonNegativeInt = Field(description="Number of prompt blocks included")
    categories_processed: list[str] = Field(description="Echo of the requested categories")


class SearchMatch(BaseModel):
    """A prompt matching a search keyword."""

    category: Category
    name: str
    relevance: NonNegativeInt = Field(description="Heuristic relevance score")
    snippet: str = Field(description="Leading excerpt of the prompt body")


class SearchResults(BaseModel):
    """Search matches ordered by descending relevance."""

    keyword: str
    results: list[SearchMatch]
    total_found: NonNegativeInt
