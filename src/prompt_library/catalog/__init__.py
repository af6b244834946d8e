"""
Prompt catalog: embedded prompt content and the read-only queries over it.
"""

from prompt_library.catalog.models import (
    Category,
    CategoryList,
    CategoryPrompts,
    CombinedPrompts,
    ErrorKind,
    ErrorResult,
    PromptBody,
    PromptEntry,
    PromptRef,
    SearchMatch,
    SearchResults,
)
from prompt_library.catalog.library import DEFAULT_SEPARATOR, PromptCatalog, build_catalog

__all__ = [
    "Category",
    "CategoryList",
    "CategoryPrompts",
    "CombinedPrompts",
    "DEFAULT_SEPARATOR",
    "ErrorKind",
    "ErrorResult",
    "PromptBody",
    "PromptCatalog",
    "PromptEntry",
    "PromptRef",
    "SearchMatch",
    "SearchResults",
    "build_catalog",
]
