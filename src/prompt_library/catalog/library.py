"""
Read-only prompt catalog.

PromptCatalog holds the category -> (name -> body) mapping and answers the
five library queries. It is built once by build_catalog() and never changes
afterwards, so a single instance can be shared by concurrent requests without
locking. Mapping order is registration order and every query reports in that
order.

Queries never raise on bad input: failures come back as ErrorResult values.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from prompt_library.catalog.content import CATALOG_CONTENT
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
from prompt_library.catalog.search import make_snippet, matches, relevance_score
from prompt_library.utils.errors import CatalogInitializationError
from prompt_library.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SEPARATOR = "\n\n---\n\n"

PromptContent = Mapping[Category | str, Mapping[str, str]]


def _resolve_category(category: Category | str) -> Category | None:
    """Map a raw identifier onto Category, or None if it is not a member."""
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        return None


def _category_not_found(category: Category | str) -> ErrorResult:
    value = category.value if isinstance(category, Category) else category
    return ErrorResult(
        error=ErrorKind.CATEGORY_NOT_FOUND,
        message=f"Category '{value}' not found",
        details={"category": value},
    )


def _format_block(category: Category, name: str, body: str) -> str:
    return f"# Category: {category.value.upper()}\n# Prompt: {name}\n\n{body}"


class PromptCatalog:
    """
    Immutable two-level prompt mapping with query operations.

    Construct through build_catalog() or PromptCatalog.empty(); the
    constructor trusts its input to be validated already.
    """

    __slots__ = ("_prompts",)

    def __init__(self, prompts: Mapping[Category, Mapping[str, str]]) -> None:
        self._prompts: Mapping[Category, Mapping[str, str]] = MappingProxyType(
            {category: MappingProxyType(dict(entries)) for category, entries in prompts.items()}
        )

    @classmethod
    def empty(cls) -> "PromptCatalog":
        """Catalog with no categories; every lookup reports CATEGORY_NOT_FOUND."""
        return cls({})

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._prompts.values())

    def list_categories(self) -> CategoryList:
        """Return registered categories in registration order."""
        return CategoryList(categories=list(self._prompts))

    def list_by_category(self, category: Category | str) -> CategoryPrompts | ErrorResult:
        """
        Return every prompt registered under a category.

        Args:
            category: Category to list

        Returns:
            CategoryPrompts in registration order, or CATEGORY_NOT_FOUND
        """
        resolved = _resolve_category(category)
        if resolved is None or resolved not in self._prompts:
            return _category_not_found(category)

        entries = [
            PromptEntry(name=name, content=body) for name, body in self._prompts[resolved].items()
        ]
        return CategoryPrompts(category=resolved, prompts=entries, count=len(entries))

    def get_prompt(self, category: Category | str, name: str) -> PromptBody | ErrorResult:
        """
        Return a single prompt body by exact, case-sensitive name.

        Args:
            category: Category holding the prompt
            name: Prompt name within the category

        Returns:
            PromptBody with the body verbatim, CATEGORY_NOT_FOUND, or
            PROMPT_NOT_FOUND
        """
        resolved = _resolve_category(category)
        if resolved is None or resolved not in self._prompts:
            return _category_not_found(category)

        body = self._prompts[resolved].get(name)
        if body is None:
            return ErrorResult(
                error=ErrorKind.PROMPT_NOT_FOUND,
                message=f"Prompt '{name}' not found in category '{resolved.value}'",
                details={"category": resolved.value, "name": name},
            )
        return PromptBody(category=resolved, name=name, content=body)

    def combine_prompts(
        self,
        categories: Iterable[Category | str],
        separator: str = DEFAULT_SEPARATOR,
    ) -> CombinedPrompts | ErrorResult:
        """
        Join the prompts of several categories into one text.

        Each prompt becomes a block with category and prompt headers. A
        category listed twice is included twice; unknown categories are
        skipped. categories_processed echoes the request as given.

        Args:
            categories: Categories to include, in output order
            separator: Text placed between consecutive blocks

        Returns:
            CombinedPrompts, or NO_MATCHES if no block was produced
        """
        requested = list(categories)
        blocks: list[str] = []
        included: list[PromptRef] = []

        for category in requested:
            resolved = _resolve_category(category)
            if resolved is None or resolved not in self._prompts:
                continue
            for name, body in self._prompts[resolved].items():
                blocks.append(_format_block(resolved, name, body))
                included.append(PromptRef(category=resolved, name=name))

        echoed = [c.value if isinstance(c, Category) else c for c in requested]
        if not blocks:
            return ErrorResult(
                error=ErrorKind.NO_MATCHES,
                message="No prompts found for the specified categories",
                details={"total_prompts": 0, "categories_processed": echoed},
            )

        return CombinedPrompts(
            combined_prompt=separator.join(blocks),
            included_prompts=included,
            total_prompts=len(blocks),
            categories_processed=echoed,
        )

    def search_prompts(
        self,
        keyword: str,
        categories: Iterable[Category | str] | None = None,
    ) -> SearchResults | ErrorResult:
        """
        Find prompts whose name or body contains a keyword.

        Args:
            keyword: Non-empty keyword, matched case-insensitively
            categories: Categories to search; all registered ones if None

        Returns:
            SearchResults ordered by descending relevance (ties keep
            discovery order), or INVALID_ARGUMENT for an empty keyword
        """
        if not keyword:
            return ErrorResult(
                error=ErrorKind.INVALID_ARGUMENT,
                message="Search keyword must not be empty",
            )

        searched = list(self._prompts) if categories is None else list(categories)
        found: list[SearchMatch] = []

        for category in searched:
            resolved = _resolve_category(category)
            if resolved is None or resolved not in self._prompts:
                continue
            for name, body in self._prompts[resolved].items():
                if not matches(keyword, name, body):
                    continue
                found.append(
                    SearchMatch(
                        category=resolved,
                        name=name,
                        relevance=relevance_score(keyword, name, body),
                        snippet=make_snippet(body),
                    )
                )

        # sorted() is stable, so equal scores stay in discovery order
        ranked = sorted(found, key=lambda match: match.relevance, reverse=True)
        return SearchResults(keyword=keyword, results=ranked, total_found=len(ranked))


def _validate_content(content: PromptContent) -> dict[Category, dict[str, str]]:
    validated: dict[Category, dict[str, str]] = {}
    try:
        for raw_category, entries in content.items():
            category = _resolve_category(raw_category)
            if category is None:
                raise CatalogInitializationError(f"Unknown category '{raw_category}'")
            if category in validated:
                raise CatalogInitializationError(
                    f"Category '{category.value}' is registered more than once"
                )

            prompts: dict[str, str] = {}
            for name, body in entries.items():
                if not isinstance(name, str) or not name:
                    raise CatalogInitializationError(
                        f"Invalid prompt name {name!r} in category '{category.value}'"
                    )
                if not isinstance(body, str):
                    raise CatalogInitializationError(
                        f"Prompt '{name}' in category '{category.value}' has a non-text body"
                    )
                prompts[name] = body
            validated[category] = prompts
    except (AttributeError, TypeError) as exc:
        raise CatalogInitializationError(f"Malformed prompt content: {exc}") from exc
    return validated


def build_catalog(content: PromptContent | None = None) -> PromptCatalog:
    """
    Build the catalog from prompt content.

    Loading is all or nothing: if any entry is malformed the failure is
    logged and an empty catalog is returned instead.

    Args:
        content: Mapping of category to (name -> body); defaults to the
            embedded CATALOG_CONTENT

    Returns:
        Fully populated PromptCatalog, or an empty one on failure
    """
    source = CATALOG_CONTENT if content is None else content
    try:
        validated = _validate_content(source)
    except CatalogInitializationError as exc:
        logger.error(
            f"Failed to load prompt catalog, falling back to empty catalog: {exc.message}",
            extra={"error_code": exc.error_code},
            exc_info=True,
        )
        return PromptCatalog.empty()

    catalog = PromptCatalog(validated)
    logger.info(
        "Prompt catalog loaded",
        extra={
            "categories": [category.value for category in validated],
            "prompt_count": len(catalog),
        },
    )
    return catalog
