"""
Keyword matching and relevance scoring for prompt search.

Matching is a case-insensitive literal substring test against the prompt
name and body. The score adds a flat bonus for a name hit to the number of
body occurrences, so a name that repeats the keyword still earns the bonus
only once.
"""

SNIPPET_LENGTH = 200
ELLIPSIS = "..."
NAME_MATCH_BONUS = 10


def matches(keyword: str, name: str, body: str) -> bool:
    """Return True if keyword occurs in name or body, ignoring case."""
    needle = keyword.lower()
    return needle in name.lower() or needle in body.lower()


def count_occurrences(keyword: str, text: str) -> int:
    """Count non-overlapping case-insensitive occurrences of keyword in text."""
    if not keyword:
        return 0
    return text.lower().count(keyword.lower())


def relevance_score(keyword: str, name: str, body: str) -> int:
    """
    Score a matching prompt for ordering search results.

    Args:
        keyword: Search keyword (any case)
        name: Prompt name
        body: Prompt body

    Returns:
        NAME_MATCH_BONUS if the keyword is in the name, plus the number of
        keyword occurrences in the body
    """
    score = NAME_MATCH_BONUS if keyword.lower() in name.lower() else 0
    return score + count_occurrences(keyword, body)


def make_snippet(body: str) -> str:
    """First SNIPPET_LENGTH characters of body, with ELLIPSIS if truncated."""
    if len(body) > SNIPPET_LENGTH:
        return body[:SNIPPET_LENGTH] + ELLIPSIS
    return body
