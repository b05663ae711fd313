"""Result Preview: short display strings for search result cards.

Invariants:
    - Pure string formatting; never raises on empty input
    - code_preview output is never longer than limit + 3
"""

from collections.abc import Sequence

from debugvault.schemas.search import SearchResults

_ELLIPSIS = "..."


def tag_preview(tags: Sequence[str], shown: int = 3) -> str:
    """Tag line such as "a, b, c +2 more"."""
    visible = ", ".join(tags[:shown])
    hidden = len(tags) - shown
    if hidden > 0:
        return f"{visible} +{hidden} more"
    return visible


def code_preview(code: str, limit: int = 200) -> str:
    if len(code) > limit:
        return code[:limit] + _ELLIPSIS
    return code


def file_location(file_path: str | None, line_number: int | None) -> str | None:
    if not file_path:
        return None
    if line_number:
        return f"{file_path}:{line_number}"
    return file_path


def summarize_results(results: SearchResults, query: str) -> dict:
    """Headline plus the non-zero per-category counts."""
    parts = [
        f"{count} {name}"
        for name, count in results.counts().items()
        if count > 0
    ]
    return {
        "headline": f'Found {results.total_count} results for "{query}"',
        "breakdown": parts,
    }
