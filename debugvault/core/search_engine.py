"""Search Engine: query-driven filtering across sessions, snippets and error logs.

Invariants:
    - Pure function: no IO, no async, no logging, inputs never mutated
    - A blank query matches nothing (search is query-driven, never browse-all)
    - Case-insensitive substring match; ANY designated text field may match
    - Filters compose as AND; an unset filter never constrains
    - Invalid filter values (unknown enum, inverted or unparseable date range)
      exclude everything on their axis, never raise
    - Output order equals input order within each collection

Design Decisions:
    - One text policy for every field, tags included
    - Tag filter is exact and case-sensitive, matching how tags are stored
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import TypeVar

from debugvault.core.domain_types import ContentType
from debugvault.core.timestamps import parse_timestamp
from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog
from debugvault.schemas.search import DateRange, SearchFilters, SearchResults

T = TypeVar("T")


# ─── Text matching ───────────────────────────────────────────────

def _contains(text: str | None, needle: str) -> bool:
    """Missing optional fields never match."""
    return text is not None and needle in text.lower()


def session_matches_text(session: DebugSession, needle: str) -> bool:
    return (
        _contains(session.title, needle)
        or _contains(session.description, needle)
        or any(_contains(tag, needle) for tag in session.tags)
    )


def snippet_matches_text(snippet: CodeSnippet, needle: str) -> bool:
    return (
        _contains(snippet.title, needle)
        or _contains(snippet.code, needle)
        or _contains(snippet.file_path, needle)
    )


def error_matches_text(error: ErrorLog, needle: str) -> bool:
    return (
        _contains(error.title, needle)
        or _contains(error.message, needle)
        or _contains(error.stack_trace, needle)
    )


# ─── Structured filters ─────────────────────────────────────────

def _keep(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [item for item in items if predicate(item)]


def _date_bounds(date_range: DateRange) -> tuple[datetime, datetime] | None:
    """Parsed (start, end), or None when the range can match nothing."""
    start = parse_timestamp(date_range.start)
    end = parse_timestamp(date_range.end)
    if start is None or end is None or start > end:
        return None
    return start, end


def _in_range(created_at: datetime, bounds: tuple[datetime, datetime] | None) -> bool:
    if bounds is None:
        return False
    start, end = bounds
    created = parse_timestamp(created_at)
    return created is not None and start <= created <= end


def _wants(content_type: str | None, candidate: ContentType) -> bool:
    return content_type is None or content_type == candidate.value


# ─── Public API ──────────────────────────────────────────────────

def search(
    query: str,
    filters: SearchFilters | None,
    sessions: Sequence[DebugSession],
    snippets: Sequence[CodeSnippet],
    errors: Sequence[ErrorLog],
) -> SearchResults:
    """Filter the three collections by free text plus structured filters.

    Returns a new SearchResults; the input sequences are left untouched.
    """
    if not query or not query.strip():
        return SearchResults()

    filters = filters or SearchFilters()
    needle = query.lower()

    found_sessions = _keep(sessions, lambda s: session_matches_text(s, needle))
    found_snippets = _keep(snippets, lambda s: snippet_matches_text(s, needle))
    found_errors = _keep(errors, lambda e: error_matches_text(e, needle))

    if not _wants(filters.type, ContentType.SESSIONS):
        found_sessions = []
    if not _wants(filters.type, ContentType.SNIPPETS):
        found_snippets = []
    if not _wants(filters.type, ContentType.ERRORS):
        found_errors = []

    # Snippets carry no status
    if filters.status is not None:
        found_sessions = _keep(found_sessions, lambda s: s.status == filters.status)
        found_errors = _keep(found_errors, lambda e: e.status == filters.status)

    if filters.severity is not None:
        found_errors = _keep(found_errors, lambda e: e.severity == filters.severity)

    if filters.date_range is not None:
        bounds = _date_bounds(filters.date_range)
        found_sessions = _keep(found_sessions, lambda s: _in_range(s.created_at, bounds))
        found_snippets = _keep(found_snippets, lambda s: _in_range(s.created_at, bounds))
        found_errors = _keep(found_errors, lambda e: _in_range(e.created_at, bounds))

    if filters.tags:
        wanted = set(filters.tags)
        found_sessions = _keep(found_sessions, lambda s: wanted.issubset(s.tags))

    return SearchResults(
        sessions=found_sessions, snippets=found_snippets, errors=found_errors,
    )
