"""Session Export: renders one debug session with its snippets and errors as markdown.

Invariants:
    - Pure rendering; fetching and file writing belong to the caller
    - Sections appear in order: header, description, snippets, error logs, footer
    - export_filename output matches [a-z0-9_]+\\.md
"""

import re
from collections.abc import Sequence

from debugvault.core.timestamps import format_timestamp
from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog

_FOOTER = "*Exported from DebugVault*"
_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def export_filename(title: str) -> str:
    return _NON_ALNUM.sub("_", title).lower() + ".md"


def _render_snippet(snippet: CodeSnippet) -> str:
    lines = [
        f"### {snippet.title}",
        f"**Language:** {snippet.language}",
    ]
    if snippet.file_path:
        lines.append(f"**File:** {snippet.file_path}")
    if snippet.line_number:
        lines.append(f"**Line:** {snippet.line_number}")
    lines += ["", f"```{snippet.language}", snippet.code, "```"]
    return "\n".join(lines)


def _render_error(error: ErrorLog) -> str:
    lines = [
        f"### {error.title}",
        f"**Type:** {error.error_type.value}",
        f"**Severity:** {error.severity.value}",
        f"**Status:** {error.status.value}",
        "",
        f"**Message:** {error.message}",
    ]
    if error.stack_trace:
        lines += ["", "**Stack Trace:**", "```", error.stack_trace, "```"]
    return "\n".join(lines)


def render_session_markdown(
    session: DebugSession,
    snippets: Sequence[CodeSnippet],
    errors: Sequence[ErrorLog],
) -> str:
    """Render a session report; snippets and errors keep the given order."""
    sections = [
        f"# {session.title}",
        "",
        f"**Created:** {format_timestamp(session.created_at)}",
        f"**Status:** {session.status.value}",
        f"**Tags:** {', '.join(session.tags)}",
        "",
        "## Description",
        session.description or "No description provided",
        "",
        f"## Code Snippets ({len(snippets)})",
    ]
    for snippet in snippets:
        sections += ["", _render_snippet(snippet)]

    sections += ["", f"## Error Logs ({len(errors)})"]
    for error in errors:
        sections += ["", _render_error(error)]

    sections += ["", "---", _FOOTER, ""]
    return "\n".join(sections)
