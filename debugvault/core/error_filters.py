"""Error Log Filters: the equality filters of the error-log list view.

Invariants:
    - Pure function; stable order
    - None or blank filter value means unconstrained; filters compose as AND
"""

from collections.abc import Sequence

from debugvault.core.domain_types import UNKNOWN_SESSION_TITLE, SessionId
from debugvault.schemas.records import DebugSession, ErrorLog


def _set(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def filter_error_logs(
    errors: Sequence[ErrorLog],
    error_type: str | None = None,
    severity: str | None = None,
    status: str | None = None,
) -> list[ErrorLog]:
    """Keep error logs matching every set filter."""
    result = []
    for error in errors:
        if _set(error_type) and error.error_type != error_type:
            continue
        if _set(severity) and error.severity != severity:
            continue
        if _set(status) and error.status != status:
            continue
        result.append(error)
    return result


def session_title_for(session_id: SessionId, sessions: Sequence[DebugSession]) -> str:
    """Title of the owning session, or a placeholder when it is gone."""
    for session in sessions:
        if session.id == session_id:
            return session.title
    return UNKNOWN_SESSION_TITLE
