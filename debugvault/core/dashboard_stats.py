"""Dashboard Stats: pure summary statistics over the user's records.

Invariants:
    - No IO; inputs are already scoped to one user
    - resolution_rate is an integer percentage, rounded half-up, 0 when there are no errors
    - recent_sessions is newest-first by created_at and never longer than limit
"""

from collections.abc import Sequence
from dataclasses import dataclass

from debugvault.core.domain_types import ErrorStatus
from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog


@dataclass(frozen=True)
class DashboardStats:
    total_sessions: int
    total_snippets: int
    total_errors: int
    resolved_errors: int
    resolution_rate: int

    def to_dict(self) -> dict:
        return {
            "total_sessions": self.total_sessions,
            "total_snippets": self.total_snippets,
            "total_errors": self.total_errors,
            "resolved_errors": self.resolved_errors,
            "resolution_rate": self.resolution_rate,
        }


def resolution_rate(resolved: int, total: int) -> int:
    """Percentage of resolved errors, half-up (1/8 -> 13, 1/200 -> 1)."""
    if total <= 0:
        return 0
    # Integer arithmetic avoids float half-way drift
    return (resolved * 200 + total) // (total * 2)


def compute_dashboard_stats(
    sessions: Sequence[DebugSession],
    snippets: Sequence[CodeSnippet],
    errors: Sequence[ErrorLog],
) -> DashboardStats:
    """Compute dashboard counters. Pure, no IO."""
    resolved = sum(1 for e in errors if e.status == ErrorStatus.RESOLVED)
    return DashboardStats(
        total_sessions=len(sessions),
        total_snippets=len(snippets),
        total_errors=len(errors),
        resolved_errors=resolved,
        resolution_rate=resolution_rate(resolved, len(errors)),
    )


def recent_sessions(sessions: Sequence[DebugSession], limit: int) -> list[DebugSession]:
    """Newest sessions first. Ties keep their input order."""
    if limit <= 0:
        return []
    ordered = sorted(sessions, key=lambda s: s.created_at, reverse=True)
    return ordered[:limit]
