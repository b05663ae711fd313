"""Dashboard Service: loads counters and the most recent sessions for the current user."""

import logging
from dataclasses import dataclass

from debugvault.config import get_settings
from debugvault.core.dashboard_stats import (
    DashboardStats, compute_dashboard_stats, recent_sessions,
)
from debugvault.core.repository_protocols import DebugDataRepository, IdentityProvider
from debugvault.schemas.records import DebugSession
from debugvault.services.user_data import fetch_user_collections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    stats: DashboardStats
    recent_sessions: list[DebugSession]


async def load_dashboard(
    identity: IdentityProvider,
    repository: DebugDataRepository,
    limit: int | None = None,
) -> DashboardSnapshot:
    """Fetch the user's data once and derive the dashboard from it.

    Raises DataSourceError when the identity provider or the store fails.
    """
    if limit is None:
        limit = get_settings().recent_sessions_limit
    data = await fetch_user_collections(identity, repository, "dashboard")
    stats = compute_dashboard_stats(data.sessions, data.snippets, data.errors)
    logger.info(
        "Dashboard loaded",
        extra={"user_id": data.user_id, "total_count": stats.total_sessions},
    )
    return DashboardSnapshot(
        stats=stats, recent_sessions=recent_sessions(data.sessions, limit),
    )
