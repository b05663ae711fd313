"""DebugVault Runtime: composition root wiring settings, logging and services.

Invariants:
    - Collaborators passed in explicitly; nothing is created at import time
    - Logging configured from settings on entry
    - Pending searches cancelled on exit

Design Decisions:
    - Async context manager mirrors an application lifespan: setup before yield, cleanup after
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from dataclasses import dataclass

from debugvault.config import Settings, get_settings
from debugvault.core.repository_protocols import DebugDataRepository, IdentityProvider
from debugvault.infrastructure.observability import setup_logging
from debugvault.schemas.records import DebugSession
from debugvault.services.dashboard import DashboardSnapshot, load_dashboard
from debugvault.services.export import export_session
from debugvault.services.search_controller import SearchController

logger = logging.getLogger(__name__)


@dataclass
class VaultServices:
    """Services bound to one identity provider and one repository."""
    identity: IdentityProvider
    repository: DebugDataRepository
    settings: Settings
    search: SearchController

    async def dashboard(self) -> DashboardSnapshot:
        return await load_dashboard(
            self.identity, self.repository, self.settings.recent_sessions_limit,
        )

    async def export(self, session: DebugSession) -> tuple[str, str]:
        return await export_session(self.repository, session)


@asynccontextmanager
async def vault_runtime(
    identity: IdentityProvider,
    repository: DebugDataRepository,
    settings: Settings | None = None,
) -> AsyncIterator[VaultServices]:
    """Startup/shutdown lifecycle for the dashboard services."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    controller = SearchController(
        identity, repository, debounce_seconds=settings.search_debounce_ms / 1000,
    )
    logger.info("DebugVault services started")
    try:
        yield VaultServices(identity, repository, settings, controller)
    finally:
        controller.reset()
        logger.info("DebugVault services shutting down")
