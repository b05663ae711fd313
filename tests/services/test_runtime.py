"""Runtime composition: logging configured, services wired, pending work cancelled."""

import asyncio
import logging

from debugvault.config import Settings
from debugvault.infrastructure.observability import JSONFormatter
from debugvault.main import vault_runtime


async def test_runtime_wires_services(identity, repository):
    settings = Settings(search_debounce_ms=10, recent_sessions_limit=1, log_format="json")
    async with vault_runtime(identity, repository, settings) as services:
        assert services.search.debounce_seconds == 0.01
        snapshot = await services.dashboard()
        assert len(snapshot.recent_sessions) == 1
        filename, _ = await services.export(repository.sessions[0])
        assert filename == "auth_bug.md"
        services.search.set_query("auth")
        assert services.search.pending

    await asyncio.sleep(0)
    assert not services.search.pending
    assert any(isinstance(h.formatter, JSONFormatter) for h in logging.root.handlers)
