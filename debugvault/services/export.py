"""Export Service: gathers a session's snippets and errors and renders the markdown report."""

import asyncio
import logging

from debugvault.core.domain_types import SessionId
from debugvault.core.errors import DataSourceError, ErrorContext, ResourceNotFoundError
from debugvault.core.repository_protocols import DebugDataRepository, IdentityProvider
from debugvault.core.session_export import export_filename, render_session_markdown
from debugvault.schemas.records import DebugSession
from debugvault.services.user_data import fetch_user_collections

logger = logging.getLogger(__name__)


async def export_session(
    repository: DebugDataRepository, session: DebugSession,
) -> tuple[str, str]:
    """Return (filename, markdown) for one session. Writing it out is up to the caller."""
    try:
        snippets, errors = await asyncio.gather(
            repository.list_snippets_for_session(session.id),
            repository.list_error_logs_for_session(session.id),
        )
    except Exception as exc:
        raise DataSourceError(
            str(exc), "export", ErrorContext(session_id=session.id),
        ) from exc

    logger.info(
        "Session exported",
        extra={"session_id": session.id, "total_count": len(snippets) + len(errors)},
    )
    return export_filename(session.title), render_session_markdown(session, snippets, errors)


async def export_session_by_id(
    identity: IdentityProvider,
    repository: DebugDataRepository,
    session_id: SessionId,
) -> tuple[str, str]:
    """Export one of the current user's sessions, looked up by id."""
    data = await fetch_user_collections(identity, repository, "export")
    session = next((s for s in data.sessions if s.id == session_id), None)
    if session is None:
        raise ResourceNotFoundError(
            "Session", session_id,
            ErrorContext(user_id=data.user_id, session_id=session_id, operation="export"),
        )
    return await export_session(repository, session)
