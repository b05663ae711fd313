"""User Data Loading: fetches the current user's three collections through injected protocols.

Invariants:
    - The user is resolved first; the three list calls then run concurrently
    - Any collaborator failure surfaces as DataSourceError with the original as __cause__
"""

import asyncio
import logging
from typing import NamedTuple

from debugvault.core.domain_types import UserId
from debugvault.core.errors import DataSourceError, ErrorContext
from debugvault.core.repository_protocols import DebugDataRepository, IdentityProvider
from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog

logger = logging.getLogger(__name__)


class UserCollections(NamedTuple):
    user_id: UserId
    sessions: list[DebugSession]
    snippets: list[CodeSnippet]
    errors: list[ErrorLog]


async def fetch_user_collections(
    identity: IdentityProvider,
    repository: DebugDataRepository,
    operation: str,
) -> UserCollections:
    """Load sessions, snippets and error logs owned by the current user."""
    ctx = ErrorContext()
    try:
        user_id = await identity.current_user_id()
        ctx.user_id = user_id
        sessions, snippets, errors = await asyncio.gather(
            repository.list_sessions(user_id),
            repository.list_snippets(user_id),
            repository.list_error_logs(user_id),
        )
    except DataSourceError:
        raise
    except Exception as exc:
        raise DataSourceError(str(exc), operation, ctx) from exc

    logger.debug(
        "Loaded collections", extra={
            "user_id": user_id, "operation": operation,
            "total_count": len(sessions) + len(snippets) + len(errors),
        },
    )
    return UserCollections(user_id, list(sessions), list(snippets), list(errors))
