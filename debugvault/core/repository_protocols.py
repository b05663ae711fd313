"""Boundary Protocols: contracts between the services and the hosted backend.

Invariants:
    - Core NEVER imports from services; collaborators reach services through these Protocols
    - Every list method returns validated records ordered by created_at, newest first
    - User-scoped list methods return only records owned by that user

Design Decisions:
    - Protocol over ABC: structural subtyping, any SDK adapter fits without inheritance
    - Async in Protocol: implementations do IO; the pure functions that consume
      their results are never async themselves
"""

from typing import Protocol

from debugvault.core.domain_types import SessionId, UserId
from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog


class IdentityProvider(Protocol):
    """Contract for the auth provider's "current user" lookup."""
    async def current_user_id(self) -> UserId: ...


class DebugDataRepository(Protocol):
    """Contract for the document store holding the three collections."""
    async def list_sessions(self, user_id: UserId) -> list[DebugSession]: ...
    async def list_snippets(self, user_id: UserId) -> list[CodeSnippet]: ...
    async def list_error_logs(self, user_id: UserId) -> list[ErrorLog]: ...
    async def list_snippets_for_session(self, session_id: SessionId) -> list[CodeSnippet]: ...
    async def list_error_logs_for_session(self, session_id: SessionId) -> list[ErrorLog]: ...
