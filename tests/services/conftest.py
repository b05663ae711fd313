"""Service test fixtures: in-memory identity provider and repository.

Invariants:
    - FakeRepository honours the DebugDataRepository contract: user scoping,
      session scoping and created_at-descending order
    - Setting `fail_with` makes every repository call raise that exception
    - `calls` records each method invoked, for asserting that no IO happened
"""

from types import SimpleNamespace

import pytest

from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog


class FakeIdentity:
    def __init__(self, user_id: str = "u1"):
        self.user_id = user_id
        self.fail_with: Exception | None = None

    async def current_user_id(self) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        return self.user_id


class FakeRepository:
    def __init__(self):
        self.sessions: list[DebugSession] = []
        self.snippets: list[CodeSnippet] = []
        self.errors: list[ErrorLog] = []
        self.fail_with: Exception | None = None
        self.calls: list[str] = []

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    @staticmethod
    def _newest_first(records):
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    async def list_sessions(self, user_id: str) -> list[DebugSession]:
        self._check("list_sessions")
        return self._newest_first(s for s in self.sessions if s.user_id == user_id)

    async def list_snippets(self, user_id: str) -> list[CodeSnippet]:
        self._check("list_snippets")
        return self._newest_first(s for s in self.snippets if s.user_id == user_id)

    async def list_error_logs(self, user_id: str) -> list[ErrorLog]:
        self._check("list_error_logs")
        return self._newest_first(e for e in self.errors if e.user_id == user_id)

    async def list_snippets_for_session(self, session_id: str) -> list[CodeSnippet]:
        self._check("list_snippets_for_session")
        return self._newest_first(s for s in self.snippets if s.session_id == session_id)

    async def list_error_logs_for_session(self, session_id: str) -> list[ErrorLog]:
        self._check("list_error_logs_for_session")
        return self._newest_first(e for e in self.errors if e.session_id == session_id)


def make_session(id: str, title: str, user_id: str = "u1", created_at: str = "2024-01-10", **kw) -> DebugSession:
    return DebugSession(
        id=id, user_id=user_id, title=title, status=kw.pop("status", "active"),
        created_at=created_at, updated_at=created_at, **kw,
    )


def make_snippet(id: str, title: str, session_id: str = "s1", user_id: str = "u1", **kw) -> CodeSnippet:
    return CodeSnippet(
        id=id, session_id=session_id, user_id=user_id, title=title,
        code=kw.pop("code", "pass"), language=kw.pop("language", "python"),
        created_at=kw.pop("created_at", "2024-01-10"), **kw,
    )


def make_error(id: str, title: str, session_id: str = "s1", user_id: str = "u1", **kw) -> ErrorLog:
    return ErrorLog(
        id=id, session_id=session_id, user_id=user_id, title=title,
        message=kw.pop("message", "failure"), error_type=kw.pop("error_type", "runtime"),
        severity=kw.pop("severity", "medium"), status=kw.pop("status", "open"),
        created_at=kw.pop("created_at", "2024-01-10"), **kw,
    )


@pytest.fixture
def identity() -> FakeIdentity:
    return FakeIdentity()


@pytest.fixture
def repository() -> FakeRepository:
    repo = FakeRepository()
    repo.sessions = [
        make_session("s1", "Auth bug", tags=["auth"], created_at="2024-01-01"),
        make_session("s2", "UI glitch", status="resolved", created_at="2024-02-01"),
        make_session("s3", "Auth for other user", user_id="u2"),
    ]
    repo.snippets = [
        make_snippet("n1", "Token parser", code="def parse_auth(header): ..."),
        make_snippet("n2", "CSS fix", session_id="s2", language="css", code="a { color: red }"),
    ]
    repo.errors = [
        make_error("e1", "Auth timeout", severity="critical", status="resolved"),
        make_error("e2", "Render loop", session_id="s2"),
    ]
    return repo


@pytest.fixture
def factory() -> SimpleNamespace:
    """Record builders for tests that need extra rows."""
    return SimpleNamespace(session=make_session, snippet=make_snippet, error=make_error)
