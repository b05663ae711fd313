"""Draft Schemas: create-form payloads validated before they reach the document store.

Invariants:
    - Required text (title, code, message) is stripped and non-empty
    - Blank optional strings become None
    - SnippetDraft.language is one of SUPPORTED_LANGUAGES
    - to_record() ids are "<kind>_<epoch ms>"; new sessions are active, new error logs open
"""

from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from debugvault.core.domain_types import (
    DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES,
    ErrorStatus, ErrorType, SessionId, SessionStatus, Severity, UserId,
)
from debugvault.core.errors import DraftValidationError
from debugvault.core.tags import coerce_tags
from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog


def _record_id(kind: str, now: datetime) -> str:
    return f"{kind}_{int(now.timestamp() * 1000)}"


def _required_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


def _optional_text(v: str | None) -> str | None:
    if v is None:
        return None
    return v if v.strip() else None


class _Draft(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(max_length=200)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _required_text(v)


class SessionDraft(_Draft):
    """New session form: tags arrive as one comma-separated field."""
    description: str | None = Field(None, max_length=5000)
    tags: list[str] = Field(default_factory=list)

    @field_validator("description")
    @classmethod
    def blank_description(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: object) -> list[str]:
        return coerce_tags(v)

    def to_record(self, user_id: UserId, now: datetime) -> DebugSession:
        return DebugSession(
            id=_record_id("session", now),
            user_id=user_id,
            title=self.title,
            description=self.description,
            tags=self.tags,
            status=SessionStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )


class SnippetDraft(_Draft):
    session_id: SessionId = Field(min_length=1)
    code: str
    language: str = DEFAULT_LANGUAGE
    file_path: str | None = None
    line_number: int | None = Field(None, ge=1)

    @field_validator("code")
    @classmethod
    def non_blank_code(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty or whitespace")
        # Indentation is significant; keep code verbatim
        return v

    @field_validator("language")
    @classmethod
    def supported_language(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"unsupported language: {v}")
        return v

    @field_validator("file_path")
    @classmethod
    def blank_file_path(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("line_number", mode="before")
    @classmethod
    def blank_line_number(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_record(self, user_id: UserId, now: datetime) -> CodeSnippet:
        return CodeSnippet(
            id=_record_id("snippet", now),
            session_id=self.session_id,
            user_id=user_id,
            title=self.title,
            code=self.code,
            language=self.language,
            file_path=self.file_path,
            line_number=self.line_number,
            created_at=now,
        )


class ErrorLogDraft(_Draft):
    session_id: SessionId = Field(min_length=1)
    message: str
    stack_trace: str | None = None
    error_type: ErrorType = ErrorType.RUNTIME
    severity: Severity = Severity.MEDIUM

    @field_validator("message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        return _required_text(v)

    @field_validator("stack_trace")
    @classmethod
    def blank_stack_trace(cls, v: str | None) -> str | None:
        return _optional_text(v)

    def to_record(self, user_id: UserId, now: datetime) -> ErrorLog:
        return ErrorLog(
            id=_record_id("error", now),
            session_id=self.session_id,
            user_id=user_id,
            title=self.title,
            message=self.message,
            stack_trace=self.stack_trace,
            error_type=self.error_type,
            severity=self.severity,
            status=ErrorStatus.OPEN,
            created_at=now,
        )


DraftT = TypeVar("DraftT", bound=_Draft)


def validate_draft(model_cls: type[DraftT], payload: dict) -> DraftT:
    """Validate form input, raising DraftValidationError on the first bad field."""
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "__root__"
        raise DraftValidationError(
            f"{field}: {first['msg']}", field=field,
        ) from exc
