"""Record Schemas: pydantic models for the three collections read from the document store.

Invariants:
    - Accept camelCase store keys (userId, createdAt) and snake_case names alike
    - Timestamps are timezone-aware UTC after validation
    - DebugSession.tags is always list[str]; legacy JSON-string tags decoded here, once
    - Records are frozen: the search engine only ever reads them

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for every store key
    - Shared _StoreRecord base carries config and timestamp parsing
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from debugvault.core.domain_types import (
    ErrorStatus, ErrorType, SessionId, SessionStatus, Severity, UserId,
)
from debugvault.core.tags import coerce_tags
from debugvault.core.timestamps import parse_timestamp


class _StoreRecord(BaseModel):
    """Common config for records owned by the external document store."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )

    id: str = Field(min_length=1)
    user_id: UserId
    title: str
    created_at: datetime

    @field_validator("created_at", "updated_at", mode="before", check_fields=False)
    @classmethod
    def normalize_timestamp(cls, v: object) -> datetime:
        parsed = parse_timestamp(v)
        if parsed is None:
            raise ValueError(f"invalid timestamp: {v!r}")
        return parsed

    def to_store(self) -> dict:
        """Serialize with the store's camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class DebugSession(_StoreRecord):
    """One debugging investigation."""
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    status: SessionStatus
    updated_at: datetime

    @field_validator("tags", mode="before")
    @classmethod
    def decode_tags(cls, v: object) -> list[str]:
        return coerce_tags(v)


class CodeSnippet(_StoreRecord):
    """Stored code excerpt attached to a session."""
    session_id: SessionId
    code: str
    language: str
    file_path: str | None = None
    line_number: int | None = Field(None, ge=1)


class ErrorLog(_StoreRecord):
    """Stored error record attached to a session."""
    session_id: SessionId
    message: str
    stack_trace: str | None = None
    error_type: ErrorType
    severity: Severity
    status: ErrorStatus
