"""Search Schemas: the structured filter set and the categorized result set.

Invariants:
    - Every SearchFilters field is optional; None means no constraint on that axis
    - Blank strings from an "All ..." dropdown normalize to None
    - Filter values are NOT validated against the enums: unknown values simply match nothing
    - SearchResults.total_count == len(sessions) + len(snippets) + len(errors)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from debugvault.schemas.records import CodeSnippet, DebugSession, ErrorLog


class DateRange(BaseModel):
    """Inclusive createdAt bounds. Bounds stay raw; the engine parses them leniently."""
    model_config = ConfigDict(frozen=True)

    start: datetime | str
    end: datetime | str


class SearchFilters(BaseModel):
    """Structured (non-text) query constraints."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )

    type: str | None = None
    status: str | None = None
    severity: str | None = None
    date_range: DateRange | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("type", "status", "severity", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        return [] if v is None else v

    @property
    def is_active(self) -> bool:
        """True when any axis is constrained."""
        return bool(
            self.type or self.status or self.severity
            or self.date_range is not None or self.tags
        )

    def cleared(self) -> "SearchFilters":
        return SearchFilters()


class SearchResults(BaseModel):
    """Filtered, categorized result set. Order within each list follows the input."""
    sessions: list[DebugSession] = Field(default_factory=list)
    snippets: list[CodeSnippet] = Field(default_factory=list)
    errors: list[ErrorLog] = Field(default_factory=list)

    @computed_field
    @property
    def total_count(self) -> int:
        return len(self.sessions) + len(self.snippets) + len(self.errors)

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    def counts(self) -> dict[str, int]:
        return {
            "sessions": len(self.sessions),
            "snippets": len(self.snippets),
            "errors": len(self.errors),
        }
