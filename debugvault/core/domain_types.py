"""Domain Types: enums and identifiers shared by every DebugVault record.

Invariants:
    - UserId and SessionId are opaque strings issued by the store
    - All valid states encoded as Enums, serialized as their string value

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to raw strings coming from the filter UI
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
SessionId = NewType("SessionId", str)


# ─── Enums ───────────────────────────────────────────────────────

class SessionStatus(str, Enum):
    """Debug session lifecycle states."""
    ACTIVE = "active"
    RESOLVED = "resolved"
    ARCHIVED = "archived"


class ErrorType(str, Enum):
    """Error classification chosen when the log is recorded."""
    SYNTAX = "syntax"
    RUNTIME = "runtime"
    LOGIC = "logic"
    NETWORK = "network"
    DATABASE = "database"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorStatus(str, Enum):
    """Error log triage states."""
    OPEN = "open"
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"


class ContentType(str, Enum):
    """Collections the search type filter can select."""
    SESSIONS = "sessions"
    SNIPPETS = "snippets"
    ERRORS = "errors"


# ─── Constants ───────────────────────────────────────────────────

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "csharp", "cpp", "c",
    "go", "rust", "php", "ruby", "swift", "kotlin", "html", "css", "json", "xml",
)
DEFAULT_LANGUAGE = "javascript"
UNKNOWN_SESSION_TITLE = "Unknown Session"
