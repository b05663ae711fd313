"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Every setting has a default so the library works without an .env file

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DEBUGVAULT_ prefix keeps the host application's environment untouched
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="DEBUGVAULT_", case_sensitive=False,
    )

    # Search
    search_debounce_ms: int = 300

    # Dashboard
    recent_sessions_limit: int = 5

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("search_debounce_ms", "recent_sessions_limit")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("log_format")
    @classmethod
    def known_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
