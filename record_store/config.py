"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - log_format is one of "json" or "text"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works with no environment at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    # Store
    store_name: str = "records"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        v = v.strip().lower() if isinstance(v, str) else v
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
