"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - default_names never contains blank entries

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the service runs with no environment at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pickstream.core.domain_types import DEFAULT_NAMES


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service identity (reported by /api/health)
    service_name: str = "pickstream-backend"
    service_version: str = "1.0.0"

    # Store seed
    default_names: list[str] = list(DEFAULT_NAMES)

    @field_validator("default_names")
    @classmethod
    def drop_blank_names(cls, v: list[str]) -> list[str]:
        return [n.strip() for n in v if n and n.strip()]

    # API - browser frontend is served from another origin
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
