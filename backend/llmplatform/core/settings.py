from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ENVIRONMENT = "development"
DEFAULT_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LLMP_",
        case_sensitive=False,
    )

    app_name: str = "LLM Platform"

    # Reported by /api/health.
    environment: str = DEFAULT_ENVIRONMENT
    version: str = DEFAULT_VERSION

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("environment", mode="before")
    @classmethod
    def _environment_fallback(cls, value: object) -> object:
        # An exported-but-empty variable behaves like an unset one.
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ENVIRONMENT
        return value

    @field_validator("version", mode="before")
    @classmethod
    def _version_fallback(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_VERSION
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
