"""Package configuration."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hash name settings loaded from environment variables."""

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False  # JSON lines for log aggregation

    # Refuse to build a registry where two algorithms share an alias.
    # When False, the first registered algorithm keeps the alias.
    reject_alias_collisions: bool = True

    model_config = SettingsConfigDict(
        env_prefix="HASHNAMES_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
