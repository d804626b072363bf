"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # Empty prefix serves /users and /werkzeuge at the root
    API_PREFIX: str = ""

    # Where records live: one JSON file per store, a SQL table, or process memory
    STORE_BACKEND: Literal["json", "sql", "memory"] = "json"
    DATA_DIR: Path = Path("data")
    # Only used when STORE_BACKEND=sql
    DATABASE_URL: str = "sqlite:///data/toolshare.db"

    # What to do when a store file cannot be parsed: move it aside and reseed, or fail requests
    CORRUPT_STORE_POLICY: Literal["reseed", "fail"] = "reseed"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        prefix = v.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            raise ValueError("API_PREFIX must be empty or start with '/' (e.g. /api)")
        return prefix

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        v = v.strip() if v else ""
        if not v:
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///data/toolshare.db)"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
