"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Connection targets come from environment variables or .env (never hardcoded credentials)
    - get_settings() is cached (lru_cache) - single instance per process
    - storage_backend is always normalized to "file" or "mongodb"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - File backend is the default: works out-of-the-box with no external service
    - A missing MongoDB URI is detected when the store is opened, not here, so
      importing the app never fails on configuration alone
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["file", "mongodb"] = "file"

    @field_validator("storage_backend", mode="before")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        """Accept 'mongo' and any casing as aliases."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "mongo":
                return "mongodb"
        return v

    data_dir: str = "data"
    mongodb_uri: str | None = None
    mongodb_database: str = "ecowatch"

    # API
    service_name: str = "EcoWatch Reports API"
    service_version: str = "1.0.0"
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3001

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
