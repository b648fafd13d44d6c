"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service runs with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - REGISTRATION_API_ prefix keeps generic names like PORT from leaking in
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="REGISTRATION_API_", case_sensitive=False,
    )

    # Listener
    host: str = "0.0.0.0"
    port: int = 1212

    # API
    app_name: str = "registration-api"
    version: str = "0.1.0"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    access_log: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
