"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated when get_settings() is first called,
not at import time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    DATABASE_URL is only required once a request needs the database
    (see time_tracker.infrastructure.persistence.database); the app itself can
    start without it so health checks and tests work.
    """

    # App
    app_name: str = "time-tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database (PostgreSQL via asyncpg, schema managed by Alembic)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # External people-info API used to enrich new users by passport
    external_api_url: str = ""
    external_api_timeout_seconds: float = 10.0

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_urls_and_levels(self) -> "Settings":
        """Validate external API URL scheme and log level.

        - EXTERNAL_API_URL, when set, must be an http(s) URL.
        - LOG_LEVEL must be a standard logging level name.
        """
        if self.external_api_url and not self.external_api_url.startswith(
            ("http://", "https://")
        ):
            raise ValueError(
                "EXTERNAL_API_URL must start with http:// or https://, "
                f"got: {self.external_api_url!r}"
            )
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got: {self.log_level!r}"
            )
        self.log_level = level
        if self.request_timeout_seconds <= 0:
            raise ValueError("REQUEST_TIMEOUT_SECONDS must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so the
    next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
