from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SSL_MODES = ("disable", "prefer", "require", "verify-ca", "verify-full")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Codepad API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True  # Set to False in production
    csp_production: str = "default-src 'self'; frame-ancestors 'none'"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str | None = None  # None -> require in production, disable otherwise
    database_timeout_seconds: float = 10.0
    database_auto_init: bool = False  # Create tables on startup

    # Shutdown
    shutdown_grace_period: int = 30

    # CORS (no cookies or auth headers are used, so a wildcard is acceptable)
    cors_origins: list[str] = ["*"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Archive export
    archive_chunk_size: int = 64 * 1024
    archive_compression_level: int = 6

    @field_validator("database_ssl_mode")
    @classmethod
    def validate_ssl_mode(cls, v: str | None) -> str | None:
        if v is not None and v not in SSL_MODES:
            raise ValueError(f"DATABASE_SSL_MODE must be one of: {', '.join(SSL_MODES)}")
        return v

    @field_validator("database_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("DATABASE_TIMEOUT_SECONDS must be positive")
        return v

    @field_validator("archive_chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        if v < 1024:
            raise ValueError("ARCHIVE_CHUNK_SIZE must be at least 1024 bytes")
        return v

    @field_validator("archive_compression_level")
    @classmethod
    def validate_compression_level(cls, v: int) -> int:
        if not 0 <= v <= 9:
            raise ValueError("ARCHIVE_COMPRESSION_LEVEL must be between 0 and 9")
        return v

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def effective_ssl_mode(self) -> str:
        """SSL mode for store connections.

        Production deployments require encrypted transport unless a mode is set
        explicitly; every other environment connects in plain text by default.
        """
        if self.database_ssl_mode is not None:
            return self.database_ssl_mode
        return "require" if self.is_production else "disable"


@lru_cache
def get_settings() -> Settings:
    return Settings()
