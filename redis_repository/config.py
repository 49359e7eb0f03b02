"""
Configuration Management Module

Configures Redis connection and repository defaults via environment variables or .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Repository Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "Redis Repository"
    DEBUG: bool = False

    # Redis Config
    # Connection URL, e.g. redis://:password@host:6379/0 or rediss:// for TLS
    REDIS_URL: str = "redis://localhost:6379/0"
    # Connect timeout (seconds)
    REDIS_CONNECT_TIMEOUT: float = Field(default=5.0, gt=0)
    # Per-command socket timeout (seconds)
    REDIS_SOCKET_TIMEOUT: float = Field(default=5.0, gt=0)
    # Retry a command once on timeout instead of failing the first attempt
    REDIS_RETRY_ON_TIMEOUT: bool = True
    # Seconds between connection health checks (0 disables)
    REDIS_HEALTH_CHECK_INTERVAL: int = Field(default=30, ge=0)

    # Repository Config
    # Default time-to-live applied by set() when the caller passes none (24 hours)
    DEFAULT_TTL_SECONDS: int = Field(default=86400, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Configuration instance
    """
    return Settings()
