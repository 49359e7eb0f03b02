"""
Redis Connection Management Module

Provides Redis client construction and lifecycle management for typed stores.
The repositories never own the client: it is created here at startup, shared by
reference and closed here at shutdown.
"""

import logging
import warnings
from typing import Optional
from urllib.parse import urlparse

from redis.asyncio import Redis

from redis_repository.common.errors import ConfigurationError
from redis_repository.config import Settings, get_settings

logger = logging.getLogger(__name__)

_SUPPORTED_SCHEMES = ("redis", "rediss", "unix")

# Global Redis client instance
_redis_client: Optional[Redis] = None


def _check_redis_url(redis_url: str) -> None:
    """
    Validate the Redis connection URL.

    Raises:
        ConfigurationError: If the URL is empty or uses an unsupported scheme
    """
    if not redis_url or not redis_url.strip():
        raise ConfigurationError(
            "Redis connection URL cannot be empty",
            code="missing_redis_url",
        )

    parsed = urlparse(redis_url)
    if parsed.scheme not in _SUPPORTED_SCHEMES:
        raise ConfigurationError(
            f"Unsupported Redis URL scheme: {parsed.scheme or '<none>'}",
            code="invalid_redis_url",
            details={"supported_schemes": list(_SUPPORTED_SCHEMES)},
        )


def _check_redis_security(redis_url: str) -> None:
    """
    Check Redis connection security.

    Warns if Redis URL has no password and is not a localhost connection.
    """
    parsed = urlparse(redis_url)
    if parsed.scheme == "unix":
        return

    # Check if password is present in URL
    has_password = bool(parsed.password)

    # Check if connecting to localhost
    is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")

    if not has_password and not is_localhost:
        warnings.warn(
            "SECURITY WARNING: Redis connection has no password and is not connecting to localhost. "
            "This is insecure for production environments. "
            "Please set a password in REDIS_URL using the format: redis://:password@host:port/db",
            UserWarning,
            stacklevel=3,
        )
        logger.warning(
            "Redis connection without password to non-localhost host detected. "
            "Consider adding password authentication for production."
        )


def create_redis_client(settings: Optional[Settings] = None) -> Redis:
    """
    Build an async Redis client from settings without connecting.

    Connections are established lazily by the pool on first command and
    re-established after failures, so an unreachable server at startup is not fatal.

    Args:
        settings: Configuration to use, defaults to get_settings()

    Returns:
        Redis: Async Redis client returning raw bytes values; entity payloads
            are decoded by the serializer so invalid UTF-8 counts as a corrupt record

    Raises:
        ConfigurationError: If REDIS_URL is missing or malformed
    """
    settings = settings or get_settings()

    _check_redis_url(settings.REDIS_URL)
    _check_redis_security(settings.REDIS_URL)

    return Redis.from_url(
        settings.REDIS_URL,
        decode_responses=False,
        socket_connect_timeout=settings.REDIS_CONNECT_TIMEOUT,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        retry_on_timeout=settings.REDIS_RETRY_ON_TIMEOUT,
        health_check_interval=settings.REDIS_HEALTH_CHECK_INTERVAL,
    )


async def init_redis(verify: bool = True) -> Redis:
    """
    Initialize Redis Connection

    Creates the shared async Redis client from the configured REDIS_URL.
    Should be called during application startup.

    Args:
        verify: Ping the server once to fail fast on a bad address

    Returns:
        Redis: The shared client
    """
    global _redis_client

    if _redis_client is not None:
        logger.warning("Redis client already initialized")
        return _redis_client

    settings = get_settings()
    client = create_redis_client(settings)

    if verify:
        # Verify connectivity
        try:
            await client.ping()
        except Exception:
            await client.aclose()
            raise

    _redis_client = client
    logger.info("Redis client initialized: %s", _redact(settings.REDIS_URL))
    return _redis_client


async def close_redis() -> None:
    """
    Close Redis Connection

    Gracefully closes the shared client connection.
    Should be called during application shutdown.
    """
    global _redis_client

    if _redis_client is None:
        return

    await _redis_client.aclose()
    _redis_client = None
    logger.info("Redis connection closed")


def get_redis() -> Redis:
    """
    Get Redis Client Instance

    Returns:
        Redis: The async Redis client

    Raises:
        ConfigurationError: If Redis has not been initialized
    """
    if _redis_client is None:
        raise ConfigurationError(
            "Redis client not initialized. Ensure init_redis() has been called.",
            code="redis_not_initialized",
        )
    return _redis_client


def _redact(redis_url: str) -> str:
    """Hide the password part of a Redis URL for logging."""
    parsed = urlparse(redis_url)
    if not parsed.password:
        return redis_url
    return redis_url.replace(f":{parsed.password}@", ":***@", 1)
