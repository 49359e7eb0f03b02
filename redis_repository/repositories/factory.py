"""
Typed Store Factory Module

Creates typed store repositories over the shared Redis client.
"""

import logging
from typing import Optional, Type

from redis.asyncio import Redis

from redis_repository.common.time import from_seconds
from redis_repository.config import get_settings
from redis_repository.db.redis import get_redis
from redis_repository.repositories.base import T
from redis_repository.repositories.redis.typed_store_repo import RedisTypedStoreRepository


def get_repository_logger(model_type: type) -> logging.Logger:
    """Logger named after the entity type, e.g. ``redis_repository.store.User``"""
    return logging.getLogger(f"redis_repository.store.{model_type.__name__}")


def get_typed_store(
    model_type: Type[T],
    prefix: Optional[str] = None,
    client: Optional[Redis] = None,
) -> RedisTypedStoreRepository[T]:
    """
    Build a typed store repository for an entity type

    Args:
        model_type: Pydantic model class to store
        prefix: Key prefix, defaults to the lowercased type name followed by ":"
        client: Redis client, defaults to the shared client from init_redis()

    Returns:
        RedisTypedStoreRepository: Repository bound to ``model_type``

    Raises:
        ConfigurationError: Redis not initialized or model_type invalid
    """
    settings = get_settings()
    return RedisTypedStoreRepository(
        client=client if client is not None else get_redis(),
        logger=get_repository_logger(model_type),
        model_type=model_type,
        prefix=prefix,
        default_ttl=from_seconds(settings.DEFAULT_TTL_SECONDS),
    )
