"""
Redis Repository Implementation Module Initialization
"""

from redis_repository.repositories.redis.typed_store_repo import (
    DEFAULT_EXPIRATION,
    RedisTypedStoreRepository,
)

__all__ = [
    "DEFAULT_EXPIRATION",
    "RedisTypedStoreRepository",
]
