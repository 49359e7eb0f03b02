"""
Typed Redis repositories for pydantic entities.
"""

from redis_repository.common.errors import (
    AppError,
    ConfigurationError,
    InvalidArgumentError,
    StoreUnavailableError,
)
from redis_repository.domain.entity import StoredEntity
from redis_repository.repositories.factory import get_typed_store
from redis_repository.repositories.redis.typed_store_repo import (
    DEFAULT_EXPIRATION,
    RedisTypedStoreRepository,
)
from redis_repository.repositories.typed_store_repo import TypedStoreRepository

__all__ = [
    "AppError",
    "ConfigurationError",
    "InvalidArgumentError",
    "StoreUnavailableError",
    "StoredEntity",
    "get_typed_store",
    "DEFAULT_EXPIRATION",
    "RedisTypedStoreRepository",
    "TypedStoreRepository",
]
