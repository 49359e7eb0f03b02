"""
Redis Client Module Initialization
"""

from redis_repository.db.redis import (
    close_redis,
    create_redis_client,
    get_redis,
    init_redis,
)

__all__ = [
    "close_redis",
    "create_redis_client",
    "get_redis",
    "init_redis",
]
