"""
API Wiring Module Initialization
"""

from redis_repository.api.deps import redis_lifespan, typed_store_dependency

__all__ = [
    "redis_lifespan",
    "typed_store_dependency",
]
