"""
Domain Model Module Initialization
"""

from redis_repository.domain.entity import StoredEntity

__all__ = [
    "StoredEntity",
]
