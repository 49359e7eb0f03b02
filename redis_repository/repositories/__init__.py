"""
Data Access Layer Module Initialization
"""

from redis_repository.repositories.base import BaseRepository
from redis_repository.repositories.typed_store_repo import TypedStoreRepository

__all__ = [
    "BaseRepository",
    "TypedStoreRepository",
]
