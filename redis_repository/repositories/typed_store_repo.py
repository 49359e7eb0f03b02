"""
Typed Store Repository Interface

Defines the data access interface for storing one entity type in a key-value store.
"""

from abc import abstractmethod
from datetime import timedelta
from typing import Optional

from redis_repository.repositories.base import BaseRepository, T


class TypedStoreRepository(BaseRepository[T]):
    """
    Typed Store Repository Interface

    Every key given to these methods is a logical key; implementations add
    their namespace prefix. Empty or blank keys raise InvalidArgumentError
    before the store is contacted.
    """

    @abstractmethod
    async def set(self, key: str, entity: T, ttl: Optional[timedelta] = None) -> None:
        """
        Store an entity under a key

        Overwrites any existing record unconditionally.

        Args:
            key: The logical key
            entity: The entity to store
            ttl: Time to live (None means the repository default, 24 hours)

        Raises:
            InvalidArgumentError: Key empty/blank or entity missing
            StoreUnavailableError: The store could not be reached
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[T]:
        """
        Get the entity stored under a key

        Returns None if the key doesn't exist, is expired, or holds data that
        no longer decodes as the entity type (such records are deleted).

        Args:
            key: The logical key

        Returns:
            The entity if found and readable, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """
        Check whether a key currently holds a live value

        Args:
            key: The logical key

        Returns:
            True if the key exists, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """
        Delete a key

        Args:
            key: The logical key

        Returns:
            True if deleted, False if key didn't exist
        """
        pass

    @abstractmethod
    async def expire(self, key: str, ttl: timedelta) -> bool:
        """
        Set or replace the expiration of an existing key

        Zero or negative durations are passed to the store as-is.

        Args:
            key: The logical key
            ttl: New time to live

        Returns:
            True if the expiration was applied, False if key didn't exist
        """
        pass

    @abstractmethod
    async def time_to_live(self, key: str) -> Optional[timedelta]:
        """
        Get the remaining time to live of a key

        Args:
            key: The logical key

        Returns:
            Remaining duration, or None if the key doesn't exist or never expires
        """
        pass
