"""
Typed Store Repository Redis Implementation

Stores pydantic entities as JSON strings under namespaced Redis keys.
Uses Redis native TTL for expiration.
"""

import logging
from datetime import timedelta
from typing import Any, Awaitable, Callable, Optional, Type

from pydantic import BaseModel
from redis.asyncio import Redis
from redis.exceptions import RedisError

from redis_repository.common.errors import (
    ConfigurationError,
    InvalidArgumentError,
    StoreUnavailableError,
)
from redis_repository.common.serialization import EntitySerializer
from redis_repository.common.time import from_pttl, to_milliseconds
from redis_repository.repositories.base import T
from redis_repository.repositories.typed_store_repo import TypedStoreRepository

DEFAULT_EXPIRATION = timedelta(hours=24)

DEFAULT_SERIALIZER: EntitySerializer = EntitySerializer()

# Failures talking to the server; CancelledError is a BaseException and passes through
_STORE_ERRORS = (RedisError, ConnectionError, TimeoutError, OSError)


class RedisTypedStoreRepository(TypedStoreRepository[T]):
    """
    Typed Store Repository Redis Implementation

    One instance serves one entity type under one key prefix. It keeps no
    per-key state: the client and logger are shared references it never
    closes, and every operation maps to a single Redis command.
    """

    def __init__(
        self,
        client: Redis,
        logger: logging.Logger,
        model_type: Type[T],
        prefix: Optional[str] = None,
        serializer: EntitySerializer = DEFAULT_SERIALIZER,
        default_ttl: timedelta = DEFAULT_EXPIRATION,
    ):
        """
        Initialize Repository

        Args:
            client: Async Redis client instance
            logger: Logger receiving operation records
            model_type: Pydantic model class stored by this repository
            prefix: Key prefix, defaults to the lowercased type name followed by ":"
            serializer: JSON codec for entities
            default_ttl: Expiration used by set() when none is given

        Raises:
            ConfigurationError: A required collaborator is missing or invalid
        """
        if client is None:
            raise ConfigurationError("Redis client is required", code="missing_client")
        if logger is None:
            raise ConfigurationError("Logger is required", code="missing_logger")
        if not isinstance(model_type, type) or not issubclass(model_type, BaseModel):
            raise ConfigurationError(
                "model_type must be a pydantic BaseModel subclass",
                code="invalid_model_type",
                details={"model_type": repr(model_type)},
            )
        if serializer is None:
            raise ConfigurationError("Serializer is required", code="missing_serializer")
        if default_ttl is None or default_ttl <= timedelta(0):
            raise ConfigurationError(
                "default_ttl must be a positive duration",
                code="invalid_default_ttl",
            )

        self.client = client
        self.logger = logger
        self.model_type = model_type
        self.serializer = serializer
        self.default_ttl = default_ttl
        self._key_prefix = prefix if prefix is not None else f"{model_type.__name__.lower()}:"
        self._type_name = model_type.__name__

    def _redis_key(self, key: str) -> str:
        """Build the full Redis key with prefix"""
        return f"{self._key_prefix}{key}"

    @staticmethod
    def _validate_key(key: Any) -> None:
        if not isinstance(key, str) or not key.strip():
            raise InvalidArgumentError(
                "Key cannot be None or empty",
                details={"argument": "key"},
            )

    async def _execute(
        self,
        operation: str,
        key: str,
        command: Callable[..., Awaitable[Any]],
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Run one Redis command, logging and wrapping communication failures"""
        try:
            return await command(*args, **kwargs)
        except _STORE_ERRORS as e:
            self.logger.error(
                "Redis %s failed for type %s key %s: %s",
                operation,
                self._type_name,
                key,
                e,
                exc_info=True,
            )
            raise StoreUnavailableError(
                f"Redis {operation} failed for key {key}: {e}",
                details={"operation": operation, "key": self._redis_key(key)},
            ) from e

    async def set(self, key: str, entity: T, ttl: Optional[timedelta] = None) -> None:
        """Store an entity with the given or default TTL"""
        self._validate_key(key)
        if entity is None:
            raise InvalidArgumentError(
                "Entity cannot be None",
                details={"argument": "entity"},
            )
        if not isinstance(entity, self.model_type):
            raise InvalidArgumentError(
                f"Entity must be an instance of {self._type_name}",
                details={"argument": "entity", "type": type(entity).__name__},
            )

        expiration = ttl if ttl is not None else self.default_ttl
        data = self.serializer.dumps(entity)

        await self._execute(
            "set",
            key,
            self.client.set,
            self._redis_key(key),
            data,
            px=to_milliseconds(expiration),
        )

        self.logger.debug(
            "Saved %s for key %s with expiration %s", self._type_name, key, expiration
        )

    async def get(self, key: str) -> Optional[T]:
        """Get an entity, evicting records that no longer decode"""
        self._validate_key(key)
        redis_key = self._redis_key(key)

        try:
            # Clients built with decode_responses=True fail here on non-UTF-8 values
            raw = await self._execute("get", key, self.client.get, redis_key)
            if raw is None:
                self.logger.debug("No %s found for key %s", self._type_name, key)
                return None
            entity = self.serializer.loads(self.model_type, raw)
        except ValueError as e:
            self.logger.error(
                "Failed to deserialize %s for key %s, deleting corrupt record: %s",
                self._type_name,
                key,
                e,
                exc_info=True,
            )
            await self._execute("delete", key, self.client.delete, redis_key)
            return None

        self.logger.debug("Loaded %s for key %s", self._type_name, key)
        return entity

    async def exists(self, key: str) -> bool:
        """Check whether a key exists"""
        self._validate_key(key)

        count = await self._execute("exists", key, self.client.exists, self._redis_key(key))
        exists = count > 0

        self.logger.debug("Key %s for type %s exists: %s", key, self._type_name, exists)
        return exists

    async def delete(self, key: str) -> bool:
        """Delete a key"""
        self._validate_key(key)

        deleted_count = await self._execute("delete", key, self.client.delete, self._redis_key(key))
        deleted = deleted_count > 0

        if deleted:
            self.logger.debug("Deleted %s for key %s", self._type_name, key)
        else:
            self.logger.debug("No %s to delete for key %s", self._type_name, key)
        return deleted

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Set the expiration of an existing key"""
        self._validate_key(key)
        if ttl is None:
            raise InvalidArgumentError(
                "Expiration cannot be None",
                details={"argument": "ttl"},
            )

        applied = await self._execute(
            "expire",
            key,
            self.client.pexpire,
            self._redis_key(key),
            to_milliseconds(ttl),
        )
        applied = bool(applied)

        if applied:
            self.logger.debug(
                "Set expiration %s for key %s of type %s", ttl, key, self._type_name
            )
        else:
            self.logger.debug(
                "Cannot set expiration for key %s of type %s (key does not exist)",
                key,
                self._type_name,
            )
        return applied

    async def time_to_live(self, key: str) -> Optional[timedelta]:
        """Get the remaining TTL of a key"""
        self._validate_key(key)

        pttl = await self._execute("ttl", key, self.client.pttl, self._redis_key(key))
        ttl = from_pttl(pttl)

        self.logger.debug("Time to live for key %s of type %s: %s", key, self._type_name, ttl)
        return ttl
