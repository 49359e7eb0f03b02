"""
API Dependency Injection Module

Provides FastAPI wiring for typed stores: a lifespan that owns the Redis
client and per-type repository dependencies.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional, Type

from fastapi import FastAPI

from redis_repository.db.redis import close_redis, init_redis
from redis_repository.logging_config import setup_logging
from redis_repository.repositories.base import T
from redis_repository.repositories.factory import get_typed_store
from redis_repository.repositories.redis.typed_store_repo import RedisTypedStoreRepository


@asynccontextmanager
async def redis_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan configuring logging and managing the shared Redis client

    Usage:
        app = FastAPI(lifespan=redis_lifespan)
    """
    setup_logging()
    await init_redis()
    try:
        yield
    finally:
        await close_redis()


def typed_store_dependency(
    model_type: Type[T],
    prefix: Optional[str] = None,
) -> Callable[[], RedisTypedStoreRepository[T]]:
    """
    Create a FastAPI dependency yielding a repository for ``model_type``

    Usage:
        get_user_store = typed_store_dependency(User)

        @app.get("/users/{user_id}")
        async def read_user(store: Annotated[RedisTypedStoreRepository[User], Depends(get_user_store)]):
            ...
    """

    def _get_store() -> RedisTypedStoreRepository[T]:
        return get_typed_store(model_type, prefix=prefix)

    _get_store.__name__ = f"get_{model_type.__name__.lower()}_store"
    return _get_store
