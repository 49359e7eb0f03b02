"""
Test Configuration Module
"""

import logging
from datetime import timedelta
from typing import Optional

import pytest
from redis.exceptions import ResponseError

from redis_repository.config import get_settings


class FakeRedis:
    """
    In-memory stand-in for ``redis.asyncio.Redis``

    Implements the handful of commands typed stores use, with Redis reply
    semantics, a manual clock for expiry and a log of issued commands.
    """

    def __init__(self):
        self.data: dict[str, str] = {}
        self.expires_at: dict[str, float] = {}
        self.now_ms: float = 0.0
        self.calls: list[tuple] = []

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward"""
        self.now_ms += delta.total_seconds() * 1000

    def _purge(self, name: str) -> None:
        deadline = self.expires_at.get(name)
        if deadline is not None and deadline <= self.now_ms:
            self.data.pop(name, None)
            self.expires_at.pop(name, None)

    async def set(self, name: str, value: str, px: Optional[int] = None):
        self.calls.append(("set", name, value, px))
        if px is not None and px <= 0:
            raise ResponseError("invalid expire time in 'set' command")
        self.data[name] = value
        if px is None:
            self.expires_at.pop(name, None)
        else:
            self.expires_at[name] = self.now_ms + px
        return True

    async def get(self, name: str):
        self.calls.append(("get", name))
        self._purge(name)
        return self.data.get(name)

    async def exists(self, *names: str) -> int:
        self.calls.append(("exists",) + names)
        count = 0
        for name in names:
            self._purge(name)
            if name in self.data:
                count += 1
        return count

    async def delete(self, *names: str) -> int:
        self.calls.append(("delete",) + names)
        count = 0
        for name in names:
            self._purge(name)
            if name in self.data:
                del self.data[name]
                self.expires_at.pop(name, None)
                count += 1
        return count

    async def pexpire(self, name: str, time: int) -> bool:
        self.calls.append(("pexpire", name, time))
        self._purge(name)
        if name not in self.data:
            return False
        if time <= 0:
            del self.data[name]
            self.expires_at.pop(name, None)
        else:
            self.expires_at[name] = self.now_ms + time
        return True

    async def pttl(self, name: str) -> int:
        self.calls.append(("pttl", name))
        self._purge(name)
        if name not in self.data:
            return -2
        deadline = self.expires_at.get(name)
        if deadline is None:
            return -1
        return int(deadline - self.now_ms)

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        return None


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Fresh in-memory Redis replacement"""
    return FakeRedis()


@pytest.fixture
def store_logger() -> logging.Logger:
    """Logger injected into repositories under test"""
    return logging.getLogger("tests.typed_store")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read configuration from its own environment"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
