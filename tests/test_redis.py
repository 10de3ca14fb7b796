"""Tests for the optional Redis client (src/checkinn/core/redis.py)."""

from unittest.mock import MagicMock

import pytest

from src.checkinn.core import redis as redis_module
from src.checkinn.core.redis import close_redis, get_redis, reset_redis_state

pytestmark = pytest.mark.unit


@pytest.fixture
def no_redis_url(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = MagicMock()
    settings.redis_url = None
    monkeypatch.setattr(redis_module, "get_settings", lambda: settings)
    reset_redis_state()
    yield
    reset_redis_state()


class TestGetRedis:
    async def test_returns_none_when_not_configured(self, no_redis_url: None) -> None:
        assert await get_redis() is None

    async def test_does_not_retry_after_initial_attempt(self, no_redis_url: None) -> None:
        """After the first attempt, later calls return None without reconnecting."""
        assert await get_redis() is None
        assert await get_redis() is None

        assert redis_module._connection_attempted is True
        assert redis_module._redis is None

    def test_reset_clears_state(self) -> None:
        redis_module._connection_attempted = True
        redis_module._redis = "dummy"  # type: ignore[assignment]
        redis_module._pool = "dummy"  # type: ignore[assignment]

        reset_redis_state()

        assert redis_module._connection_attempted is False
        assert redis_module._redis is None
        assert redis_module._pool is None


class TestCloseRedis:
    async def test_close_when_not_connected(self, no_redis_url: None) -> None:
        await close_redis()

        assert redis_module._redis is None
        assert redis_module._pool is None
        assert redis_module._connection_attempted is False

    async def test_close_resets_connection_attempted(self, no_redis_url: None) -> None:
        await get_redis()
        assert redis_module._connection_attempted is True

        await close_redis()

        assert redis_module._connection_attempted is False


class TestRedisFixtures:
    async def test_mock_redis_is_patched_in(self, mock_redis) -> None:
        assert await redis_module.get_redis() is mock_redis

    async def test_mock_redis_unavailable(self, mock_redis_unavailable: None) -> None:
        assert await redis_module.get_redis() is None
