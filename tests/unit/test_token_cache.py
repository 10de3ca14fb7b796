"""Tests for the refresh-token blacklist (src/checkinn/core/cache.py)."""

import pytest
from redis.asyncio import Redis

from src.checkinn.core.cache import (
    PREFIX_TOKEN_BLACKLIST,
    blacklist_token,
    blacklist_tokens,
    is_token_blacklisted,
)

pytestmark = pytest.mark.unit


class TestBlacklistToken:
    async def test_blacklist_token_success(self, mock_redis: Redis) -> None:
        """blacklist_token() stores the hash and returns True."""
        result = await blacklist_token("abc123hash", 3600)

        assert result is True
        assert await mock_redis.get(f"{PREFIX_TOKEN_BLACKLIST}:abc123hash") == "1"

    async def test_blacklist_token_respects_ttl(self, mock_redis: Redis) -> None:
        await blacklist_token("ttl_test_hash", 7200)

        actual_ttl = await mock_redis.ttl(f"{PREFIX_TOKEN_BLACKLIST}:ttl_test_hash")
        assert 0 < actual_ttl <= 7200

    async def test_returns_false_when_redis_unavailable(self, mock_redis_unavailable: None) -> None:
        assert await blacklist_token("some_hash", 3600) is False


class TestIsTokenBlacklisted:
    async def test_true_for_blacklisted(self, mock_redis: Redis) -> None:
        await blacklist_token("blacklisted_token", 3600)

        assert await is_token_blacklisted("blacklisted_token") is True

    async def test_false_for_unknown(self, mock_redis: Redis) -> None:
        assert await is_token_blacklisted("non_existent_token") is False

    async def test_none_when_redis_unavailable(self, mock_redis_unavailable: None) -> None:
        """None tells the caller to fall back to the database."""
        assert await is_token_blacklisted("any_token") is None


class TestBlacklistTokens:
    async def test_blacklists_every_hash(self, mock_redis: Redis) -> None:
        hashes = ["hash_a", "hash_b", "hash_c"]

        count = await blacklist_tokens(hashes, 3600)

        assert count == 3
        for token_hash in hashes:
            assert await is_token_blacklisted(token_hash) is True

    async def test_empty_list_is_noop(self, mock_redis: Redis) -> None:
        assert await blacklist_tokens([], 3600) == 0

    async def test_zero_when_redis_unavailable(self, mock_redis_unavailable: None) -> None:
        assert await blacklist_tokens(["hash_a"], 3600) == 0
