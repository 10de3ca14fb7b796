"""Optional Redis connection with graceful fallback.

Redis only backs the refresh-token blacklist and the distributed rate limiter.
When it is not configured or unreachable, callers degrade to the database or
to in-memory state.
"""

from redis.asyncio import ConnectionPool, Redis

from src.checkinn.core.config import get_settings
from src.checkinn.core.logging import get_logger

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_redis: Redis | None = None
_connection_attempted: bool = False


async def get_redis() -> Redis | None:
    """Get the Redis client, or None when it is unavailable.

    The connection is created lazily on first call. A failed attempt is not
    retried until close_redis() or reset_redis_state() is called.
    """
    global _pool, _redis, _connection_attempted

    # Reuse the live client
    if _redis is not None:
        return _redis

    # Already tried and failed, no retry until close_redis()
    if _connection_attempted:
        return None

    _connection_attempted = True
    settings = get_settings()

    # No Redis URL configured
    if not settings.redis_url:
        logger.info("Redis not configured (REDIS_URL not set)")
        return None

    try:
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=settings.redis_pool_size,
            decode_responses=True,  # Return strings instead of bytes
        )
        _redis = Redis(connection_pool=_pool)

        # Test connection
        await _redis.ping()  # type: ignore[misc]
        logger.info("Redis connected successfully")
        return _redis
    except Exception as e:
        logger.warning("Redis connection failed, falling back to non-Redis mode", error=str(e))
        # Clean up partial initialization
        if _redis:
            await _redis.aclose()
            _redis = None
        if _pool:
            await _pool.disconnect()
            _pool = None
        return None


async def close_redis() -> None:
    """Close the Redis pool. Called during application shutdown."""
    global _pool, _redis, _connection_attempted

    if _redis:
        await _redis.aclose()
        logger.info("Redis connection closed")
    if _pool:
        await _pool.disconnect()

    _redis = None
    _pool = None
    _connection_attempted = False


def reset_redis_state() -> None:
    """Forget the cached client so tests can reinitialize the connection."""
    global _pool, _redis, _connection_attempted
    _redis = None
    _pool = None
    _connection_attempted = False
