"""Refresh-token blacklist backed by Redis.

The database stays authoritative for revocation; the blacklist only lets
revoked tokens be rejected without a row lock.
"""

from src.checkinn.core.redis import get_redis

PREFIX_TOKEN_BLACKLIST = "checkinn:token_blacklist"


async def blacklist_token(token_hash: str, ttl: int) -> bool:
    """Add a revoked token hash to the blacklist.

    Returns:
        True if stored in Redis, False if Redis is unavailable.
    """
    redis = await get_redis()
    if not redis:
        return False
    await redis.setex(f"{PREFIX_TOKEN_BLACKLIST}:{token_hash}", ttl, "1")
    return True


async def is_token_blacklisted(token_hash: str) -> bool | None:
    """Check whether a token hash is blacklisted.

    Returns:
        True if blacklisted, False if Redis confirmed it is not,
        None if Redis is unavailable (caller must check the database).
    """
    redis = await get_redis()
    if not redis:
        return None
    result = await redis.get(f"{PREFIX_TOKEN_BLACKLIST}:{token_hash}")
    return result is not None


async def blacklist_tokens(token_hashes: list[str], ttl: int) -> int:
    """Blacklist every token of a user, e.g. when an admin suspends the account.

    Returns:
        Number of hashes written (0 if Redis is unavailable).
    """
    redis = await get_redis()
    if not redis or not token_hashes:
        return 0

    pipe = redis.pipeline()
    for token_hash in token_hashes:
        pipe.setex(f"{PREFIX_TOKEN_BLACKLIST}:{token_hash}", ttl, "1")
    await pipe.execute()
    return len(token_hashes)
