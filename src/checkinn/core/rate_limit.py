"""Rate limiting.

Two layers:
1. Global middleware: per-IP token bucket applied to every request (flood protection).
2. Endpoint decorators: slowapi limits on login, registration and the public
   application-status lookup (abuse prevention).

Both are disabled when APP_ENV=testing.
"""

import asyncio
import time
from collections import defaultdict

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from src.checkinn.core.config import get_settings
from src.checkinn.core.logging import get_logger

logger = get_logger(__name__)

EXEMPT_PATHS = ("/health", "/metrics", "/docs", "/openapi.json", "/redoc")

_rate_limit_buckets: dict[str, dict[str, float]] = defaultdict(dict)
_rate_limit_lock = asyncio.Lock()


def get_rate_limit_key(request: Request) -> str:
    """Key rate limits on client IP only.

    Never mix user-controlled headers into the key: rotating them would mint
    a fresh bucket per request.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the slowapi limiter, backed by Redis when REDIS_URL is set."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    if settings.redis_url:
        logger.info("Rate limiter using Redis backend")
        return Limiter(key_func=get_rate_limit_key, storage_uri=settings.redis_url)

    logger.info("Rate limiter using in-memory backend (not distributed)")
    return Limiter(key_func=get_rate_limit_key)


# Reads settings at import time; reconfiguring requires a restart.
limiter = create_limiter()


async def _check_in_memory_rate_limit(client_ip: str) -> bool:
    """Token bucket check. Returns True if the request is allowed."""
    settings = get_settings()
    rate = settings.global_rate_limit_per_second
    burst = settings.global_rate_limit_burst
    now = time.time()

    async with _rate_limit_lock:
        if client_ip not in _rate_limit_buckets:
            _rate_limit_buckets[client_ip] = {"tokens": float(burst), "last_update": now}

        bucket = _rate_limit_buckets[client_ip]
        elapsed = now - bucket["last_update"]
        bucket["tokens"] = min(burst, bucket["tokens"] + elapsed * rate)
        bucket["last_update"] = now

        if bucket["tokens"] >= 1:
            bucket["tokens"] -= 1
            return True
        return False


async def global_rate_limit_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Reject clients that exceed the global per-IP request rate with 429."""
    if request.url.path in EXEMPT_PATHS or get_settings().app_env == "testing":
        return await call_next(request)

    client_ip = get_rate_limit_key(request)
    if not await _check_in_memory_rate_limit(client_ip):
        logger.warning("Global rate limit exceeded", client_ip=client_ip, path=request.url.path)
        return JSONResponse(
            status_code=429,
            content={
                "success": False,
                "message": "Too many requests. Please slow down.",
                "retry_after": 1,
            },
            headers={"Retry-After": "1"},
        )

    return await call_next(request)
