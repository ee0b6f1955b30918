"""Fixed-window rate limiting backed by Redis INCR + EXPIRE.

Applied as a route dependency on discount code redemption so codes cannot be
brute-forced. Key pattern: "ratelimit:{user_id}:{group}", 60s window.
"""

import logging

from fastapi import Depends
from redis.asyncio import Redis

from config.settings import settings
from src.cm_common.errors import RateLimitError
from src.cm_common.redis_client import get_redis
from src.cm_gateway.auth.dependencies import get_current_user_id

logger = logging.getLogger("cm.ratelimit")

WINDOW_SECONDS = 60


async def check_rate_limit(redis: Redis, key: str, limit: int) -> int:
    """Count one hit on key; raise RateLimitError past limit. Returns the count."""
    count = int(await redis.incr(key))
    if count == 1:
        await redis.expire(key, WINDOW_SECONDS)
    if count > limit:
        logger.warning("Rate limit exceeded for %s (%d/%d)", key, count, limit)
        raise RateLimitError()
    return count


async def limit_redemptions(
    user_id: str = Depends(get_current_user_id),
    redis: Redis = Depends(get_redis),
) -> None:
    await check_rate_limit(
        redis, f"ratelimit:{user_id}:redeem", settings.REDEEM_RATE_LIMIT_PER_MINUTE
    )
