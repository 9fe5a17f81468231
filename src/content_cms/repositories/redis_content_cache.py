"""Redis implementation of ContentCache.

Plain string keys with per-key expiry. It's the default implementation and
satisfies the ContentCache protocol.
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from content_cms.config import get_redis_client

logger = logging.getLogger(__name__)


class RedisContentCache:
    """Redis key-value cache adapter.

    This class satisfies the ContentCache protocol through structural
    typing - no explicit inheritance needed.

    The client must be created with ``decode_responses=True`` so that
    ``get`` returns ``str``.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis cache.

        Args:
            redis_client: Async Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls) -> "RedisContentCache":
        """Factory method to create RedisContentCache with defaults."""
        return cls()

    async def get(self, key: str) -> str | None:
        return await self._client.get(key)

    async def set_with_expiry(self, key: str, value: str, ttl_seconds: int) -> None:
        await self._client.setex(key, ttl_seconds, value)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except RedisError:
            logger.warning("Redis ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
