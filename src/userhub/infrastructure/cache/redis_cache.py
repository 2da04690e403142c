"""Optional Redis key-value client.

The cache is best-effort: a failed connection is logged and leaves the
client disconnected, and the rest of the application keeps working.
"""

import asyncio
import logging
from datetime import timedelta

from redis.asyncio import Redis
from redis.exceptions import RedisError

from userhub_config.settings import Settings

logger = logging.getLogger(__name__)

PING_TIMEOUT_SECONDS = 5.0


class CacheUnavailableError(RuntimeError):
    """Raised when a cache operation is attempted while disconnected."""


class RedisCache:
    """Thin async wrapper around a Redis connection.

    Examples
    --------
    >>> cache = RedisCache.from_settings(settings)
    >>> await cache.connect()
    >>> await cache.set("greeting", "hello", expire=timedelta(minutes=5))
    >>> await cache.get("greeting")
    'hello'
    """

    def __init__(self, client: Redis):
        self._client = client
        self._connected = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisCache":
        password = (
            settings.redis_password.get_secret_value()
            if settings.redis_password
            else None
        )
        client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            password=password or None,
            db=settings.redis_db,
            decode_responses=True,
        )
        return cls(client)

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> bool:
        """Ping the server and remember whether it answered.

        Returns
        -------
        True if the server is reachable
        """
        self._connected = await self.ping()
        if self._connected:
            logger.info("Connected to Redis")
        else:
            logger.warning("Redis unavailable, continuing without cache")
        return self._connected

    async def ping(self) -> bool:
        try:
            return bool(
                await asyncio.wait_for(self._client.ping(), PING_TIMEOUT_SECONDS),
            )
        except (RedisError, OSError, asyncio.TimeoutError) as e:
            logger.warning("Redis ping failed: %s", e)
            return False

    async def close(self) -> None:
        await self._client.aclose()
        self._connected = False

    async def get(self, key: str) -> str | None:
        self._ensure_connected()
        return await self._client.get(key)

    async def set(
        self,
        key: str,
        value: str,
        expire: timedelta | None = None,
    ) -> None:
        self._ensure_connected()
        await self._client.set(key, value, ex=expire)

    async def delete(self, *keys: str) -> int:
        self._ensure_connected()
        if not keys:
            return 0
        return await self._client.delete(*keys)

    async def exists(self, *keys: str) -> int:
        """Return how many of the given keys exist."""
        self._ensure_connected()
        if not keys:
            return 0
        return await self._client.exists(*keys)

    def _ensure_connected(self) -> None:
        if not self._connected:
            msg = "Redis cache is not connected"
            raise CacheUnavailableError(msg)
