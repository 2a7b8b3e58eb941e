"""Redis-backed flow state store."""

from typing import Optional

from loguru import logger
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from guest_signup.core.exceptions import StoreConnectionError, StoreError


class RedisStore:
    """Store flow state in Redis, optionally namespaced and expiring.

    :param redis: Redis client instance.
    :param namespace: prefix added to every key.
    :param ttl: seconds before a written key expires, None keeps it forever.
    """

    def __init__(
        self,
        redis: Redis,
        namespace: str = "",
        ttl: Optional[int] = None,
    ) -> None:
        self.redis = redis
        self.namespace = namespace
        self.ttl = ttl

    def _key(self, key: str) -> str:
        if self.namespace:
            return f"{self.namespace}:{key}"
        return key

    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self.redis.get(self._key(key))
        except RedisConnectionError as e:
            logger.error(f"Redis connection failed reading '{key}': {e!s}")
            raise StoreConnectionError(str(e)) from e
        except RedisError as e:
            logger.error(f"Redis get failed for '{key}': {e!s}")
            raise StoreError(str(e)) from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            if self.ttl:
                await self.redis.setex(self._key(key), self.ttl, value)
            else:
                await self.redis.set(self._key(key), value)
        except RedisConnectionError as e:
            logger.error(f"Redis connection failed writing '{key}': {e!s}")
            raise StoreConnectionError(str(e)) from e
        except RedisError as e:
            logger.error(f"Redis set failed for '{key}': {e!s}")
            raise StoreError(str(e)) from e

    async def delete(self, key: str) -> None:
        try:
            await self.redis.delete(self._key(key))
        except RedisConnectionError as e:
            logger.error(f"Redis connection failed deleting '{key}': {e!s}")
            raise StoreConnectionError(str(e)) from e
        except RedisError as e:
            logger.error(f"Redis delete failed for '{key}': {e!s}")
            raise StoreError(str(e)) from e
