"""Store factories."""

from typing import Optional

from redis.asyncio import ConnectionPool, Redis

from guest_signup.core.constants import AppConfig
from guest_signup.settings import Settings, StoreBackend
from guest_signup.settings import settings as default_settings
from guest_signup.store.base import InMemoryStore, Store
from guest_signup.store.redis_store import RedisStore


class RedisFactory:
    """Redis factory."""

    def __init__(self, redis_url: str) -> None:
        self.pool = ConnectionPool.from_url(
            url=redis_url,
            max_connections=AppConfig.REDIS_MAX_CONNECTIONS,
            socket_connect_timeout=AppConfig.REDIS_SOCKET_CONNECT_TIMEOUT,
            retry_on_timeout=AppConfig.REDIS_RETRY_ON_TIMEOUT,
            health_check_interval=AppConfig.REDIS_HEALTH_CHECK_INTERVAL,
            decode_responses=AppConfig.REDIS_DECODE_RESPONSES,
        )

    def get_connection(self) -> Redis:
        """Get connection."""
        return Redis(connection_pool=self.pool)

    async def close(self) -> None:
        """Close connection."""
        await self.pool.disconnect()


def create_store(
    settings: Optional[Settings] = None,
    redis_factory: Optional[RedisFactory] = None,
) -> Store:
    """Build the store selected by ``settings.store_backend``."""
    settings = settings or default_settings
    if settings.store_backend == StoreBackend.REDIS:
        factory = redis_factory or RedisFactory(str(settings.redis_url))
        return RedisStore(
            factory.get_connection(),
            namespace=AppConfig.NAME,
            ttl=settings.store_ttl,
        )
    return InMemoryStore()
