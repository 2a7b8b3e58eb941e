from unittest.mock import AsyncMock

import pytest
from fakeredis.aioredis import FakeRedis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from guest_signup.core.exceptions import StoreConnectionError, StoreError
from guest_signup.store import RedisStore, read_json, write_json


@pytest.mark.anyio
async def test_redis_store_round_trip(fake_redis_client: FakeRedis) -> None:
    store = RedisStore(fake_redis_client, namespace="guest-signup")

    await store.set("otp_method", "email")

    assert await store.get("otp_method") == "email"
    raw = await fake_redis_client.get("guest-signup:otp_method")
    assert raw in ("email", b"email")

    await store.delete("otp_method")
    assert await store.get("otp_method") is None


@pytest.mark.anyio
async def test_redis_store_ttl(fake_redis_client: FakeRedis) -> None:
    store = RedisStore(fake_redis_client, ttl=600)

    await store.set("registration_data", "{}")

    ttl = await fake_redis_client.ttl("registration_data")
    assert 0 < ttl <= 600


@pytest.mark.anyio
async def test_redis_store_with_json_helpers(fake_redis_client: FakeRedis) -> None:
    store = RedisStore(fake_redis_client)

    assert await write_json(store, "registration_data", {"phone": "(050) - 1234"})
    assert await read_json(store, "registration_data") == {"phone": "(050) - 1234"}


@pytest.mark.anyio
async def test_redis_connection_failure() -> None:
    redis = AsyncMock()
    redis.get.side_effect = RedisConnectionError("refused")
    store = RedisStore(redis)

    with pytest.raises(StoreConnectionError):
        await store.get("otp_method")


@pytest.mark.anyio
async def test_redis_command_failure() -> None:
    redis = AsyncMock()
    redis.set.side_effect = ResponseError("WRONGTYPE")
    redis.delete.side_effect = ResponseError("WRONGTYPE")
    store = RedisStore(redis)

    with pytest.raises(StoreError):
        await store.set("otp_method", "email")
    with pytest.raises(StoreError):
        await store.delete("otp_method")
