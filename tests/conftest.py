from typing import Any, AsyncGenerator, Dict

import pytest
from fakeredis import FakeServer
from fakeredis.aioredis import FakeConnection, FakeRedis
from httpx import ASGITransport, AsyncClient
from redis.asyncio import ConnectionPool

from guest_signup.api import RegistrationApiClient
from guest_signup.flow import HistoryNavigator, NotificationCenter
from guest_signup.store import InMemoryStore
from tests.backend import BACKEND_URL, MockBackend


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """
    Backend for anyio pytest plugin.

    :return: backend name.
    """
    return "asyncio"


@pytest.fixture
async def fake_redis_client() -> AsyncGenerator[FakeRedis, None]:
    """
    Get instance of a fake redis client.

    :yield: FakeRedis instance.
    """
    server = FakeServer()
    server.connected = True
    client = FakeRedis(
        connection_pool=ConnectionPool(connection_class=FakeConnection, server=server),
    )
    await client.flushall()

    yield client

    await client.close()


@pytest.fixture
def mock_backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
async def api_client(
    mock_backend: MockBackend,
) -> AsyncGenerator[RegistrationApiClient, None]:
    """
    Registration client wired to the mock backend.

    :param mock_backend: the backend.
    :yield: client for the backend.
    """
    transport = ASGITransport(app=mock_backend.build_app())
    async with AsyncClient(transport=transport, base_url=BACKEND_URL) as http_client:
        yield RegistrationApiClient(BACKEND_URL, http_client=http_client)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def navigator() -> HistoryNavigator:
    return HistoryNavigator()


@pytest.fixture
def notifier() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def registration_data() -> Dict[str, Any]:
    """Form values that pass validation."""
    return {
        "firstName": "Layla",
        "lastName": "Haddad",
        "gender": "female",
        "country": "ae",
        "email": "layla.haddad@example.com",
        "phone": "(050) - 1234",
        "acceptTerms": True,
    }
