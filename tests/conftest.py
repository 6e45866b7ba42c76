"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides in-memory Redis, product store, and HTTP client fixtures.

Redis is replaced by fakeredis. Async tests run on the anyio plugin with
the asyncio backend.

==============================================================================
"""

from decimal import Decimal
from typing import Generator

import fakeredis
import pytest
from fastapi.testclient import TestClient

from catalog_api.catalog import Product, RedisProductStore
from catalog_api.db.connection import RedisManager
from catalog_api.main import app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


# ============================================================================
# REDIS FIXTURES
# ============================================================================

@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    """A fresh, empty in-memory Redis server."""
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server: fakeredis.FakeServer) -> fakeredis.FakeAsyncRedis:
    """Async client on the in-memory server."""
    return fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def store(redis_client: fakeredis.FakeAsyncRedis) -> RedisProductStore:
    """Product store on an empty hash."""
    return RedisProductStore(redis_client)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def pixel() -> Product:
    """A product that is not part of the seed catalog."""
    return Product(
        name="Pixel 8",
        summary="Google phone",
        description="Seventh-generation Tensor phone.",
        image_file="product-7.png",
        price=Decimal("599.00"),
        category="Smart Phone",
    )


# ============================================================================
# HTTP FIXTURES
# ============================================================================

@pytest.fixture
def client(redis_server: fakeredis.FakeServer) -> Generator[TestClient, None, None]:
    """
    Test client with the full lifespan running against fake Redis.
    
    The catalog is seeded on startup like in production.
    """
    RedisManager().use_client(
        fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True)
    )
    
    with TestClient(app) as test_client:
        yield test_client
