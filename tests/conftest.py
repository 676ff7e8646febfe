"""Shared fixtures: an app wired to an in-memory store + an async HTTP client.

Invariants:
    - Every test gets a fresh FakeDatabase; nothing touches a real MongoDB
    - The store is injected through create_app, so the lifespan never connects
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.core.config import get_settings
from catalog.main import create_app
from fake_mongo import FakeDatabase, FakeStore


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def app(fake_db):
    return create_app(store=FakeStore(fake_db))


@pytest.fixture
async def client(app):
    # raise_app_exceptions=False: let the catch-all handler's 500 reach the test
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def sample_product():
    return {
        "_id": "SKU-9001",
        "name": "Travel Adapter",
        "brand": "VoltGo",
        "price": 10.00,
        "in_stock": True,
        "categories": ["power", "accessories"],
        "specs": {"color": "grey", "plugs": ["EU", "US", "UK"]},
        "tags": ["travel"],
        "ratings": {"average": 0, "count": 0},
    }
