"""API test fixtures - FastAPI test client over a fresh NameStore per test.

Invariants:
    - Every test gets its own NameStore seeded with the ten defaults
    - get_name_store dependency overridden; the lifespan is not run

Design Decisions:
    - httpx ASGITransport: drives the ASGI app in-process, no server needed
    - make_client turns off raise_app_exceptions, so the catch-all
      middleware's 500 response is returned rather than raised
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pickstream.api.dependencies import get_name_store
from pickstream.core.domain_types import DEFAULT_NAMES
from pickstream.core.name_store import NameStore
from pickstream.main import app


@pytest.fixture
def store():
    return NameStore(DEFAULT_NAMES)


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_name_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def make_client():
    """Build a client around an arbitrary store, app errors rendered not raised."""
    def _make(custom_store: NameStore) -> AsyncClient:
        app.dependency_overrides[get_name_store] = lambda: custom_store
        return AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        )

    yield _make
    app.dependency_overrides.clear()
