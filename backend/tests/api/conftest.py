"""API test fixtures - FastAPI test client over a temporary file store.

Invariants:
    - Every test gets a fresh JsonFileStore in tmp_path
    - get_store dependency overridden; the lifespan is not run
    - broken_client serves the app over a store whose every call fails

Design Decisions:
    - Real file store instead of a mock: route tests exercise the full path to disk
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ecowatch.core.errors import StorageError
from ecowatch.infrastructure.file_store import JsonFileStore
from ecowatch.infrastructure.storage import get_store
from ecowatch.main import app


class BrokenStore:
    """RecordStore whose backend is unreachable."""
    backend_name = "broken"

    async def _fail(self, *args, **kwargs):
        raise StorageError("backend unreachable", "execute")

    list_all = get = insert = update_status = delete = ping = _fail

    async def close(self):
        pass


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "data")


async def _client_for(store):
    app.dependency_overrides[get_store] = lambda: store
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(store):
    """FastAPI test client with storage overridden."""
    async with await _client_for(store) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client():
    async with await _client_for(BrokenStore()) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def created_report(client):
    res = await client.post("/api/reports", json={
        "type": "spill", "location": "River X", "description": "oil sheen",
    })
    assert res.status_code == 201
    return res.json()["report"]
