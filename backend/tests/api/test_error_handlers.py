"""Error handling and wiring - catch-all 500, missing store, lifespan startup.

Invariants:
    - A store fault on any route becomes a 500 envelope with no internal details
    - get_name_store refuses to run before the lifespan built a store
    - The lifespan seeds app.state.name_store from settings
    - A 500 passes through CORS like any other response
"""

import logging
import random
from types import SimpleNamespace

import pytest

from pickstream.api.dependencies import get_name_store
from pickstream.core.name_store import NameStore
from pickstream.main import app, lifespan


class _BrokenRandom(random.Random):
    def randrange(self, *args, **kwargs):
        raise RuntimeError("entropy source exploded: secret detail")


async def test_random_source_fault_returns_500(make_client):
    store = NameStore(["Alice"], rng=_BrokenRandom())
    async with make_client(store) as c:
        res = await c.get("/api/random-name")

    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "An unexpected error occurred"
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "secret detail" not in res.text


async def test_internal_error_response_carries_cors_header(make_client):
    store = NameStore(["Alice"], rng=_BrokenRandom())
    async with make_client(store) as c:
        res = await c.get(
            "/api/random-name", headers={"Origin": "http://frontend.example"},
        )

    assert res.status_code == 500
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"


async def test_internal_error_does_not_escape_the_app(client, store):
    store._rng = _BrokenRandom()
    res = await client.get("/api/random-name")
    assert res.status_code == 500


async def test_fault_on_other_route_uses_same_handler(make_client):
    class _BrokenStore(NameStore):
        def snapshot(self):
            raise RuntimeError("boom")

    async with make_client(_BrokenStore(["Alice"])) as c:
        res = await c.get("/api/names")

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"


def test_get_name_store_requires_startup():
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))
    with pytest.raises(RuntimeError, match="not initialized"):
        get_name_store(request)


def test_get_name_store_returns_app_owned_store():
    store = NameStore()
    request = SimpleNamespace(
        app=SimpleNamespace(state=SimpleNamespace(name_store=store)),
    )
    assert get_name_store(request) is store


async def test_lifespan_builds_seeded_store():
    async with lifespan(app):
        store = app.state.name_store
        assert isinstance(store, NameStore)
        assert store.count() == 10
        assert store.list_all()[0] == "Alice"
    del app.state.name_store


async def test_lifespan_detaches_its_log_handler_on_shutdown():
    before = list(logging.getLogger().handlers)
    async with lifespan(app):
        assert len(logging.getLogger().handlers) == len(before) + 1
    del app.state.name_store
    assert logging.getLogger().handlers == before
