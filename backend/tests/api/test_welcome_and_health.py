"""Root welcome page and health probes."""

from httpx import ASGITransport, AsyncClient

import shelter_api.infrastructure.database as db_module


async def test_root_serves_welcome_fragment(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "<h2>Lambda Shelter API</h>" in res.text
    assert "Welcome to the Lambda Shelter API" in res.text


async def test_liveness_probe(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "Lambda Shelter API"


async def test_readiness_without_database_is_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_uninitialized_database_hits_catch_all(monkeypatch):
    """Default SQL providers without init_db -> generic 500, no internals."""
    from shelter_api.main import create_app

    monkeypatch.setattr(db_module, "db_manager", None)
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/adopters")
    assert res.status_code == 500
    assert res.json() == {"message": "An unexpected error occurred"}


async def test_welcome_page_ignores_service_name(client, monkeypatch):
    from shelter_api.config import get_settings

    monkeypatch.setenv("SERVICE_NAME", "Renamed Service")
    get_settings.cache_clear()
    try:
        res = await client.get("/")
    finally:
        get_settings.cache_clear()
    assert "<h2>Lambda Shelter API</h>" in res.text
    assert "Renamed Service" not in res.text
