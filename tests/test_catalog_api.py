"""Tests for the catalog routes against an in-memory catalog."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from as400_catalog.api.dependencies import get_db, get_executor
from as400_catalog.db.base import init_db
from as400_catalog.main import app
from tests.helpers import memory_engine

EXPORTS = "SPVSPO_GETCUOTA\nSPVSPO_UPDCUOTA\nSPVSPO_CALCULA\n"
SOURCE = "// SPVSPO_getCuota : Returns the pending fee\nctl-opt nomain;\n"


@pytest.fixture
def client(fake_executor):
    engine = memory_engine()
    factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        await init_db(bind=engine)
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fake_executor.responses = {"PROGRAM_EXPORT_IMPORT_INFO": EXPORTS, "CPYTOSTMF": SOURCE}
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_executor] = lambda: fake_executor
    with TestClient(app) as test_client:
        yield test_client
        test_client.portal.call(engine.dispose)
    app.dependency_overrides.clear()


def procedures(client):
    response = client.get("/api/v1/catalog", params={"library": "AXA.PGMR", "srvpgm_name": "SPVSPO"})
    return {p["method_name"]: p["description"] for p in response.json()["data"]["procedures"]}


def test_health(client):
    body = client.get("/health").json()
    assert body["success"] is True
    assert body["data"]["database"] == "connected"


def test_empty_catalog(client):
    data = client.get("/api/v1/catalog").json()["data"]
    assert data == {"service_programs": [], "procedures": [], "total": 0}


def test_sync_then_fill_from_source_then_names(client):
    response = client.post("/api/v1/catalog/AXA.PGMR/SPVSPO/sync")
    assert response.json()["data"] == {"library": "AXA.PGMR", "srvpgm_name": "SPVSPO", "count": 3}

    response = client.post("/api/v1/catalog/AXA.PGMR/SPVSPO/fill-from-source")
    assert response.json()["data"]["count"] == 1

    response = client.post("/api/v1/catalog/fill-from-names")
    assert response.json()["data"] == [
        {"library": "AXA.PGMR", "srvpgm_name": "SPVSPO", "count": 2, "error": None}
    ]
    assert procedures(client) == {
        "SPVSPO_CALCULA": "calcula",
        "SPVSPO_GETCUOTA": "Returns the pending fee",
        "SPVSPO_UPDCUOTA": "Actualiza cuota",
    }

    listing = client.get("/api/v1/catalog").json()["data"]
    assert [s["name"] for s in listing["service_programs"]] == ["SPVSPO"]
    assert listing["service_programs"][0]["source_file"] == "QFUENTES"

    found = client.get("/api/v1/catalog", params={"pattern": "fee"}).json()["data"]
    assert [p["method_name"] for p in found["procedures"]] == ["SPVSPO_GETCUOTA"]


def test_fill_from_text_and_shorten(client):
    client.post("/api/v1/catalog/AXA.PGMR/SPVSPO/sync")
    text = "// -------- // SPVSPO_updCuota(): stores the fee // v2\ndcl-proc updCuota export;\n"
    response = client.post(
        "/api/v1/catalog/AXA.PGMR/SPVSPO/fill-from-text", json={"source_text": text}
    )
    assert response.json()["data"]["count"] == 1
    assert procedures(client)["SPVSPO_UPDCUOTA"] == "stores the fee"

    response = client.post("/api/v1/catalog/shorten")
    assert response.json()["data"] == {"updated": 0}


def test_fill_from_source_all(client):
    client.post("/api/v1/catalog/AXA.PGMR/SPVSPO/sync")
    response = client.post("/api/v1/catalog/fill-from-source")
    assert response.json()["data"] == [
        {"library": "AXA.PGMR", "srvpgm_name": "SPVSPO", "count": 1, "error": None}
    ]


def test_fill_unknown_service_program(client):
    response = client.post("/api/v1/catalog/AXA.PGMR/NOPE/fill-from-source")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SERVICE_PROGRAM_NOT_FOUND"


def test_clear(client):
    client.post("/api/v1/catalog/AXA.PGMR/SPVSPO/sync")
    response = client.delete("/api/v1/catalog")
    assert response.json()["data"] == {"message": "Catalog cleared"}
    assert client.get("/api/v1/catalog").json()["data"]["total"] == 0
