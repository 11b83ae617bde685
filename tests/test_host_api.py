"""Tests for the host routes with a scripted AS400."""

import pytest
from fastapi.testclient import TestClient

from as400_catalog.api.dependencies import get_executor
from as400_catalog.core.exceptions import RemoteConnectionError, RemoteTimeoutError
from as400_catalog.main import app


@pytest.fixture
def client(fake_executor):
    app.dependency_overrides[get_executor] = lambda: fake_executor
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_exec_returns_output(client, fake_executor):
    fake_executor.default = "hello\n"
    response = client.post("/api/v1/host/exec", json={"command": "echo hello"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["text"] == "hello\n"
    assert fake_executor.commands == ["echo hello"]


def test_empty_command_is_rejected(client, fake_executor):
    response = client.post("/api/v1/host/exec", json={"command": "   "})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_COMMAND"
    assert fake_executor.commands == []


def test_query_wraps_sql_for_db2(client, fake_executor):
    response = client.post("/api/v1/host/query", json={"sql": "SELECT 1 FROM SYSIBM.SYSDUMMY1"})
    assert response.status_code == 200
    assert fake_executor.commands == ['qsh -c "db2 \\"SELECT 1 FROM SYSIBM.SYSDUMMY1\\""']


def test_find_table_clamps_limit(client, fake_executor):
    response = client.get("/api/v1/host/tables", params={"pattern": "PAHSEW", "limit": 100000})
    assert response.status_code == 200
    assert "FETCH FIRST 1000 ROWS ONLY" in fake_executor.commands[0]
    assert "%PAHSEW%" in fake_executor.commands[0]


def test_list_and_describe_tables(client, fake_executor):
    client.get("/api/v1/host/libraries/AXA.PGMR/tables")
    client.get("/api/v1/host/libraries/AXA.PGMR/tables/PAHSEW/columns")
    assert "FETCH FIRST 500 ROWS ONLY" in fake_executor.commands[0]
    assert "QSYS2.SYSCOLUMNS" in fake_executor.commands[1]
    assert "TABLE_NAME = 'PAHSEW'" in fake_executor.commands[1]


def test_file_members_runs_cl_then_query(client, fake_executor):
    response = client.get(
        "/api/v1/host/libraries/AXA.PGMR/files/QFUENTES/members",
        params={"output_library": "QTEMP"},
    )
    assert response.status_code == 200
    assert "DSPFD FILE(AXA.PGMR/QFUENTES)" in fake_executor.commands[0]
    assert "FROM QTEMP.MBRLIST" in fake_executor.commands[1]


def test_member_listing_requires_output_library(client):
    response = client.get("/api/v1/host/libraries/AXA.PGMR/files/QFUENTES/members")
    assert response.status_code == 422


def test_read_source_member(client, fake_executor):
    fake_executor.default = "**FREE\n"
    response = client.get("/api/v1/host/libraries/AXA.PGMR/files/QFUENTES/members/SPVSPO")
    assert response.json()["data"]["text"] == "**FREE\n"
    assert "CPYTOSTMF" in fake_executor.commands[0]


def test_timeout_maps_to_gateway_timeout(client, fake_executor):
    fake_executor.responses = {"": RemoteTimeoutError(60)}
    response = client.post("/api/v1/host/exec", json={"command": "sleep 100"})
    assert response.status_code == 504
    assert response.json()["error"] == {
        "code": "REMOTE_TIMEOUT",
        "message": "Command timed out after 60s",
        "details": None,
        "field": None,
    }


def test_connection_failure_maps_to_bad_gateway(client, fake_executor):
    fake_executor.responses = {"": RemoteConnectionError("SSH error: Connection refused")}
    response = client.post("/api/v1/host/exec", json={"command": "ls"})
    assert response.status_code == 502
    assert response.json()["error"]["code"] == "REMOTE_CONNECTION_ERROR"


def test_unconfigured_host():
    app.dependency_overrides.clear()
    response = TestClient(app).post("/api/v1/host/exec", json={"command": "ls"})
    assert response.status_code == 503
    assert response.json()["error"]["code"] == "HOST_NOT_CONFIGURED"
