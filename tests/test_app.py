import pytest
from fastapi.testclient import TestClient

from app import create_app
from conftest import BASE_URL, FakeResponse, FakeSession
from core.config import ApiContext
from tools.engine import DispatchEngine


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine))


def test_root_and_health(client):
    root = client.get("/")
    assert root.status_code == 200
    assert root.json()["ok"] is True

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["ok"] is True


def test_tools_listing(client):
    tools = client.get("/tools").json()["tools"]
    assert len(tools) == 32
    assert tools[0]["name"] == "get_user"
    assert "inputSchema" in tools[0]


def test_call_tool_success(context):
    session = FakeSession(FakeResponse(200, {"id": "u1"}))
    client = TestClient(create_app(DispatchEngine(context, session=session)))

    r = client.post("/call-tool", json={"toolName": "get_user", "args": {}})
    assert r.status_code == 200
    assert r.json() == {"success": True, "result": {"id": "u1"}}
    assert session.calls[0]["url"] == f"{BASE_URL}/user"


@pytest.mark.parametrize(
    "body",
    [
        {"args": {}},
        {"toolName": "get_user"},
        {"toolName": "get_user", "args": "x"},
        {"toolName": "", "args": {}},
        {"toolName": 5, "args": {}},
        [1, 2],
    ],
)
def test_call_tool_requires_name_and_args(client, session, body):
    r = client.post("/call-tool", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "toolName and args are required"}
    assert session.calls == []


def test_call_tool_rejects_non_json_body(client, session):
    r = client.post("/call-tool", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "toolName and args are required"}
    assert session.calls == []


def test_call_tool_unknown_tool(client):
    r = client.post("/call-tool", json={"toolName": "nonexistent_tool", "args": {}})
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["kind"] == "unknown_tool"


def test_call_tool_validation_error(client, session):
    r = client.post("/call-tool", json={"toolName": "delete_assistant", "args": {}})
    assert r.status_code == 400
    assert r.json()["error"]["kind"] == "validation_error"
    assert session.calls == []


def test_call_tool_upstream_error(context):
    session = FakeSession(FakeResponse(404, reason="Not Found", text="not found"))
    client = TestClient(create_app(DispatchEngine(context, session=session)))

    r = client.post("/call-tool", json={"toolName": "delete_assistant", "args": {"assistant_id": "a1"}})
    assert r.status_code == 502
    error = r.json()["error"]
    assert error["kind"] == "upstream_error"
    assert error["details"]["status"] == 404
    assert error["details"]["body"] == "not found"


def test_call_tool_without_api_key():
    client = TestClient(create_app(DispatchEngine(ApiContext(api_key=None, base_url=BASE_URL), session=FakeSession())))
    r = client.post("/call-tool", json={"toolName": "get_user", "args": {}})
    assert r.status_code == 500
    assert r.json()["error"]["kind"] == "configuration_error"
