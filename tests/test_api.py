"""API tests over TestClient. Each test gets a fresh app with its own in-memory store."""

import logging

import pytest
from fastapi.testclient import TestClient

from api import main as api_main
from api.main import create_app, parse_contact_id
from contactbook.infrastructure import InMemoryContactRepository

WAHYU = {"name": "Wahyu", "email": "wahyu@example.com"}


@pytest.fixture
def repo():
    return InMemoryContactRepository()


@pytest.fixture
def client(repo):
    return TestClient(create_app(repo))


def _add(client, body=WAHYU):
    r = client.post("/api/contacts", json=body)
    assert r.status_code == 200
    return r.json()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_empty(client):
    r = client.get("/api/contacts")
    assert r.status_code == 200
    assert r.json() == {"success": True, "data": []}


def test_create_then_get(client):
    assert _add(client) == {"success": True, "message": "Contact 1 added"}

    r = client.get("/api/contacts/1")
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "data": {"id": 1, "name": "Wahyu", "email": "wahyu@example.com"},
    }


def test_list_returns_contacts_in_creation_order(client):
    _add(client, {"name": "Alice", "email": "alice@example.com"})
    _add(client, {"name": "Bob", "email": "bob@example.com"})

    r = client.get("/api/contacts")
    assert r.json() == {
        "success": True,
        "data": [
            {"id": 1, "name": "Alice", "email": "alice@example.com"},
            {"id": 2, "name": "Bob", "email": "bob@example.com"},
        ],
    }


def test_get_unknown_id_on_empty_store(client):
    r = client.get("/api/contacts/999")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not found"}


def test_update_existing_contact(client):
    _add(client, {"name": "Alice", "email": "alice@example.com"})
    _add(client)
    _add(client, {"name": "Carol", "email": "carol@example.com"})

    r = client.put("/api/contacts/2", json={"name": "Wahyu Ivan", "email": "wahyu@example.com"})
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Contact 2 updated"}

    data = client.get("/api/contacts").json()["data"]
    assert [c["id"] for c in data] == [1, 2, 3]
    assert data[1] == {"id": 2, "name": "Wahyu Ivan", "email": "wahyu@example.com"}


def test_update_on_empty_store_is_not_found(client, repo):
    r = client.put("/api/contacts/1", json=WAHYU)
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not found"}
    assert repo.count() == 0


def test_delete_existing_contact(client):
    _add(client)
    r = client.delete("/api/contacts/1")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Contact 1 removed"}

    assert client.get("/api/contacts/1").status_code == 404
    assert client.get("/api/contacts").json()["data"] == []


def test_delete_unknown_id_is_not_found(client, repo):
    _add(client)
    r = client.delete("/api/contacts/5")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not found"}
    assert repo.count() == 1


def test_id_not_reused_after_delete(client):
    assert _add(client)["message"] == "Contact 1 added"
    client.delete("/api/contacts/1")
    assert _add(client)["message"] == "Contact 2 added"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize("raw_id", ["abc", "1.5", "1_0", "0x1", "1abc"])
def test_unparseable_id_is_invalid_request(client, method, raw_id):
    _add(client)
    kwargs = {"json": WAHYU} if method == "put" else {}
    r = getattr(client, method)(f"/api/contacts/{raw_id}", **kwargs)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Invalid request"}


def test_negative_id_parses_and_is_not_found(client):
    r = client.get("/api/contacts/-1")
    assert r.status_code == 404
    assert r.json()["message"] == "Not found"


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Wahyu"},
        {"email": "wahyu@example.com"},
        {"name": 1, "email": "wahyu@example.com"},
        {"name": "Wahyu", "email": None},
        ["Wahyu", "wahyu@example.com"],
    ],
)
def test_malformed_body_is_invalid_request(client, repo, body):
    r = client.post("/api/contacts", json=body)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Invalid request"}
    assert repo.count() == 0


def test_non_json_body_is_invalid_request(client, repo):
    r = client.post(
        "/api/contacts",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Invalid request"}
    assert repo.count() == 0


def test_update_with_malformed_body_changes_nothing(client, repo):
    _add(client)
    r = client.put("/api/contacts/1", json={"name": "Only name"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request"
    assert repo.get_by_id(1).name == "Wahyu"


def test_client_supplied_id_is_ignored(client, repo):
    body = {**WAHYU, "id": 77}
    assert _add(client, body) == {"success": True, "message": "Contact 1 added"}
    assert repo.get_by_id(77) is None
    assert [c.id for c in repo.list_all()] == [1]


class _FailingRepository(InMemoryContactRepository):
    def list_all(self):
        raise RuntimeError("store exploded: secret-token-123")


def test_unhandled_error_returns_generic_envelope():
    client = TestClient(create_app(_FailingRepository()), raise_server_exceptions=False)
    r = client.get("/api/contacts")
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Internal server error"}
    assert "secret-token-123" not in r.text
    assert "RuntimeError" not in r.text


def test_email_format_not_checked(client):
    assert _add(client, {"name": "", "email": "not-an-email"})["message"] == "Contact 1 added"


def test_unknown_route_uses_envelope(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Not Found"}


def test_wrong_method_uses_envelope(client):
    r = client.patch("/api/contacts/1", json=WAHYU)
    assert r.status_code == 405
    assert r.json()["success"] is False


def test_apps_have_independent_stores():
    a = TestClient(create_app())
    b = TestClient(create_app())
    _add(a)
    assert b.get("/api/contacts").json()["data"] == []


def test_mutations_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="api.main"):
        _add(client)
        client.put("/api/contacts/1", json=WAHYU)
        client.delete("/api/contacts/1")
    messages = [rec.getMessage() for rec in caplog.records]
    assert "Contact 1 added" in messages
    assert "Contact 1 updated" in messages
    assert "Contact 1 removed" in messages


def test_openapi_document(client):
    r = client.get("/openapi.json")
    assert r.status_code == 200
    doc = r.json()
    assert doc["info"]["title"] == "Contact API"
    assert doc["info"]["version"] == "1.0.0"

    collection = doc["paths"]["/api/contacts"]
    assert set(collection) >= {"get", "post"}
    assert collection["get"]["summary"] == "Get contacts"
    assert collection["post"]["summary"] == "Add contact"

    item = doc["paths"]["/api/contacts/{contact_id}"]
    assert set(item) >= {"get", "put", "delete"}
    assert item["get"]["summary"] == "Get contact by ID"
    assert item["put"]["summary"] == "Update contact"
    assert item["delete"]["summary"] == "Remove contact"
    for op in ("get", "put", "delete"):
        assert {"400", "404"} <= set(item[op]["responses"])
        params = item[op]["parameters"]
        assert params[0]["name"] == "contact_id"
        assert params[0]["in"] == "path"
        assert params[0]["description"] == "Contact ID"
        assert params[0]["schema"]["type"] == "integer"

    schemas = doc["components"]["schemas"]
    assert set(schemas["ContactBody"]["required"]) == {"name", "email"}
    assert schemas["ContactItem"]["example"] == {
        "id": 1,
        "name": "Wahyu",
        "email": "wahyu@example.com",
    }


def test_docs_page(client):
    r = client.get("/docs")
    assert r.status_code == 200
    assert "swagger" in r.text.lower()
    assert client.get("/swagger").status_code == 404


def test_lifespan_configures_logging(monkeypatch):
    for name in ("CONTACTBOOK_HOST", "CONTACTBOOK_PORT", "CONTACTBOOK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CONTACTBOOK_LOG_LEVEL", "debug")
    monkeypatch.setattr("api.config._load_dotenv", lambda: None)
    levels = []
    monkeypatch.setattr(api_main, "configure_logging", levels.append)

    with TestClient(create_app()) as client:
        assert client.get("/health").status_code == 200
    assert levels == ["DEBUG"]


def test_parse_contact_id():
    assert parse_contact_id("1") == 1
    assert parse_contact_id("0042") == 42
    assert parse_contact_id("-3") == -3
