import pytest
from fastapi.testclient import TestClient

from expense_tracker.core.config import Config
from expense_tracker.core.db import DatabaseSessionManager
from expense_tracker.main import create_app


def make_client(db_url: str, **overrides) -> TestClient:
    settings = Config(DB_URL=db_url, **overrides)
    return TestClient(create_app(settings))


@pytest.fixture
def client(db_url):
    with make_client(db_url) as client:
        yield client


class TestExpensesAPI:
    """Tests for the HTTP surface over the state holder."""

    def test_list_starts_empty(self, client):
        response = client.get("/expenses/")

        assert response.status_code == 200
        assert response.json() == []

    def test_add_returns_refreshed_list(self, client):
        response = client.post("/expenses/", json={"title": "Coffee", "amount": "3.5"})

        assert response.status_code == 200
        (expense,) = response.json()
        assert expense["title"] == "Coffee"
        assert expense["amount"] == 3.5
        assert expense["id"] > 0

        assert client.get("/expenses/").json() == response.json()

    def test_malformed_amount_is_stored_as_zero(self, client):
        response = client.post("/expenses/", json={"title": "Gift", "amount": "lots"})

        assert response.status_code == 200
        assert response.json()[0]["amount"] == 0.0

    def test_missing_fields_default_to_empty(self, client):
        response = client.post("/expenses/", json={})

        assert response.status_code == 200
        assert response.json()[0]["title"] == ""
        assert response.json()[0]["amount"] == 0.0

    def test_bad_payload_is_reported(self, client):
        response = client.post("/expenses/", json={"title": ["not", "text"]})

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Validation failed"

    def test_strict_amounts_rejects_malformed_input(self, db_url):
        with make_client(db_url, STRICT_AMOUNTS=True) as client:
            response = client.post("/expenses/", json={"title": "Gift", "amount": "lots"})

            assert response.status_code == 422
            assert response.json() == {"error": {"message": "Invalid amount: 'lots'"}}
            assert client.get("/expenses/").json() == []

    def test_rows_survive_restart(self, db_url):
        with make_client(db_url) as client:
            client.post("/expenses/", json={"title": "Coffee", "amount": "3.5"})
            client.post("/expenses/", json={"title": "Book", "amount": "20"})

        with make_client(db_url) as client:
            titles = sorted(e["title"] for e in client.get("/expenses/").json())

        assert titles == ["Book", "Coffee"]

    def test_request_id_is_echoed(self, client):
        response = client.get("/expenses/", headers={"x-request-id": "abc-123"})
        assert response.headers["x-request-id"] == "abc-123"

    def test_request_id_is_generated(self, client):
        response = client.get("/health")

        request_id = response.headers["x-request-id"]
        assert request_id
        assert response.json() == {"status": "ok", "request_id": request_id}

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Not Found"}}

    def test_numeric_amount_is_accepted(self, client):
        response = client.post("/expenses/", json={"title": "Coffee", "amount": 3.5})

        assert response.status_code == 200
        assert response.json()[0]["amount"] == 3.5

    def test_non_json_body_is_a_client_error(self, client):
        response = client.post(
            "/expenses/", content=b"x", headers={"content-type": "text/plain"}
        )

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Validation failed"
        assert response.json()["error"]["details"]

    def test_runs_on_in_memory_database(self):
        with make_client("sqlite+aiosqlite://") as client:
            client.post("/expenses/", json={"title": "Coffee", "amount": "3.5"})
            client.post("/expenses/", json={"title": "Book", "amount": "20"})

            titles = sorted(e["title"] for e in client.get("/expenses/").json())

        assert titles == ["Book", "Coffee"]

    def test_engine_is_disposed_when_startup_fails(self, db_url, monkeypatch):
        closed = []
        original_close = DatabaseSessionManager.close

        async def recording_close(self):
            closed.append(self)
            await original_close(self)

        monkeypatch.setattr(DatabaseSessionManager, "close", recording_close)

        # without the table the initial load fails
        with pytest.raises(Exception):
            with make_client(db_url, AUTO_CREATE_SCHEMA=False):
                pass

        assert len(closed) == 1
