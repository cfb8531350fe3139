"""Tests for the HTTP shell around the record store."""

import pytest
from fastapi.testclient import TestClient

from db.database import Database
from db.location import StorageConfig
from server.app import create_app
from tests.factories import make_draft


class TestPeopleApi:
    def test_list_empty(self, client):
        resp = client.get("/api/people")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_create_returns_stored_record(self, client, shevchenko):
        resp = client.post("/api/people", json=shevchenko.model_dump())
        assert resp.status_code == 201
        data = resp.json()
        assert data["id"] == 1
        assert data["created_at"]
        assert data["last_name"] == "Shevchenko"
        assert data["legitimacy"] == "legitimate"

    def test_list_after_two_creates(self, client):
        client.post("/api/people", json=make_draft(last_name="A").model_dump())
        client.post("/api/people", json=make_draft(last_name="B").model_dump())
        data = client.get("/api/people").json()
        assert [p["last_name"] for p in data] == ["B", "A"]
        assert [p["id"] for p in data] == [2, 1]

    def test_missing_field_rejected(self, client, db):
        body = make_draft().model_dump()
        del body["midwife"]
        resp = client.post("/api/people", json=body)
        assert resp.status_code == 422
        assert db.list_people() == []

    @pytest.mark.parametrize("value", [None, 42])
    def test_non_string_field_rejected(self, client, value):
        body = make_draft().model_dump()
        body["notes"] = value
        assert client.post("/api/people", json=body).status_code == 422

    def test_empty_string_accepted(self, client):
        body = make_draft(notes="").model_dump()
        resp = client.post("/api/people", json=body)
        assert resp.status_code == 201
        assert resp.json()["notes"] == ""

    def test_client_cannot_supply_id_or_created_at(self, client):
        body = make_draft().model_dump()
        body["id"] = 99
        body["created_at"] = "1900-01-01 00:00:00"
        assert client.post("/api/people", json=body).status_code == 422


class TestStoreFailures:
    @pytest.fixture
    def broken_client(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        db = Database(StorageConfig(data_dir=blocker / "appdata"))
        return TestClient(create_app(db))

    def test_list_reports_message(self, broken_client):
        resp = broken_client.get("/api/people")
        assert resp.status_code == 500
        assert isinstance(resp.json()["detail"], str)
        assert resp.json()["detail"]

    def test_create_reports_message(self, broken_client, shevchenko):
        resp = broken_client.post("/api/people", json=shevchenko.model_dump())
        assert resp.status_code == 500
        assert isinstance(resp.json()["detail"], str)

    def test_status_reports_message(self, broken_client):
        assert broken_client.get("/api/status").status_code == 500


class TestStatus:
    def test_reports_db_path(self, client, storage):
        data = client.get("/api/status").json()
        assert data["app"] == "Dzherelo"
        assert data["db_path"].endswith("dzherelo.sqlite3")
        assert str(storage.data_dir.name) in data["db_path"]
