"""Pytest fixtures for the record store and the API."""

import pytest
from fastapi.testclient import TestClient

from db.database import Database
from db.location import StorageConfig
from db.models import PersonDraft
from server.app import create_app


@pytest.fixture
def storage(tmp_path):
    return StorageConfig(data_dir=tmp_path / "appdata")


@pytest.fixture
def db(storage):
    return Database(storage)


@pytest.fixture
def client(db):
    return TestClient(create_app(db))


@pytest.fixture
def shevchenko():
    return PersonDraft(
        last_name="Shevchenko",
        first_name="Taras",
        middle_name="Hryhorovych",
        sex="m",
        birth_date="1814-03-09",
        birth_place="Moryntsi",
        father="Hryhorii Shevchenko",
        mother="Kateryna Shevchenko",
        residence="Moryntsi, Kyiv gubernia",
        occupation="serf",
        legitimacy="legitimate",
        midwife="Paraska",
        godparents="Ivan and Mariia",
        priest="Fr. Oleksii",
        notes="entry 17",
    )

