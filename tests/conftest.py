from __future__ import annotations

import random
from datetime import date

import pytest

from student_records.main import create_app
from student_records.storage.memory import InMemoryStorage
from student_records.store import DomainStore
from student_records.students.model import Fees, NewStudent


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 1, 15)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage) -> DomainStore:
    return DomainStore(storage, rng=random.Random(42))


@pytest.fixture
def make_student():
    def _make(**overrides) -> NewStudent:
        data = dict(
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            department="Computer Science",
            enrollment_date=date(2022, 9, 1),
            student_id="ST100000",
            fees=Fees(total=10000, paid=2500, due=7500, last_payment=date(2023, 3, 4)),
        )
        data.update(overrides)
        return NewStudent(**data)

    return _make


@pytest.fixture
def app(monkeypatch, storage):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return client
