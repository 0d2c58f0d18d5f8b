"""
Shared pytest fixtures — in-memory SQLite + FastAPI TestClient.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from accounts_api.database import Base, get_db  # noqa: E402
import accounts_api.models  # noqa: E402,F401  — register models
from accounts_api.main import app  # noqa: E402

# StaticPool ensures all connections share the same in-memory database
_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_Session = sessionmaker(autocommit=False, autoflush=False, bind=_ENGINE)


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.create_all(bind=_ENGINE)
    yield
    Base.metadata.drop_all(bind=_ENGINE)


@pytest.fixture()
def db():
    session = _Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    def _override():
        try:
            yield db
        except Exception:
            db.rollback()
            raise

    app.dependency_overrides[get_db] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def account(client):
    resp = client.post("/accounts", json={"name": "Acme", "balance": 100, "balanceType": "debit"})
    assert resp.status_code == 201
    return resp.json()


_CHEQUE = {
    "cheque_number": "000123",
    "bank_drawn": "First National",
    "payer": "Acme Ltd",
    "payee": "Jane Doe",
    "amount": "1000.50",
    "admin_charge": 25,
    "net_to_payee": "975.50",
    "date_posted": "2024-01-02",
}


@pytest.fixture()
def cheque(client):
    resp = client.post("/cheques", json=_CHEQUE)
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture()
def cheque_payload():
    return dict(_CHEQUE)
