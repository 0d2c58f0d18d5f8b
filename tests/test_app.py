"""
Service-level behaviour: banner, health, error mapping.
"""


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["service"] == "Accounts API is running..."


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_malformed_body_is_400(client):
    resp = client.post("/accounts", content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_database_failure_is_generic_500(client, db):
    from accounts_api.database import Base

    Base.metadata.drop_all(bind=db.get_bind())
    resp = client.get("/accounts")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
