import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from repairdesk.adapters.password_hasher import PasswordHasher
from repairdesk.main import app
from repairdesk.models.user import User
from repairdesk.services.user_service import UserService

client = TestClient(app)

ADMIN = {
    "username": "admin",
    "email": "admin@example.com",
    "password": "secret123",
    "full_name": "Shop Admin",
    "role": "admin",
}


def test_create_user_hashes_password(db):
    res = client.post("/api/users", json=ADMIN)
    assert res.status_code == 200, res.text
    body = res.json()
    assert "password_hash" not in body
    assert "password" not in body
    assert body["is_active"] is True

    stored = db.query(User).filter(User.username == "admin").one()
    assert stored.password_hash != "secret123"
    assert PasswordHasher().verify(stored.password_hash, "secret123")


def test_user_input_validation():
    assert client.post("/api/users", json=dict(ADMIN, username="ab")).status_code == 422
    assert client.post("/api/users", json=dict(ADMIN, password="123")).status_code == 422
    assert client.post("/api/users", json=dict(ADMIN, email="nope")).status_code == 422


def test_duplicate_username_surfaces_raw_constraint_error(db):
    UserService(db).create(**ADMIN)
    with pytest.raises(IntegrityError):
        UserService(db).create(**dict(ADMIN, email="other@example.com"))

    res = client.post("/api/users", json=dict(ADMIN, email="third@example.com"))
    assert res.status_code == 409
    assert "UNIQUE" in res.json()["detail"].upper()


def test_users_and_technicians():
    client.post("/api/users", json=ADMIN)
    client.post("/api/users", json=dict(ADMIN, username="tech1", email="t1@example.com", role="technician"))
    client.post("/api/users", json=dict(ADMIN, username="tech2", email="t2@example.com", role="technician"))

    assert len(client.get("/api/users").json()) == 3
    techs = client.get("/api/users/technicians").json()
    assert sorted(t["username"] for t in techs) == ["tech1", "tech2"]
