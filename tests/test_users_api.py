from fastapi.testclient import TestClient


def test_user_lifecycle(client: TestClient, headers):
    resp = client.post("/users", json={"email": "ana@example.com", "name": "Ana", "password": "hunter22"}, headers=headers)
    assert resp.status_code == 201
    user = resp.json()
    assert user["email"] == "ana@example.com"
    assert "password" not in user

    assert client.get(f"/users/{user['id']}", headers=headers).json()["name"] == "Ana"
    assert client.get("/users/email/ana@example.com", headers=headers).json()["id"] == user["id"]
    assert [u["id"] for u in client.get("/users", headers=headers).json()] == [user["id"]]


def test_duplicate_email_conflicts(client: TestClient, headers):
    payload = {"email": "dup@example.com", "name": "Dup", "password": "hunter22"}
    assert client.post("/users", json=payload, headers=headers).status_code == 201

    resp = client.post("/users", json=payload, headers=headers)
    assert resp.status_code == 409


def test_short_password_is_rejected(client: TestClient, headers):
    resp = client.post("/users", json={"email": "x@example.com", "name": "X", "password": "1234"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"]["details"]["field"] == "password"


def test_password_is_stored_hashed(client: TestClient, headers, db_session):
    from app.core.security import verify_password
    from app.models import User

    client.post("/users", json={"email": "h@example.com", "name": "H", "password": "plaintext"}, headers=headers)
    stored = db_session.query(User).filter(User.email == "h@example.com").first()
    assert stored.password != "plaintext"
    assert verify_password("plaintext", stored.password)
    assert not verify_password("wrong-one", stored.password)


def test_unknown_user_is_not_found(client: TestClient, headers):
    assert client.get("/users/missing", headers=headers).status_code == 404
    assert client.get("/users/email/nobody@example.com", headers=headers).status_code == 404
