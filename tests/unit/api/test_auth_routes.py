"""Unit tests for authentication routes."""

import pytest
from fastapi.testclient import TestClient

CREDENTIALS = {"username": "registrar", "password": "s3cret-pass"}


@pytest.fixture
def registered(client: TestClient) -> dict:
    response = client.post("/api/auth/register", json=CREDENTIALS)
    assert response.status_code == 201
    return CREDENTIALS


@pytest.mark.unit
class TestRegister:

    def test_register_stores_hash_only(self, client: TestClient, db) -> None:
        response = client.post("/api/auth/register", json=CREDENTIALS)

        assert response.status_code == 201
        assert response.json()["success"] is True
        user = db.users.find_one({"username": "registrar"})
        assert user["password_hash"] != CREDENTIALS["password"]
        assert "password" not in user

    def test_register_duplicate(self, client: TestClient, registered: dict) -> None:
        response = client.post("/api/auth/register", json=registered)

        assert response.status_code == 409
        assert response.json() == {"message": "Username already registered"}

    def test_register_invalid(self, client: TestClient) -> None:
        response = client.post("/api/auth/register", json={"username": "ab"})

        assert response.status_code == 400
        fields = {d["field"] for d in response.json()["details"]}
        assert fields == {"username", "password"}


@pytest.mark.unit
class TestLogin:

    def test_login_token_opens_protected_routes(self, client: TestClient, registered: dict) -> None:
        response = client.post("/api/auth/login", json=registered)

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 5 * 60

        headers = {"Authorization": f"Bearer {data['access_token']}"}
        assert client.get("/api/student", headers=headers).status_code == 200

        me = client.get("/api/auth/me", headers=headers)
        assert me.status_code == 200
        assert me.json()["username"] == "registrar"

    def test_login_wrong_password(self, client: TestClient, registered: dict) -> None:
        response = client.post(
            "/api/auth/login", json={"username": "registrar", "password": "wrong-password"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username or password"}

    def test_login_unknown_user(self, client: TestClient) -> None:
        response = client.post("/api/auth/login", json=CREDENTIALS)

        assert response.status_code == 401

    def test_login_missing_fields(self, client: TestClient) -> None:
        response = client.post("/api/auth/login", json={"username": "registrar"})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "password"

    def test_me_requires_token(self, client: TestClient) -> None:
        assert client.get("/api/auth/me").status_code == 401

    def test_me_for_unknown_subject(self, client: TestClient, auth_headers: dict) -> None:
        """A valid token for a user that no longer exists."""
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 404
