from fastapi import status

from workconnect.core.config import settings

from payloads import PASSWORD


def register_body(username: str = "alice", **overrides) -> dict:
    return {
        "username": username,
        "password": PASSWORD,
        "email": f"{username}@example.com",
        "name": "Alice Smith",
        "userType": "worker",
        **overrides,
    }


def test_register_returns_public_user_and_logs_in(test_client):
    response = test_client.post("/api/auth/register", json=register_body())

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body == {
        "id": 1,
        "username": "alice",
        "email": "alice@example.com",
        "name": "Alice Smith",
        "userType": "worker",
    }
    assert "password" not in body
    assert settings.SESSION_COOKIE_NAME in response.cookies

    me = test_client.get("/api/auth/me")
    assert me.status_code == status.HTTP_200_OK
    assert me.json()["username"] == "alice"


def test_register_stores_email_lowercased(test_client, make_client):
    response = test_client.post(
        "/api/auth/register", json=register_body(email="Alice@Example.COM")
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["email"] == "alice@example.com"
    assert test_client.get("/api/auth/me").json()["email"] == "alice@example.com"

    login = make_client().post(
        "/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD}
    )
    assert login.status_code == status.HTTP_200_OK


def test_register_ids_increase(make_client):
    first = make_client().post("/api/auth/register", json=register_body("alice")).json()
    second = make_client().post("/api/auth/register", json=register_body("bob")).json()

    assert second["id"] > first["id"]


def test_register_duplicate_username(test_client, make_client):
    test_client.post("/api/auth/register", json=register_body())

    response = make_client().post(
        "/api/auth/register", json=register_body(email="other@example.com")
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Username already taken"}


def test_register_duplicate_email(test_client, make_client):
    test_client.post("/api/auth/register", json=register_body())

    response = make_client().post(
        "/api/auth/register", json=register_body("alice2", email="ALICE@example.com")
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Email already registered"}


def test_register_validation_errors(test_client):
    response = test_client.post(
        "/api/auth/register",
        json=register_body(username="al", password="123", email="nope", userType="admin"),
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["message"] == "Invalid input"
    failed = {error["loc"][-1] for error in body["errors"]}
    assert {"username", "password", "email", "userType"} <= failed


def test_login_and_logout(test_client, make_client):
    make_client().post("/api/auth/register", json=register_body())

    login = test_client.post(
        "/api/auth/login", json={"email": "Alice@Example.com", "password": PASSWORD}
    )
    assert login.status_code == status.HTTP_200_OK
    assert login.json()["username"] == "alice"
    assert test_client.get("/api/auth/me").status_code == status.HTTP_200_OK

    logout = test_client.post("/api/auth/logout")
    assert logout.status_code == status.HTTP_200_OK
    assert logout.json() == {"message": "Logged out successfully"}
    assert test_client.get("/api/auth/me").status_code == status.HTTP_401_UNAUTHORIZED


def test_logout_without_session_is_harmless(test_client):
    first = test_client.post("/api/auth/logout")
    second = test_client.post("/api/auth/logout")

    assert first.status_code == status.HTTP_200_OK
    assert second.status_code == status.HTTP_200_OK


def test_login_wrong_password(test_client, make_client):
    make_client().post("/api/auth/register", json=register_body())

    response = test_client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "wrong-password"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"message": "Invalid credentials"}


def test_login_unknown_email(test_client):
    response = test_client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": PASSWORD}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_login_missing_fields(test_client):
    response = test_client.post("/api/auth/login", json={"email": "alice@example.com"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Invalid input"


def test_me_without_session(test_client):
    response = test_client.get("/api/auth/me")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"message": "Not authenticated"}


def test_me_with_tampered_cookie(test_client):
    response = test_client.get(
        "/api/auth/me", headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}=forged.token.value"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_old_session_survives_new_login_elsewhere(make_client):
    laptop = make_client()
    laptop.post("/api/auth/register", json=register_body())
    phone = make_client()
    phone.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})

    assert laptop.get("/api/auth/me").status_code == status.HTTP_200_OK
    assert phone.get("/api/auth/me").status_code == status.HTTP_200_OK


def test_unknown_route_and_health(test_client):
    missing = test_client.get("/api/nothing-here")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json() == {"message": "Not Found"}

    assert test_client.get("/health").json() == {"status": "healthy"}
