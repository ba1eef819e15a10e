"""Registration, login and bearer-token checks over HTTP."""

from datetime import datetime, timedelta, timezone

from models.user import User
from tools.security import create_access_token


def _payload(**overrides):
    payload = {
        "username": "grace",
        "email": "grace@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
        "firstName": "Grace",
        "lastName": "Hopper",
    }
    payload.update(overrides)
    return payload


def test_register_returns_public_user_and_token(client) -> None:
    response = client.post("/api/auth/register", json=_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"]["username"] == "grace"
    assert body["user"]["firstName"] == "Grace"
    assert "password" not in body["user"]


def test_register_rejects_duplicate_email_and_username(client) -> None:
    assert client.post("/api/auth/register", json=_payload()).status_code == 200

    same_email = client.post("/api/auth/register", json=_payload(username="other"))
    assert same_email.status_code == 400
    assert same_email.json() == {"message": "User already exists with this email"}

    same_name = client.post("/api/auth/register", json=_payload(email="other@example.com"))
    assert same_name.status_code == 400
    assert same_name.json() == {"message": "Username already taken"}


def test_register_rejects_mismatched_passwords(client) -> None:
    response = client.post("/api/auth/register", json=_payload(confirmPassword="different1"))

    assert response.status_code == 400
    assert "Passwords don't match" in response.json()["message"]


def test_register_rejects_invalid_email(client) -> None:
    response = client.post("/api/auth/register", json=_payload(email="not-an-email"))

    assert response.status_code == 400
    assert response.json()["message"].startswith("email")


def test_login_success_and_failure(client) -> None:
    client.post("/api/auth/register", json=_payload())

    ok = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["user"]["email"] == "grace@example.com"

    wrong = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "wrong-pass"})
    assert wrong.status_code == 401
    assert wrong.json() == {"message": "Invalid credentials"}

    unknown = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert unknown.status_code == 401


def test_login_email_is_case_insensitive(client) -> None:
    client.post("/api/auth/register", json=_payload())

    response = client.post("/api/auth/login", json={"email": "Grace@Example.com", "password": "secret123"})

    assert response.status_code == 200


def test_missing_token_is_401_and_bad_token_is_403(client) -> None:
    missing = client.get("/api/outfits")
    assert missing.status_code == 401
    assert missing.json() == {"message": "Access token required"}

    garbage = client.get("/api/outfits", headers={"Authorization": "Bearer not-a-jwt"})
    assert garbage.status_code == 403
    assert garbage.json() == {"message": "Invalid or expired token"}


def test_expired_and_foreign_tokens_are_rejected(client, config) -> None:
    user = User(username="old", email="old@example.com", password="x", first_name="O", last_name="D")
    expired = create_access_token(
        user,
        config.session_secret,
        timedelta(minutes=5),
        now=datetime.now(timezone.utc) - timedelta(hours=1),
    )
    forged = create_access_token(user, "some-other-secret", timedelta(minutes=5))

    for token in (expired, forged):
        response = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403


def test_token_grants_access_to_protected_routes(client, register) -> None:
    headers = register("linus")

    response = client.get("/api/outfits", headers=headers)

    assert response.status_code == 200
    assert response.json() == []
