from __future__ import annotations

from emargement.core.enums import Role


def _signup(client, **overrides):
    payload = {"name": "Alice", "email": "alice@example.com", "password": "secret123", "role": "formateur"}
    payload.update(overrides)
    return client.post("/auth/signup", json=payload)


def test_signup_then_login_returns_token(client, tokens):
    response = _signup(client)

    assert response.status_code == 201
    assert response.get_data(as_text=True) == "User registered successfully"

    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret123"})

    assert response.status_code == 200
    assert tokens.verify(response.get_json()["token"]).role == Role.TRAINER


def test_signup_response_does_not_echo_password(client):
    response = _signup(client, password="very-secret")

    assert "very-secret" not in response.get_data(as_text=True)


def test_login_wrong_password_returns_401(client):
    _signup(client)

    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "nope-nope"})

    assert response.status_code == 401
    assert response.get_data(as_text=True) == "Invalid email or password"


def test_signup_duplicate_email_returns_400_without_second_row(client, users_repo):
    _signup(client)

    response = _signup(client, name="Copy", role="etudiant")

    assert response.status_code == 400
    assert len(users_repo.by_id) == 1


def test_signup_validation_error_returns_400(client):
    response = _signup(client, password="123")

    assert response.status_code == 400


def test_signup_without_body_returns_400(client):
    response = client.post("/auth/signup", data="not json", content_type="text/plain")

    assert response.status_code == 400


def test_login_store_error_returns_500(build_client, broken_store):
    client = build_client(users_repo=broken_store)

    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret123"})

    assert response.status_code == 500
    assert "Can't connect to MySQL server" in response.get_data(as_text=True)


def test_signup_store_error_returns_400(build_client, broken_store):
    client = build_client(users_repo=broken_store)

    response = _signup(client)

    assert response.status_code == 400
