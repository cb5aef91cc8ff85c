from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from emargement.auth.guard import AccessGuard, extract_bearer_token
from emargement.auth.tokens import Identity
from emargement.core.enums import Role
from emargement.core.exceptions import AuthorizationError, TokenError


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        (None, None),
        ("", None),
        ("Bearer", None),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer a b", None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_authenticate_missing_header_is_access_denied(tokens):
    with pytest.raises(TokenError) as exc_info:
        AccessGuard(tokens).authenticate(None)

    assert str(exc_info.value) == "Access Denied"


def test_authenticate_returns_identity(tokens):
    header = f"Bearer {tokens.issue(user_id=5, role=Role.STUDENT)}"

    identity = AccessGuard(tokens).authenticate(header)

    assert identity.user_id == 5
    assert identity.role == Role.STUDENT


def test_protected_route_without_token_returns_403(client):
    response = client.post("/sessions", json={"title": "Python", "date": "2030-01-01"})

    assert response.status_code == 403
    assert response.get_data(as_text=True) == "Access Denied"


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("post", "/sessions"),
        ("put", "/sessions/1"),
        ("delete", "/sessions/1"),
        ("post", "/sessions/1/emargement"),
        ("get", "/sessions/1/emargement"),
    ],
)
def test_malformed_token_returns_403_on_every_protected_route(client, method, path):
    response = getattr(client, method)(path, json={}, headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 403
    assert response.get_data(as_text=True) == "Invalid Token"


def test_expired_token_returns_403(client, tokens, trainer):
    expired = tokens.issue(
        user_id=trainer.user_id,
        role=trainer.role,
        now=datetime.now(timezone.utc) - timedelta(hours=2),
    )

    response = client.post(
        "/sessions",
        json={"title": "Python", "date": "2030-01-01"},
        headers={"Authorization": f"Bearer {expired}"},
    )

    assert response.status_code == 403
    assert response.get_data(as_text=True) == "Invalid Token"


def test_identity_require_accepts_matching_role():
    Identity(user_id=1, role=Role.TRAINER).require(Role.TRAINER)


def test_identity_require_rejects_other_role():
    with pytest.raises(AuthorizationError) as exc_info:
        Identity(user_id=1, role=Role.STUDENT).require(Role.TRAINER)

    assert str(exc_info.value) == "Access Denied"


def test_role_required_uses_identity_require(app, tokens, monkeypatch):
    calls = []
    original = Identity.require

    def spy(self, role):
        calls.append((self.role, role))
        return original(self, role)

    monkeypatch.setattr(Identity, "require", spy)
    guard = AccessGuard(tokens)

    @guard.role_required(Role.TRAINER)
    def view():
        return "ok", 200

    header = {"Authorization": f"Bearer {tokens.issue(user_id=3, role=Role.STUDENT)}"}
    with app.test_request_context("/", headers=header):
        assert view() == ("Access Denied", 403)

    assert calls == [(Role.STUDENT, Role.TRAINER)]
