"""Integration tests for the external identity login endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from halluapp.config import get_settings  # noqa: E402
from halluapp.domain.entities import ExternalIdentity  # noqa: E402
from halluapp.domain.exceptions import AuthenticationError  # noqa: E402
from halluapp.infrastructure.database import SessionLocal  # noqa: E402
from halluapp.infrastructure.models import UserModel  # noqa: E402
from halluapp.interfaces.api.dependencies import get_identity_verifier  # noqa: E402


class FakeIdentityVerifier:
    """Accept a fixed set of tokens instead of calling Firebase."""

    def __init__(self, identities: dict[str, ExternalIdentity]) -> None:
        self.identities = identities
        self.seen: list[str] = []

    def verify(self, token: str) -> ExternalIdentity:
        self.seen.append(token)
        try:
            return self.identities[token]
        except KeyError:
            raise AuthenticationError("Invalid authentication token") from None


@pytest.fixture()
def verifier(app) -> FakeIdentityVerifier:
    fake = FakeIdentityVerifier(
        {
            "good-token": ExternalIdentity(uid="uid-123", email="new@example.com", name="New Person"),
            "existing-token": ExternalIdentity(uid="uid-456", email="customer@example.com", name="Renamed"),
            "no-email-token": ExternalIdentity(uid="uid-789", email=None, name="Ghost"),
            "local-domain-token": ExternalIdentity(uid="uid-local", email="dev@corp.local"),
        }
    )
    app.dependency_overrides[get_identity_verifier] = lambda: fake
    return fake


def _user_count() -> int:
    with SessionLocal() as session:
        return session.query(UserModel).count()


@pytest.mark.parametrize("path", ["/firebase-login", "/auth/firebase"])
def test_new_identity_creates_customer_and_session(client, verifier, path) -> None:
    response = client.post(path, headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Authentication successful"
    assert body["user"]["email"] == "new@example.com"
    assert body["user"]["name"] == "New Person"
    assert body["user"]["firebase_uid"] == "uid-123"
    assert [role["slug"] for role in body["user"]["roles"]] == ["customer"]
    assert get_settings().session_cookie_name in response.cookies

    dashboard = client.get("/dashboard", headers={"Accept": "application/json"})
    assert dashboard.status_code == 200
    assert dashboard.json()["auth"]["user"]["email"] == "new@example.com"


def test_token_in_body_is_accepted(client, verifier) -> None:
    response = client.post("/firebase-login", json={"token": "good-token"})

    assert response.status_code == 200
    assert verifier.seen == ["good-token"]


def test_email_match_attaches_uid_without_duplicate(client, verifier, customer_user) -> None:
    before = _user_count()

    response = client.post("/firebase-login", headers={"Authorization": "Bearer existing-token"})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == customer_user.id
    assert body["user"]["firebase_uid"] == "uid-456"
    assert body["user"]["name"] == "Renamed"
    assert _user_count() == before


def test_second_login_reuses_user_found_by_uid(client, verifier) -> None:
    first = client.post("/firebase-login", headers={"Authorization": "Bearer good-token"})
    second = client.post("/firebase-login", headers={"Authorization": "Bearer good-token"})

    assert first.json()["user"]["id"] == second.json()["user"]["id"]
    assert _user_count() == 1


def test_invalid_token_is_unauthorized(client, verifier) -> None:
    response = client.post("/firebase-login", headers={"Authorization": "Bearer forged"})

    assert response.status_code == 401
    assert _user_count() == 0


def test_missing_email_claim_is_client_error(client, verifier) -> None:
    response = client.post("/firebase-login", headers={"Authorization": "Bearer no-email-token"})

    assert response.status_code == 422
    assert _user_count() == 0


def test_client_cannot_override_verified_email(client, verifier, customer_user) -> None:
    response = client.post(
        "/firebase-login",
        headers={"Authorization": "Bearer good-token"},
        json={"email": customer_user.email},
    )

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "new@example.com"


def test_unverified_claims_rejected_by_default(client, verifier) -> None:
    response = client.post(
        "/firebase-login",
        json={"email": "claims@example.com", "name": "Claims", "firebase_uid": "uid-body"},
    )

    assert response.status_code == 401


def test_unverified_claims_accepted_when_trusted(app, client, verifier) -> None:
    trusted = get_settings().model_copy(update={"trust_client_identity_claims": True})
    app.dependency_overrides[get_settings] = lambda: trusted

    response = client.post(
        "/firebase-login",
        json={"email": "claims@example.com", "name": "Claims", "firebase_uid": "uid-body"},
    )
    assert response.status_code == 200
    assert response.json()["user"]["firebase_uid"] == "uid-body"

    missing_uid = client.post("/firebase-login", json={"email": "other@example.com"})
    assert missing_uid.status_code == 422


def test_malformed_body_reports_field_errors(client, verifier) -> None:
    response = client.post("/firebase-login", json={"token": "good-token", "email": "not-an-email"})

    assert response.status_code == 422
    assert any(error["loc"][-1] == "email" for error in response.json()["detail"])


def test_provider_email_on_special_use_domain_can_sign_in_repeatedly(client, verifier) -> None:
    first = client.post("/firebase-login", headers={"Authorization": "Bearer local-domain-token"})
    second = client.post("/firebase-login", headers={"Authorization": "Bearer local-domain-token"})

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["user"]["email"] == "dev@corp.local"
    assert first.json()["user"]["name"] == "dev"
    assert second.json()["user"]["id"] == first.json()["user"]["id"]
    assert _user_count() == 1
