"""Integration tests for the admin invitation endpoints."""

from __future__ import annotations

import base64
from datetime import timedelta

import pytest

pytest.importorskip("fastapi")

from halluapp.infrastructure.database import SessionLocal  # noqa: E402
from halluapp.infrastructure.models import InvitationModel  # noqa: E402
from halluapp.utils import utcnow  # noqa: E402


def test_create_invitation_returns_code_url_and_qr(client, admin_user, headers_for) -> None:
    response = client.post(
        "/invitations",
        json={"role_slug": "customer"},
        headers=headers_for(admin_user),
    )

    assert response.status_code == 201
    body = response.json()
    code = body["invitation"]["code"]
    assert len(code) == 17
    assert body["invite_url"] == f"http://testserver/register?code={code}"
    assert body["invitation"]["invite_url"] == body["invite_url"]
    assert body["invitation"]["is_used"] is False
    assert body["invitation"]["is_valid"] is True
    assert body["invitation"]["created_by"] == admin_user.id
    assert b"<svg" in base64.b64decode(body["qr_code"])


def test_create_invitation_with_redirect_url(client, admin_user, headers_for) -> None:
    redirect = "https://partners.example.com/onboard"
    response = client.post(
        "/invitations",
        json={"role_slug": "service-provider", "redirect_url": redirect},
        headers=headers_for(admin_user),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["invite_url"] == f"{redirect}?code={body['invitation']['code']}"
    assert body["invitation"]["role_slug"] == "service-provider"


@pytest.mark.parametrize(
    "payload",
    [
        {"role_slug": "admin"},
        {"role_slug": "customer", "redirect_url": "javascript:alert(1)"},
        {},
    ],
)
def test_create_invitation_rejects_invalid_payloads(
    client, admin_user, headers_for, payload
) -> None:
    response = client.post("/invitations", json=payload, headers=headers_for(admin_user))

    assert response.status_code == 422


def test_create_invitation_rejects_past_expiry(client, admin_user, headers_for) -> None:
    past = (utcnow() - timedelta(hours=1)).isoformat()
    response = client.post(
        "/invitations",
        json={"role_slug": "customer", "expires_at": past},
        headers=headers_for(admin_user),
    )

    assert response.status_code == 422


def test_created_codes_are_unique(client, admin_user, headers_for) -> None:
    codes = set()
    for _ in range(5):
        response = client.post(
            "/invitations", json={"role_slug": "customer"}, headers=headers_for(admin_user)
        )
        codes.add(response.json()["invitation"]["code"])

    assert len(codes) == 5


def test_list_invitations_is_paginated_newest_first(
    client, admin_user, headers_for
) -> None:
    created = []
    for _ in range(12):
        response = client.post(
            "/invitations", json={"role_slug": "customer"}, headers=headers_for(admin_user)
        )
        created.append(response.json()["invitation"]["id"])

    first_page = client.get("/invitations", headers=headers_for(admin_user))
    assert first_page.status_code == 200
    body = first_page.json()
    assert body["total"] == 12
    assert body["per_page"] == 10
    assert body["last_page"] == 2
    assert len(body["data"]) == 10
    assert body["data"][0]["id"] == created[-1]
    assert body["data"][0]["creator"]["email"] == admin_user.email

    second_page = client.get("/invitations?page=2", headers=headers_for(admin_user))
    assert [item["id"] for item in second_page.json()["data"]] == [created[1], created[0]]


def test_delete_invitation(client, admin_user, headers_for) -> None:
    created = client.post(
        "/invitations", json={"role_slug": "customer"}, headers=headers_for(admin_user)
    ).json()["invitation"]

    response = client.delete(f"/invitations/{created['id']}", headers=headers_for(admin_user))
    assert response.status_code == 204

    with SessionLocal() as session:
        assert session.get(InvitationModel, created["id"]) is None

    missing = client.delete(f"/invitations/{created['id']}", headers=headers_for(admin_user))
    assert missing.status_code == 404


def test_non_admin_is_forbidden(client, customer_user, headers_for) -> None:
    headers = headers_for(customer_user)

    assert client.get("/invitations", headers=headers).status_code == 403
    assert client.post("/invitations", json={"role_slug": "customer"}, headers=headers).status_code == 403
    assert client.delete("/invitations/1", headers=headers).status_code == 403


def test_anonymous_json_request_is_forbidden(client) -> None:
    response = client.get("/invitations", headers={"Accept": "application/json"})

    assert response.status_code == 403
    assert response.json()["detail"] == "Unauthorized. Admin access required."


def test_anonymous_browser_request_is_redirected_to_login(client) -> None:
    response = client.get(
        "/invitations", headers={"Accept": "text/html"}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
