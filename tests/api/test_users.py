"""Tests for the /v1/users/me profile endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import auth


def _create(client: TestClient, sub: str, **body: object):
    payload = {"name": "Ada", "role": "student", **body}
    return client.post("/v1/users/me", json=payload, headers=auth(sub))


# ---- 401: unauthenticated ----


def test_get_me_rejects_missing_token(client: TestClient) -> None:
    assert client.get("/v1/users/me").status_code == 401


# ---- create ----


def test_create_profile(client: TestClient) -> None:
    resp = _create(client, "alice", bio="hello")
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == "alice"
    assert body["name"] == "Ada"
    assert body["role"] == "student"
    assert body["bio"] == "hello"
    assert body["profile_photo"] == ""
    assert isinstance(body["created_at"], int)


def test_create_profile_twice_is_conflict(client: TestClient) -> None:
    _create(client, "alice")
    resp = _create(client, "alice", role="teacher")
    assert resp.status_code == 409
    assert resp.json()["kind"] == "already_exists"


def test_create_profile_rejects_unknown_role(client: TestClient) -> None:
    resp = _create(client, "alice", role="admin")
    assert resp.status_code == 422


def test_create_profile_rejects_blank_name(client: TestClient) -> None:
    resp = _create(client, "alice", name="   ")
    assert resp.status_code == 422
    assert resp.json()["kind"] == "validation"


# ---- read ----


def test_get_me_without_profile_is_404(client: TestClient) -> None:
    resp = client.get("/v1/users/me", headers=auth("nobody"))
    assert resp.status_code == 404


def test_get_me_returns_own_profile(client: TestClient) -> None:
    _create(client, "alice")
    _create(client, "bob", name="Bob", role="teacher")

    resp = client.get("/v1/users/me", headers=auth("bob"))
    assert resp.status_code == 200
    assert resp.json()["name"] == "Bob"
    assert resp.json()["role"] == "teacher"


# ---- update ----


def test_update_profile_keeps_role(client: TestClient) -> None:
    _create(client, "alice")
    resp = client.put(
        "/v1/users/me",
        json={"name": "Ada L.", "bio": "math", "profile_photo": "ada.png"},
        headers=auth("alice"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Ada L."
    assert body["profile_photo"] == "ada.png"
    assert body["role"] == "student"


def test_update_without_profile_is_404(client: TestClient) -> None:
    resp = client.put(
        "/v1/users/me",
        json={"name": "X", "bio": "", "profile_photo": ""},
        headers=auth("ghost"),
    )
    assert resp.status_code == 404
    assert resp.json()["kind"] == "not_found"
