"""Tests for enrollment and lesson-completion endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.conftest import auth


@pytest.fixture
def course(client: TestClient) -> dict:
    """Course by t1 with three lessons; s1 is a student."""
    client.post("/v1/users/me", json={"name": "T", "role": "teacher"}, headers=auth("t1"))
    client.post("/v1/users/me", json={"name": "S", "role": "student"}, headers=auth("s1"))
    course = client.post(
        "/v1/courses", json={"title": "C", "description": ""}, headers=auth("t1")
    ).json()
    for order in (1, 2, 3):
        client.post(
            f"/v1/courses/{course['id']}/lessons",
            json={"title": f"L{order}", "content": "", "order": order},
            headers=auth("t1"),
        )
    return client.get(f"/v1/courses/{course['id']}", headers=auth("t1")).json()


def test_enroll_rejects_missing_token(client: TestClient) -> None:
    assert client.post("/v1/courses/x/enroll").status_code == 401


def test_enroll_success(client: TestClient, course: dict) -> None:
    resp = client.post(f"/v1/courses/{course['id']}/enroll", headers=auth("s1"))
    assert resp.status_code == 201
    body = resp.json()
    assert body["student_id"] == "s1"
    assert body["completed_lessons"] == []
    assert body["progress_percentage"] == 0
    assert body["completed"] is False


def test_enroll_twice_is_409(client: TestClient, course: dict) -> None:
    client.post(f"/v1/courses/{course['id']}/enroll", headers=auth("s1"))
    resp = client.post(f"/v1/courses/{course['id']}/enroll", headers=auth("s1"))
    assert resp.status_code == 409


def test_teacher_enroll_is_403(client: TestClient, course: dict) -> None:
    resp = client.post(f"/v1/courses/{course['id']}/enroll", headers=auth("t1"))
    assert resp.status_code == 403


def test_enroll_unknown_course_is_404(client: TestClient, course: dict) -> None:
    resp = client.post("/v1/courses/nonexistent/enroll", headers=auth("s1"))
    assert resp.status_code == 404


def test_list_enrollments_is_caller_scoped(client: TestClient, course: dict) -> None:
    client.post("/v1/users/me", json={"name": "S2", "role": "student"}, headers=auth("s2"))
    client.post(f"/v1/courses/{course['id']}/enroll", headers=auth("s1"))

    assert len(client.get("/v1/enrollments", headers=auth("s1")).json()) == 1
    assert client.get("/v1/enrollments", headers=auth("s2")).json() == []


# ---- completion ----


def test_complete_lessons_updates_progress(client: TestClient, course: dict) -> None:
    cid = course["id"]
    client.post(f"/v1/courses/{cid}/enroll", headers=auth("s1"))

    percentages = []
    for lesson in course["lessons"]:
        resp = client.post(
            f"/v1/courses/{cid}/lessons/{lesson['id']}/complete", headers=auth("s1")
        )
        assert resp.status_code == 200
        percentages.append(resp.json()["progress_percentage"])

    assert percentages == [33, 66, 100]
    [enrollment] = client.get("/v1/enrollments", headers=auth("s1")).json()
    assert enrollment["completed"] is True


def test_complete_is_idempotent(client: TestClient, course: dict) -> None:
    cid, lid = course["id"], course["lessons"][0]["id"]
    client.post(f"/v1/courses/{cid}/enroll", headers=auth("s1"))
    url = f"/v1/courses/{cid}/lessons/{lid}/complete"

    first = client.post(url, headers=auth("s1")).json()
    second = client.post(url, headers=auth("s1")).json()
    assert first == second
    assert second["completed_lessons"] == [lid]


def test_complete_without_enrollment_is_404(client: TestClient, course: dict) -> None:
    lid = course["lessons"][0]["id"]
    resp = client.post(
        f"/v1/courses/{course['id']}/lessons/{lid}/complete", headers=auth("s1")
    )
    assert resp.status_code == 404


def test_complete_unknown_lesson_is_404(client: TestClient, course: dict) -> None:
    client.post(f"/v1/courses/{course['id']}/enroll", headers=auth("s1"))
    resp = client.post(
        f"/v1/courses/{course['id']}/lessons/bogus/complete", headers=auth("s1")
    )
    assert resp.status_code == 404


def test_new_lesson_lowers_completed_progress(client: TestClient, course: dict) -> None:
    cid = course["id"]
    client.post(f"/v1/courses/{cid}/enroll", headers=auth("s1"))
    for lesson in course["lessons"]:
        client.post(f"/v1/courses/{cid}/lessons/{lesson['id']}/complete", headers=auth("s1"))

    client.post(
        f"/v1/courses/{cid}/lessons",
        json={"title": "L4", "content": "", "order": 4},
        headers=auth("t1"),
    )

    [enrollment] = client.get("/v1/enrollments", headers=auth("s1")).json()
    assert enrollment["progress_percentage"] == 75
    assert enrollment["completed"] is False
