"""End-to-end: a student works through a two-lesson course.

Teacher creates the course, adds two lessons and a quiz; the student
enrolls, completes both lessons, passes the quiz and gets a certificate
anyone can verify.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.conftest import auth


def test_two_lesson_course_to_certificate(client: TestClient) -> None:
    teacher, student = auth("prof"), auth("stud")
    client.post("/v1/users/me", json={"name": "Prof", "role": "teacher"}, headers=teacher)
    client.post("/v1/users/me", json={"name": "Stud", "role": "student"}, headers=student)

    course = client.post(
        "/v1/courses",
        json={"title": "Python 101", "description": "Basics"},
        headers=teacher,
    ).json()
    cid = course["id"]
    l1 = client.post(
        f"/v1/courses/{cid}/lessons",
        json={"title": "Variables", "content": "x = 1", "order": 1},
        headers=teacher,
    ).json()
    l2 = client.post(
        f"/v1/courses/{cid}/lessons",
        json={"title": "Loops", "content": "for ...", "order": 2},
        headers=teacher,
    ).json()

    quiz = client.post(
        "/v1/quizzes",
        json={
            "course_id": cid,
            "lesson_id": l1["id"],
            "title": "Variables check",
            "questions": [
                {
                    "question": "x = 1; x?",
                    "options": ["0", "1"],
                    "correct_answer": 1,
                    "points": 1,
                }
            ],
            "passing_score": 1,
        },
        headers=teacher,
    ).json()

    resp = client.post(f"/v1/courses/{cid}/enroll", headers=student)
    assert resp.status_code == 201
    assert resp.json()["progress_percentage"] == 0

    # certificate before completion is refused
    resp = client.post(f"/v1/courses/{cid}/certificate", headers=student)
    assert resp.status_code == 422

    resp = client.post(f"/v1/courses/{cid}/lessons/{l1['id']}/complete", headers=student)
    assert resp.status_code == 200
    assert resp.json()["progress_percentage"] == 50
    assert resp.json()["completed"] is False

    resp = client.post(
        f"/v1/quizzes/{quiz['id']}/attempts", json={"answers": [1]}, headers=student
    )
    assert resp.status_code == 201
    assert resp.json()["passed"] is True

    resp = client.post(f"/v1/courses/{cid}/lessons/{l2['id']}/complete", headers=student)
    assert resp.json()["progress_percentage"] == 100
    assert resp.json()["completed"] is True

    resp = client.post(f"/v1/courses/{cid}/certificate", headers=student)
    assert resp.status_code == 201
    cert = resp.json()
    assert cert["student_name"] == "Stud"
    assert cert["course_title"] == "Python 101"
    assert cert["instructor_name"] == "Prof"

    resp = client.post(f"/v1/courses/{cid}/certificate", headers=student)
    assert resp.status_code == 409

    # verification needs no token
    resp = client.get(f"/v1/certificates/{cert['certificate_hash']}/verify")
    assert resp.status_code == 200
    assert resp.json() == cert

    [enrollment] = client.get("/v1/enrollments", headers=student).json()
    assert enrollment["certificate_issued"] is True
