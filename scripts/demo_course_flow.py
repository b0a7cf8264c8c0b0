"""Demo: walk a student through a two-lesson course using FastAPI TestClient.

Tokens are minted with the ephemeral dev key, so run without
TOKEN_PUBLIC_KEY_PATH set:
    python scripts/demo_course_flow.py
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from campus.main import app
from campus.services import token_service


def _headers(sub: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_service.create_access_token(sub=sub)}"}


def main() -> None:
    client = TestClient(app)
    teacher, student = _headers("demo-teacher"), _headers("demo-student")

    # ── Profiles ────────────────────────────────────────────────────
    r = client.post(
        "/v1/users/me", json={"name": "Grace", "role": "teacher"}, headers=teacher
    )
    print(f"1. POST /v1/users/me (teacher)  → {r.status_code}")
    r = client.post(
        "/v1/users/me", json={"name": "Alan", "role": "student"}, headers=student
    )
    print(f"2. POST /v1/users/me (student)  → {r.status_code}")

    # ── Course with two lessons ─────────────────────────────────────
    course = client.post(
        "/v1/courses",
        json={"title": "Python 101", "description": "From zero to loops"},
        headers=teacher,
    ).json()
    cid = course["id"]
    lessons = [
        client.post(
            f"/v1/courses/{cid}/lessons",
            json={"title": title, "content": "...", "order": order},
            headers=teacher,
        ).json()
        for order, title in enumerate(("Variables", "Loops"), start=1)
    ]
    print(f"3. Course {cid[:8]}… with {len(lessons)} lessons")

    # ── Enroll and progress ─────────────────────────────────────────
    r = client.post(f"/v1/courses/{cid}/enroll", headers=student)
    print(f"4. POST enroll                  → {r.status_code}")

    r = client.post(f"/v1/courses/{cid}/certificate", headers=student)
    print(f"5. POST certificate (too early) → {r.status_code}  {r.json()['detail']}")

    for lesson in lessons:
        r = client.post(
            f"/v1/courses/{cid}/lessons/{lesson['id']}/complete", headers=student
        )
        print(
            f"6. complete {lesson['title']:<10}         → {r.status_code}  "
            f"progress={r.json()['progress_percentage']}%"
        )

    # ── Certificate ─────────────────────────────────────────────────
    r = client.post(f"/v1/courses/{cid}/certificate", headers=student)
    cert = r.json()
    print(f"7. POST certificate             → {r.status_code}  "
          f"hash={cert['certificate_hash'][:16]}…")

    r = client.get(f"/v1/certificates/{cert['certificate_hash']}/verify")
    print(f"8. GET  verify (no token)       → {r.status_code}  "
          f"{r.json()['student_name']} / {r.json()['course_title']}")


if __name__ == "__main__":
    main()
