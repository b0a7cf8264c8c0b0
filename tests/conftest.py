from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from campus.main import app
from campus.models.course import Course
from campus.models.user import User, UserRole
from campus.repos.store import EntityStore
from campus.services import courses_service, token_service, users_service

# Ensure repo root is on sys.path so `import campus` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeClock:
    """Settable epoch-seconds clock for EntityStore."""

    def __init__(self, start: int = 1_700_000_000) -> None:
        self.value = start

    def __call__(self) -> int:
        return self.value

    def advance(self, seconds: int = 1) -> None:
        self.value += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def store(clock: FakeClock) -> EntityStore:
    """Fresh state per test, shared by the app and direct service calls."""
    fresh = EntityStore(clock=clock)
    app.state.store = fresh
    return fresh


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def mint_token(sub: str = "test-user", ttl_minutes: int = 15) -> str:
    """Create a valid ES256 caller token for testing."""
    return token_service.create_access_token(sub=sub, ttl_minutes=ttl_minutes)


def auth(sub: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {mint_token(sub)}"}


# ---------------------------------------------------------------------------
# Seed helpers
# ---------------------------------------------------------------------------


def seed_user(
    store: EntityStore, user_id: str, role: UserRole, name: str | None = None
) -> User:
    return users_service.create_user(
        store, user_id, name=name or user_id.title(), role=role
    )


def seed_course(
    store: EntityStore,
    teacher_id: str,
    *,
    title: str = "Intro to Python",
    description: str = "Variables, loops and functions",
    lessons: int = 0,
) -> Course:
    """Create a course owned by teacher_id with `lessons` numbered lessons."""
    course = courses_service.create_course(
        store, teacher_id, title=title, description=description
    )
    for i in range(lessons):
        courses_service.add_lesson_to_course(
            store,
            teacher_id,
            course.id,
            title=f"Lesson {i + 1}",
            content=f"Content {i + 1}",
            order=i + 1,
        )
    result = courses_service.get_course(store, course.id)
    assert result is not None
    return result
