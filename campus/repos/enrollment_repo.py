from __future__ import annotations

from typing import Protocol

from campus.models.enrollment import Enrollment


class EnrollmentRepo(Protocol):
    def get(self, student_id: str, course_id: str) -> Enrollment | None: ...
    def add(self, enrollment: Enrollment) -> None: ...
    def update(self, enrollment: Enrollment) -> None: ...
    def list_by_student(self, student_id: str) -> list[Enrollment]: ...
    def list_by_course(self, course_id: str) -> list[Enrollment]: ...
    def snapshot(self) -> dict[tuple[str, str], Enrollment]: ...
    def restore(self, state: dict[tuple[str, str], Enrollment]) -> None: ...


class InMemoryEnrollmentRepo:
    def __init__(self) -> None:
        self._store: dict[tuple[str, str], Enrollment] = {}

    def get(self, student_id: str, course_id: str) -> Enrollment | None:
        return self._store.get((student_id, course_id))

    def add(self, enrollment: Enrollment) -> None:
        if enrollment.key in self._store:
            raise ValueError("enrollment already exists")
        self._store[enrollment.key] = enrollment

    def update(self, enrollment: Enrollment) -> None:
        if enrollment.key not in self._store:
            raise KeyError("enrollment not found")
        self._store[enrollment.key] = enrollment

    def list_by_student(self, student_id: str) -> list[Enrollment]:
        return [e for e in self._store.values() if e.student_id == student_id]

    def list_by_course(self, course_id: str) -> list[Enrollment]:
        return [e for e in self._store.values() if e.course_id == course_id]

    def snapshot(self) -> dict[tuple[str, str], Enrollment]:
        return dict(self._store)

    def restore(self, state: dict[tuple[str, str], Enrollment]) -> None:
        self._store = dict(state)
