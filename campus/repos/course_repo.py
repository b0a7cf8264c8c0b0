from __future__ import annotations

from typing import Protocol

from campus.models.course import Course


class CourseRepo(Protocol):
    def get_by_id(self, course_id: str) -> Course | None: ...
    def add(self, course: Course) -> None: ...
    def update(self, course: Course) -> None: ...
    def list_all(self) -> list[Course]: ...
    def list_by_instructor(self, instructor_id: str) -> list[Course]: ...
    def search(self, query: str) -> list[Course]: ...
    def snapshot(self) -> dict[str, Course]: ...
    def restore(self, state: dict[str, Course]) -> None: ...


class InMemoryCourseRepo:
    def __init__(self) -> None:
        self._by_id: dict[str, Course] = {}

    def get_by_id(self, course_id: str) -> Course | None:
        return self._by_id.get(course_id)

    def add(self, course: Course) -> None:
        if course.id in self._by_id:
            raise ValueError("course already exists")
        self._by_id[course.id] = course

    def update(self, course: Course) -> None:
        if course.id not in self._by_id:
            raise KeyError("course not found")
        self._by_id[course.id] = course

    def list_all(self) -> list[Course]:
        return list(self._by_id.values())

    def list_by_instructor(self, instructor_id: str) -> list[Course]:
        return [c for c in self._by_id.values() if c.instructor_id == instructor_id]

    def search(self, query: str) -> list[Course]:
        # Full scan. Fine at the table sizes this store is meant for.
        return [c for c in self._by_id.values() if c.matches(query)]

    def snapshot(self) -> dict[str, Course]:
        return dict(self._by_id)

    def restore(self, state: dict[str, Course]) -> None:
        self._by_id = dict(state)
