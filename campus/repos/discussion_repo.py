from __future__ import annotations

from typing import Protocol

from campus.models.discussion import Discussion


class DiscussionRepo(Protocol):
    def get_by_id(self, discussion_id: str) -> Discussion | None: ...
    def add(self, discussion: Discussion) -> None: ...
    def update(self, discussion: Discussion) -> None: ...
    def list_by_course(self, course_id: str) -> list[Discussion]: ...
    def snapshot(self) -> dict[str, Discussion]: ...
    def restore(self, state: dict[str, Discussion]) -> None: ...


class InMemoryDiscussionRepo:
    def __init__(self) -> None:
        self._by_id: dict[str, Discussion] = {}

    def get_by_id(self, discussion_id: str) -> Discussion | None:
        return self._by_id.get(discussion_id)

    def add(self, discussion: Discussion) -> None:
        if discussion.id in self._by_id:
            raise ValueError("discussion already exists")
        self._by_id[discussion.id] = discussion

    def update(self, discussion: Discussion) -> None:
        if discussion.id not in self._by_id:
            raise KeyError("discussion not found")
        self._by_id[discussion.id] = discussion

    def list_by_course(self, course_id: str) -> list[Discussion]:
        return [d for d in self._by_id.values() if d.course_id == course_id]

    def snapshot(self) -> dict[str, Discussion]:
        return dict(self._by_id)

    def restore(self, state: dict[str, Discussion]) -> None:
        self._by_id = dict(state)
