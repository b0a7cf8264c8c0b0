from __future__ import annotations

from typing import Protocol

from campus.models.quiz import Quiz, QuizAttempt


class QuizRepo(Protocol):
    def get_by_id(self, quiz_id: str) -> Quiz | None: ...
    def add(self, quiz: Quiz) -> None: ...
    def snapshot(self) -> dict[str, Quiz]: ...
    def restore(self, state: dict[str, Quiz]) -> None: ...


class QuizAttemptLog(Protocol):
    def append(self, attempt: QuizAttempt) -> None: ...
    def list_for(self, student_id: str, quiz_id: str) -> list[QuizAttempt]: ...
    def snapshot(self) -> list[QuizAttempt]: ...
    def restore(self, state: list[QuizAttempt]) -> None: ...


class InMemoryQuizRepo:
    def __init__(self) -> None:
        self._by_id: dict[str, Quiz] = {}

    def get_by_id(self, quiz_id: str) -> Quiz | None:
        return self._by_id.get(quiz_id)

    def add(self, quiz: Quiz) -> None:
        if quiz.id in self._by_id:
            raise ValueError("quiz already exists")
        self._by_id[quiz.id] = quiz

    def snapshot(self) -> dict[str, Quiz]:
        return dict(self._by_id)

    def restore(self, state: dict[str, Quiz]) -> None:
        self._by_id = dict(state)


class InMemoryQuizAttemptLog:
    """Append-only. No update or delete."""

    def __init__(self) -> None:
        self._entries: list[QuizAttempt] = []

    def append(self, attempt: QuizAttempt) -> None:
        self._entries.append(attempt)

    def list_for(self, student_id: str, quiz_id: str) -> list[QuizAttempt]:
        return [
            a
            for a in self._entries
            if a.student_id == student_id and a.quiz_id == quiz_id
        ]

    def snapshot(self) -> list[QuizAttempt]:
        return list(self._entries)

    def restore(self, state: list[QuizAttempt]) -> None:
        self._entries = list(state)
