from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class Question:
    id: str
    text: str
    options: tuple[str, ...]
    correct_answer: int  # index into options
    points: int

    @staticmethod
    def new(
        *,
        text: str,
        options: tuple[str, ...],
        correct_answer: int,
        points: int,
        id: str | None = None,
    ) -> Question:
        return Question(
            id=id or str(uuid4()),
            text=text,
            options=options,
            correct_answer=correct_answer,
            points=points,
        )


@dataclass(frozen=True, slots=True)
class Quiz:
    id: str
    course_id: str
    lesson_id: str
    title: str
    questions: tuple[Question, ...]
    passing_score: int
    created_at: int = 0

    @staticmethod
    def new(
        *,
        course_id: str,
        lesson_id: str,
        title: str,
        questions: tuple[Question, ...],
        passing_score: int,
        created_at: int,
    ) -> Quiz:
        return Quiz(
            id=str(uuid4()),
            course_id=course_id,
            lesson_id=lesson_id,
            title=title,
            questions=questions,
            passing_score=passing_score,
            created_at=created_at,
        )

    @property
    def total_points(self) -> int:
        return sum(q.points for q in self.questions)


@dataclass(frozen=True, slots=True)
class QuizAttempt:
    """One graded submission. Attempts are a log; nothing overwrites them."""

    student_id: str
    quiz_id: str
    answers: tuple[int, ...]  # parallel to Quiz.questions
    score: int
    total_points: int
    passed: bool
    attempted_at: int
