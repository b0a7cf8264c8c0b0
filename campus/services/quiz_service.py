from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from campus.core.metrics import QUIZ_ATTEMPTS
from campus.models.quiz import Question, Quiz, QuizAttempt
from campus.repos.store import EntityStore
from campus.services import errors, guards, scoring_service

logger = logging.getLogger(__name__)


def _validate_questions(questions: Sequence[Question]) -> None:
    if not questions:
        raise errors.ValidationError("a quiz needs at least one question")

    seen: set[str] = set()
    for question in questions:
        if question.id in seen:
            raise errors.ValidationError(f"duplicate question id {question.id!r}")
        seen.add(question.id)
        if not question.options:
            raise errors.ValidationError(f"question {question.id!r} has no options")
        if not 0 <= question.correct_answer < len(question.options):
            raise errors.ValidationError(
                f"question {question.id!r}: correct_answer out of range"
            )


def create_quiz(
    store: EntityStore,
    caller_id: str,
    *,
    course_id: str,
    lesson_id: str,
    title: str,
    questions: Sequence[Question],
    passing_score: int,
) -> Quiz:
    """Create a quiz and link it from its lesson in the same transaction.

    The quiz table holds the course_id/lesson_id foreign keys; the lesson
    only carries quiz_id.  If the lesson already had a quiz, the link moves
    to the new one and the old quiz stays readable by id.
    """
    with store.transaction():
        course = guards.require_course(store, course_id)
        guards.require_instructor(course, caller_id)
        lesson = course.find_lesson(lesson_id)
        if lesson is None:
            raise errors.NotFoundError("lesson not found")
        _validate_questions(questions)

        now = store.now()
        quiz = Quiz.new(
            course_id=course_id,
            lesson_id=lesson_id,
            title=title,
            questions=tuple(questions),
            passing_score=passing_score,
            created_at=now,
        )
        store.quizzes.add(quiz)

        lessons = tuple(
            replace(item, quiz_id=quiz.id) if item.id == lesson_id else item
            for item in course.lessons
        )
        store.courses.update(replace(course, lessons=lessons, updated_at=now))

    logger.info(
        "Created quiz id=%s course=%s lesson=%s questions=%d",
        quiz.id,
        course_id,
        lesson_id,
        len(quiz.questions),
    )
    return quiz


def get_quiz(store: EntityStore, quiz_id: str) -> Quiz | None:
    with store.read():
        return store.quizzes.get_by_id(quiz_id)


def attempt_quiz(
    store: EntityStore, caller_id: str, quiz_id: str, answers: Sequence[int]
) -> QuizAttempt:
    with store.transaction():
        quiz = store.quizzes.get_by_id(quiz_id)
        if quiz is None:
            raise errors.NotFoundError("quiz not found")
        attempt = scoring_service.grade(quiz, caller_id, tuple(answers), store.now())
        store.quiz_attempts.append(attempt)

    QUIZ_ATTEMPTS.labels(result="passed" if attempt.passed else "failed").inc()
    logger.info(
        "Quiz attempt user=%s quiz=%s score=%d/%d passed=%s",
        caller_id,
        quiz_id,
        attempt.score,
        attempt.total_points,
        attempt.passed,
    )
    return attempt


def get_quiz_attempts(
    store: EntityStore, caller_id: str, quiz_id: str
) -> list[QuizAttempt]:
    """The caller's own attempts at one quiz, oldest first."""
    with store.read():
        return store.quiz_attempts.list_for(caller_id, quiz_id)
