"""Quiz authoring and grading endpoints.

POST /v1/quizzes                       — create (course instructor only)
GET  /v1/quizzes/{quiz_id}             — read; answer key only for the instructor
POST /v1/quizzes/{quiz_id}/attempts    — submit answers, get graded attempt
GET  /v1/quizzes/{quiz_id}/attempts    — caller's own attempt history
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from campus.api.dependencies import Caller, Store
from campus.models.quiz import Question, Quiz, QuizAttempt
from campus.services import courses_service, quiz_service

router = APIRouter(prefix="/v1/quizzes", tags=["quizzes"])


class QuestionIn(BaseModel):
    id: str | None = None
    question: str = Field(min_length=1)
    options: list[str]
    correct_answer: int = Field(ge=0)
    points: int = Field(ge=0)


class QuizCreateIn(BaseModel):
    course_id: str
    lesson_id: str
    title: str = Field(min_length=1, max_length=300)
    questions: list[QuestionIn]
    passing_score: int = Field(ge=0)


class QuestionOut(BaseModel):
    id: str
    question: str
    options: list[str]
    correct_answer: int | None  # None unless the caller teaches the course
    points: int


class QuizOut(BaseModel):
    id: str
    course_id: str
    lesson_id: str
    title: str
    questions: list[QuestionOut]
    passing_score: int
    created_at: int


class AttemptIn(BaseModel):
    answers: list[Annotated[int, Field(ge=0)]] = Field(default_factory=list)


class AttemptOut(BaseModel):
    student_id: str
    quiz_id: str
    answers: list[int]
    score: int
    total_points: int
    passed: bool
    attempted_at: int


def quiz_out(quiz: Quiz, *, with_answers: bool) -> QuizOut:
    return QuizOut(
        id=quiz.id,
        course_id=quiz.course_id,
        lesson_id=quiz.lesson_id,
        title=quiz.title,
        questions=[
            QuestionOut(
                id=q.id,
                question=q.text,
                options=list(q.options),
                correct_answer=q.correct_answer if with_answers else None,
                points=q.points,
            )
            for q in quiz.questions
        ],
        passing_score=quiz.passing_score,
        created_at=quiz.created_at,
    )


def attempt_out(attempt: QuizAttempt) -> AttemptOut:
    return AttemptOut(
        student_id=attempt.student_id,
        quiz_id=attempt.quiz_id,
        answers=list(attempt.answers),
        score=attempt.score,
        total_points=attempt.total_points,
        passed=attempt.passed,
        attempted_at=attempt.attempted_at,
    )


@router.post("", response_model=QuizOut, status_code=status.HTTP_201_CREATED)
def create_quiz(payload: QuizCreateIn, principal: Caller, store: Store) -> QuizOut:
    questions = [
        Question.new(
            id=q.id,
            text=q.question,
            options=tuple(q.options),
            correct_answer=q.correct_answer,
            points=q.points,
        )
        for q in payload.questions
    ]
    quiz = quiz_service.create_quiz(
        store,
        principal.user_id,
        course_id=payload.course_id,
        lesson_id=payload.lesson_id,
        title=payload.title,
        questions=questions,
        passing_score=payload.passing_score,
    )
    return quiz_out(quiz, with_answers=True)


@router.get("/{quiz_id}", response_model=QuizOut)
def get_quiz(quiz_id: str, principal: Caller, store: Store) -> QuizOut:
    quiz = quiz_service.get_quiz(store, quiz_id)
    if quiz is None:
        raise HTTPException(status_code=404, detail="quiz not found")
    course = courses_service.get_course(store, quiz.course_id)
    is_instructor = course is not None and course.instructor_id == principal.user_id
    return quiz_out(quiz, with_answers=is_instructor)


@router.post(
    "/{quiz_id}/attempts",
    response_model=AttemptOut,
    status_code=status.HTTP_201_CREATED,
)
def attempt_quiz(
    quiz_id: str, payload: AttemptIn, principal: Caller, store: Store
) -> AttemptOut:
    attempt = quiz_service.attempt_quiz(
        store, principal.user_id, quiz_id, payload.answers
    )
    return attempt_out(attempt)


@router.get("/{quiz_id}/attempts", response_model=list[AttemptOut])
def get_quiz_attempts(quiz_id: str, principal: Caller, store: Store) -> list[AttemptOut]:
    attempts = quiz_service.get_quiz_attempts(store, principal.user_id, quiz_id)
    return [attempt_out(a) for a in attempts]
