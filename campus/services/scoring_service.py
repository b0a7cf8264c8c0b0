from __future__ import annotations

from campus.models.quiz import Quiz, QuizAttempt
from campus.services import errors


def grade(
    quiz: Quiz, student_id: str, answers: tuple[int, ...], attempted_at: int
) -> QuizAttempt:
    """Score one submission against the quiz's answer key.

    answers[i] is the chosen option index for quiz.questions[i].  A
    submission of the wrong length is rejected outright rather than
    partially graded.  The pass threshold is inclusive.
    """
    if len(answers) != len(quiz.questions):
        raise errors.ValidationError(
            f"expected {len(quiz.questions)} answers, got {len(answers)}"
        )

    score = sum(
        question.points
        for question, answer in zip(quiz.questions, answers, strict=True)
        if answer == question.correct_answer
    )
    return QuizAttempt(
        student_id=student_id,
        quiz_id=quiz.id,
        answers=answers,
        score=score,
        total_points=quiz.total_points,
        passed=score >= quiz.passing_score,
        attempted_at=attempted_at,
    )
