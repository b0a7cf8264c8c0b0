from __future__ import annotations

import pytest

from campus.models.quiz import Question, Quiz
from campus.services import errors, scoring_service


def _quiz(passing_score: int = 3) -> Quiz:
    return Quiz.new(
        course_id="c1",
        lesson_id="l1",
        title="Checkpoint",
        questions=(
            Question.new(text="2+2?", options=("3", "4"), correct_answer=1, points=2),
            Question.new(text="Sky?", options=("blue", "red"), correct_answer=0, points=1),
            Question.new(
                text="Pi?", options=("3.14", "2.71", "1.61"), correct_answer=0, points=3
            ),
        ),
        passing_score=passing_score,
        created_at=0,
    )


def test_all_correct_scores_total() -> None:
    quiz = _quiz()
    attempt = scoring_service.grade(quiz, "s1", (1, 0, 0), attempted_at=5)
    assert attempt.score == 6
    assert attempt.total_points == 6
    assert attempt.passed is True
    assert attempt.attempted_at == 5
    assert attempt.answers == (1, 0, 0)


def test_partial_credit_sums_points_of_correct_answers() -> None:
    attempt = scoring_service.grade(_quiz(), "s1", (1, 1, 2), attempted_at=0)
    assert attempt.score == 2
    assert attempt.passed is False


def test_passing_threshold_is_inclusive() -> None:
    attempt = scoring_service.grade(_quiz(passing_score=3), "s1", (1, 0, 1), 0)
    assert attempt.score == 3
    assert attempt.passed is True


def test_out_of_range_answer_scores_zero_for_that_question() -> None:
    attempt = scoring_service.grade(_quiz(), "s1", (7, 0, 0), attempted_at=0)
    assert attempt.score == 4


@pytest.mark.parametrize("answers", [(), (1,), (1, 0, 0, 0)])
def test_wrong_answer_count_is_rejected(answers: tuple[int, ...]) -> None:
    with pytest.raises(errors.ValidationError, match="expected 3 answers"):
        scoring_service.grade(_quiz(), "s1", answers, attempted_at=0)


def test_weighted_quiz_second_answer_only() -> None:
    quiz = Quiz.new(
        course_id="c1",
        lesson_id="l1",
        title="Weighted",
        questions=(
            Question.new(text="a?", options=("x", "y"), correct_answer=0, points=10),
            Question.new(text="b?", options=("x", "y"), correct_answer=1, points=20),
        ),
        passing_score=20,
        created_at=0,
    )
    attempt = scoring_service.grade(quiz, "s1", (1, 1), attempted_at=0)
    assert attempt.score == 20
    assert attempt.total_points == 30
    assert attempt.passed is True
