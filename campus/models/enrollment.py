from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Enrollment:
    """Ties one student to one course. Keyed by (student_id, course_id).

    completed_lessons has set semantics; the tuple keeps insertion order
    only so responses are stable.
    """

    student_id: str
    course_id: str
    enrolled_at: int
    completed_lessons: tuple[str, ...] = ()
    progress_percentage: int = 0
    completed: bool = False
    certificate_issued: bool = False

    @staticmethod
    def new(*, student_id: str, course_id: str, enrolled_at: int) -> Enrollment:
        return Enrollment(
            student_id=student_id, course_id=course_id, enrolled_at=enrolled_at
        )

    @property
    def key(self) -> tuple[str, str]:
        return (self.student_id, self.course_id)
