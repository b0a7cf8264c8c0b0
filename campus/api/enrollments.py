"""Enrollment and progress endpoints.

POST /v1/courses/{course_id}/enroll                         — students only
GET  /v1/enrollments                                        — caller's enrollments
POST /v1/courses/{course_id}/lessons/{lesson_id}/complete   — record progress
"""

from __future__ import annotations

from fastapi import APIRouter, status
from pydantic import BaseModel

from campus.api.dependencies import Caller, Store
from campus.models.enrollment import Enrollment
from campus.services import enrollment_service

router = APIRouter(tags=["enrollments"])


class EnrollmentOut(BaseModel):
    student_id: str
    course_id: str
    enrolled_at: int
    completed_lessons: list[str]
    progress_percentage: int
    completed: bool
    certificate_issued: bool


def enrollment_out(enrollment: Enrollment) -> EnrollmentOut:
    return EnrollmentOut(
        student_id=enrollment.student_id,
        course_id=enrollment.course_id,
        enrolled_at=enrollment.enrolled_at,
        completed_lessons=list(enrollment.completed_lessons),
        progress_percentage=enrollment.progress_percentage,
        completed=enrollment.completed,
        certificate_issued=enrollment.certificate_issued,
    )


@router.post(
    "/v1/courses/{course_id}/enroll",
    response_model=EnrollmentOut,
    status_code=status.HTTP_201_CREATED,
)
def enroll_in_course(course_id: str, principal: Caller, store: Store) -> EnrollmentOut:
    enrollment = enrollment_service.enroll_in_course(
        store, principal.user_id, course_id
    )
    return enrollment_out(enrollment)


@router.get("/v1/enrollments", response_model=list[EnrollmentOut])
def get_student_enrollments(principal: Caller, store: Store) -> list[EnrollmentOut]:
    enrollments = enrollment_service.get_student_enrollments(store, principal.user_id)
    return [enrollment_out(e) for e in enrollments]


@router.post(
    "/v1/courses/{course_id}/lessons/{lesson_id}/complete",
    response_model=EnrollmentOut,
)
def mark_lesson_completed(
    course_id: str, lesson_id: str, principal: Caller, store: Store
) -> EnrollmentOut:
    """Idempotent: completing the same lesson twice returns the same state."""
    enrollment = enrollment_service.mark_lesson_completed(
        store, principal.user_id, course_id, lesson_id
    )
    return enrollment_out(enrollment)
