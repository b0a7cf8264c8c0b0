from __future__ import annotations

import logging

from campus.core.metrics import LESSON_COMPLETIONS
from campus.models.enrollment import Enrollment
from campus.repos.store import EntityStore
from campus.services import errors, guards, progress_service

logger = logging.getLogger(__name__)


def enroll_in_course(store: EntityStore, caller_id: str, course_id: str) -> Enrollment:
    with store.transaction():
        guards.require_student(store, caller_id)
        guards.require_course(store, course_id)

        if store.enrollments.get(caller_id, course_id) is not None:
            logger.warning(
                "Rejected duplicate enrollment user=%s course=%s", caller_id, course_id
            )
            raise errors.AlreadyExistsError("already enrolled in this course")

        enrollment = Enrollment.new(
            student_id=caller_id, course_id=course_id, enrolled_at=store.now()
        )
        store.enrollments.add(enrollment)

    logger.info("Enrolled user=%s course=%s", caller_id, course_id)
    return enrollment


def get_student_enrollments(store: EntityStore, caller_id: str) -> list[Enrollment]:
    with store.read():
        return store.enrollments.list_by_student(caller_id)


def mark_lesson_completed(
    store: EntityStore, caller_id: str, course_id: str, lesson_id: str
) -> Enrollment:
    """Record a lesson completion and refresh progress. Idempotent."""
    with store.transaction():
        enrollment = store.enrollments.get(caller_id, course_id)
        if enrollment is None:
            raise errors.NotFoundError("enrollment not found")
        course = guards.require_course(store, course_id)
        # Only lessons that exist count.  This also makes completion in a
        # zero-lesson course unreachable.
        if course.find_lesson(lesson_id) is None:
            raise errors.NotFoundError("lesson not found")

        updated = progress_service.record_completion(enrollment, course, lesson_id)
        changed = updated is not enrollment
        if changed:
            store.enrollments.update(updated)

    if changed:
        LESSON_COMPLETIONS.inc()
        logger.info(
            "Lesson completed user=%s course=%s lesson=%s progress=%d%%",
            caller_id,
            course_id,
            lesson_id,
            updated.progress_percentage,
        )
    return updated
