"""Derived progress state for enrollments.

progress_percentage and completed are never set directly by a caller;
they are recomputed from the enrollment's completed lessons against the
course's CURRENT lesson list.  Two events trigger a recompute:

  - a student marks a lesson completed (campus.services.enrollment_service)
  - an instructor adds a lesson (campus.services.courses_service), which
    lowers the percentage of everyone already enrolled

Invariant kept by compute_progress: 0 <= percentage <= 100 and
completed is True exactly when percentage == 100.
"""

from __future__ import annotations

from dataclasses import replace

from campus.models.course import Course
from campus.models.enrollment import Enrollment


def compute_progress(completed_count: int, total_lessons: int) -> tuple[int, bool]:
    """Return (percentage, completed), floored to a whole percent.

    A course with no lessons has nothing to complete: (0, False).
    """
    if total_lessons <= 0:
        return 0, False
    completed_count = min(completed_count, total_lessons)
    percentage = (completed_count * 100) // total_lessons
    return percentage, completed_count == total_lessons


def recompute(enrollment: Enrollment, course: Course) -> Enrollment:
    """Refresh derived fields. Lessons no longer in the course are not counted."""
    live = course.lesson_ids
    done = sum(1 for lesson_id in enrollment.completed_lessons if lesson_id in live)
    percentage, completed = compute_progress(done, len(course.lessons))
    return replace(enrollment, progress_percentage=percentage, completed=completed)


def record_completion(
    enrollment: Enrollment, course: Course, lesson_id: str
) -> Enrollment:
    """Add lesson_id to the completed set and recompute.

    Re-marking a lesson already in the set returns the enrollment unchanged.
    """
    if lesson_id in enrollment.completed_lessons:
        return enrollment
    marked = replace(
        enrollment, completed_lessons=enrollment.completed_lessons + (lesson_id,)
    )
    return recompute(marked, course)
