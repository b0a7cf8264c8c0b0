from __future__ import annotations

import logging
from dataclasses import replace

from campus.models.course import Course, Lesson
from campus.models.enrollment import Enrollment
from campus.repos.store import EntityStore
from campus.services import guards, progress_service

logger = logging.getLogger(__name__)


def create_course(
    store: EntityStore, caller_id: str, *, title: str, description: str
) -> Course:
    with store.transaction():
        teacher = guards.require_teacher(store, caller_id)
        course = Course.new(
            title=title,
            description=description,
            instructor_id=teacher.id,
            instructor_name=teacher.name,
            created_at=store.now(),
        )
        store.courses.add(course)

    logger.info("Created course id=%s instructor=%s", course.id, caller_id)
    return course


def get_all_courses(store: EntityStore) -> list[Course]:
    with store.read():
        return store.courses.list_all()


def get_course(store: EntityStore, course_id: str) -> Course | None:
    with store.read():
        return store.courses.get_by_id(course_id)


def search_courses(store: EntityStore, query: str) -> list[Course]:
    with store.read():
        return store.courses.search(query)


def get_instructor_courses(store: EntityStore, caller_id: str) -> list[Course]:
    with store.read():
        return store.courses.list_by_instructor(caller_id)


def add_lesson_to_course(
    store: EntityStore,
    caller_id: str,
    course_id: str,
    *,
    title: str,
    content: str,
    order: int,
    video_url: str | None = None,
) -> Lesson:
    with store.transaction():
        course = guards.require_course(store, course_id)
        guards.require_instructor(course, caller_id)

        lesson = Lesson.new(
            title=title, content=content, order=order, video_url=video_url
        )
        # sorted() is stable: a lesson sharing an order value goes after
        # the ones already there.
        lessons = tuple(
            sorted(course.lessons + (lesson,), key=lambda item: item.order)
        )
        updated = replace(course, lessons=lessons, updated_at=store.now())
        store.courses.update(updated)

        # A new lesson changes the denominator for everyone enrolled.
        for enrollment in store.enrollments.list_by_course(course_id):
            store.enrollments.update(progress_service.recompute(enrollment, updated))

    logger.info(
        "Added lesson id=%s to course=%s (now %d lessons)",
        lesson.id,
        course_id,
        len(lessons),
    )
    return lesson


def get_course_enrollments(
    store: EntityStore, caller_id: str, course_id: str
) -> list[Enrollment]:
    """Roster for the instructor's own course."""
    with store.read():
        course = guards.require_course(store, course_id)
        guards.require_instructor(course, caller_id)
        return store.enrollments.list_by_course(course_id)
