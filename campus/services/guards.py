"""Role and ownership checks.

These are plain functions (not FastAPI dependencies) because they need the
store, the caller and sometimes a specific resource.  Call them at the top
of a service operation, inside its transaction.

They only read.  A failing check raises; a passing check returns the
record it had to load anyway, so callers don't look it up twice.

Missing User record -> NotFoundError.  Wrong role or not the owner ->
UnauthorizedError.  The two are kept distinct on purpose: a client that
gets NotFound should send the caller to profile setup, not show "access
denied".
"""

from __future__ import annotations

import logging

from campus.models.course import Course
from campus.models.user import User, UserRole
from campus.repos.store import EntityStore
from campus.services import errors

logger = logging.getLogger(__name__)


def require_no_profile(store: EntityStore, caller_id: str) -> None:
    if store.users.get_by_id(caller_id) is not None:
        logger.warning("Rejected duplicate profile user=%s", caller_id)
        raise errors.AlreadyExistsError("user already exists")


def require_profile(store: EntityStore, caller_id: str) -> User:
    user = store.users.get_by_id(caller_id)
    if user is None:
        logger.warning("Caller has no profile user=%s", caller_id)
        raise errors.NotFoundError("user not found")
    return user


def require_role(store: EntityStore, caller_id: str, role: UserRole) -> User:
    user = require_profile(store, caller_id)
    if user.role is not role:
        logger.warning(
            "Access denied: user=%s role=%s required=%s",
            caller_id,
            user.role.value,
            role.value,
        )
        raise errors.UnauthorizedError(f"only {role.value}s may do this")
    return user


def require_teacher(store: EntityStore, caller_id: str) -> User:
    return require_role(store, caller_id, UserRole.TEACHER)


def require_student(store: EntityStore, caller_id: str) -> User:
    return require_role(store, caller_id, UserRole.STUDENT)


def require_course(store: EntityStore, course_id: str) -> Course:
    course = store.courses.get_by_id(course_id)
    if course is None:
        raise errors.NotFoundError("course not found")
    return course


def require_instructor(course: Course, caller_id: str) -> None:
    if course.instructor_id != caller_id:
        logger.warning(
            "Access denied: user=%s is not instructor of course=%s",
            caller_id,
            course.id,
        )
        raise errors.UnauthorizedError("only the course instructor may do this")
