from __future__ import annotations

import hashlib

import pytest

from campus.models.course import Course
from campus.models.user import UserRole
from campus.repos.store import EntityStore
from campus.services import (
    certificate_service,
    enrollment_service,
    errors,
    users_service,
)
from tests.conftest import FakeClock, seed_course, seed_user


@pytest.fixture
def course(store: EntityStore) -> Course:
    seed_user(store, "t1", UserRole.TEACHER, name="Dr. Hopper")
    seed_user(store, "s1", UserRole.STUDENT, name="Ada")
    return seed_course(store, "t1", title="Compilers", lessons=2)


def _complete(store: EntityStore, student_id: str, course: Course) -> None:
    enrollment_service.enroll_in_course(store, student_id, course.id)
    for lesson in course.lessons:
        enrollment_service.mark_lesson_completed(store, student_id, course.id, lesson.id)


def test_issue_snapshots_names_and_sets_flag(
    store: EntityStore, course: Course, clock: FakeClock
) -> None:
    _complete(store, "s1", course)
    cert = certificate_service.issue_certificate(store, "s1", course.id)

    assert cert.student_id == "s1"
    assert cert.course_id == course.id
    assert cert.student_name == "Ada"
    assert cert.course_title == "Compilers"
    assert cert.instructor_name == "Dr. Hopper"
    assert cert.issued_at == clock.value

    [enrollment] = enrollment_service.get_student_enrollments(store, "s1")
    assert enrollment.certificate_issued is True


def test_fingerprint_is_sha256_of_content(store: EntityStore, course: Course) -> None:
    _complete(store, "s1", course)
    cert = certificate_service.issue_certificate(store, "s1", course.id)

    material = "\x1f".join(
        ("s1", course.id, "Ada", "Compilers", "Dr. Hopper", str(cert.issued_at))
    )
    assert cert.certificate_hash == hashlib.sha256(material.encode()).hexdigest()


def test_fingerprint_differs_per_student() -> None:
    common = {
        "course_id": "c1",
        "student_name": "Sam",
        "course_title": "T",
        "instructor_name": "I",
        "issued_at": 100,
    }
    a = certificate_service.fingerprint(student_id="s1", **common)
    b = certificate_service.fingerprint(student_id="s2", **common)
    assert a != b


def test_issue_twice_is_already_exists(store: EntityStore, course: Course) -> None:
    _complete(store, "s1", course)
    certificate_service.issue_certificate(store, "s1", course.id)

    with pytest.raises(errors.AlreadyExistsError):
        certificate_service.issue_certificate(store, "s1", course.id)
    assert len(certificate_service.get_student_certificates(store, "s1")) == 1


def test_issue_incomplete_course_is_validation(store: EntityStore, course: Course) -> None:
    enrollment_service.enroll_in_course(store, "s1", course.id)
    enrollment_service.mark_lesson_completed(
        store, "s1", course.id, course.lessons[0].id
    )
    with pytest.raises(errors.ValidationError, match="not completed"):
        certificate_service.issue_certificate(store, "s1", course.id)

    [enrollment] = enrollment_service.get_student_enrollments(store, "s1")
    assert enrollment.certificate_issued is False


def test_issue_without_enrollment_is_not_found(store: EntityStore, course: Course) -> None:
    with pytest.raises(errors.NotFoundError):
        certificate_service.issue_certificate(store, "s1", course.id)


def test_renaming_after_issue_does_not_change_certificate(
    store: EntityStore, course: Course
) -> None:
    _complete(store, "s1", course)
    cert = certificate_service.issue_certificate(store, "s1", course.id)

    users_service.update_user_profile(
        store, "s1", name="Augusta", bio="", profile_photo=""
    )
    assert certificate_service.verify_certificate(store, cert.certificate_hash) == cert


def test_verify_unknown_hash_returns_none(store: EntityStore) -> None:
    assert certificate_service.verify_certificate(store, "0" * 64) is None


def test_student_certificates_only_lists_own(
    store: EntityStore, course: Course
) -> None:
    seed_user(store, "s2", UserRole.STUDENT)
    _complete(store, "s1", course)
    certificate_service.issue_certificate(store, "s1", course.id)

    assert certificate_service.get_student_certificates(store, "s2") == []
