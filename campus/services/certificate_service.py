"""Course-completion certificates.

ISSUE AT MOST ONCE
-------------------
Preconditions are checked in a fixed order, each with its own error:

  1. the caller is enrolled in the course            -> NotFoundError
  2. the enrollment is completed                     -> ValidationError
  3. no certificate was issued for it yet            -> AlreadyExistsError

On success the certificate is appended AND the enrollment's
certificate_issued flag is set inside one transaction, so there is never
a certificate without the flag or a flag without the certificate.

THE FINGERPRINT
----------------
certificate_hash is a SHA-256 digest over the certificate's content.  It
is an opaque, collision-resistant lookup key for verify_certificate, not
a signature: anyone can compute it from the same fields, so it proves
nothing about who issued the certificate.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import replace

from campus.core.metrics import CERTIFICATES_ISSUED
from campus.models.certificate import Certificate
from campus.repos.store import EntityStore
from campus.services import errors

logger = logging.getLogger(__name__)


def fingerprint(
    *,
    student_id: str,
    course_id: str,
    student_name: str,
    course_title: str,
    instructor_name: str,
    issued_at: int,
) -> str:
    # Ids are included so two students with the same name completing the
    # same course in the same second still get distinct fingerprints.
    material = "\x1f".join(
        (
            student_id,
            course_id,
            student_name,
            course_title,
            instructor_name,
            str(issued_at),
        )
    )
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


def issue_certificate(store: EntityStore, caller_id: str, course_id: str) -> Certificate:
    with store.transaction():
        enrollment = store.enrollments.get(caller_id, course_id)
        if enrollment is None:
            raise errors.NotFoundError("enrollment not found")
        if not enrollment.completed:
            logger.warning(
                "Certificate refused, course incomplete user=%s course=%s progress=%d%%",
                caller_id,
                course_id,
                enrollment.progress_percentage,
            )
            raise errors.ValidationError("course not completed")
        if enrollment.certificate_issued:
            logger.warning(
                "Certificate refused, already issued user=%s course=%s",
                caller_id,
                course_id,
            )
            raise errors.AlreadyExistsError("certificate already issued")

        user = store.users.get_by_id(caller_id)
        course = store.courses.get_by_id(course_id)
        if user is None or course is None:
            raise errors.NotFoundError("user or course not found")

        issued_at = store.now()
        certificate = Certificate(
            student_id=caller_id,
            course_id=course_id,
            course_title=course.title,
            student_name=user.name,
            instructor_name=course.instructor_name,
            issued_at=issued_at,
            certificate_hash=fingerprint(
                student_id=caller_id,
                course_id=course_id,
                student_name=user.name,
                course_title=course.title,
                instructor_name=course.instructor_name,
                issued_at=issued_at,
            ),
        )
        store.certificates.append(certificate)
        store.enrollments.update(replace(enrollment, certificate_issued=True))

    CERTIFICATES_ISSUED.inc()
    logger.info(
        "Issued certificate user=%s course=%s hash=%s",
        caller_id,
        course_id,
        certificate.certificate_hash[:12],
    )
    return certificate


def get_student_certificates(store: EntityStore, caller_id: str) -> list[Certificate]:
    with store.read():
        return store.certificates.list_by_student(caller_id)


def verify_certificate(store: EntityStore, certificate_hash: str) -> Certificate | None:
    with store.read():
        return store.certificates.get_by_hash(certificate_hash)
