"""EntityStore — every table behind one lock.

WHY ONE LOCK FOR EVERYTHING
----------------------------
The business rules here span tables: issuing a certificate reads an
enrollment, a user and a course, then appends to the certificate log AND
flips a flag on the enrollment.  If two callers could interleave inside
that sequence, both could pass the "not yet issued" check and mint two
certificates.

FastAPI runs plain ``def`` endpoints on a thread pool, so callers really
do run in parallel.  Rather than reasoning about per-table locks (and
their ordering), every operation holds a single re-entrant lock for its
whole duration.  The result is equivalent to a strictly serial stream of
calls: no operation ever observes another one half-done.

Throughput is not the point of this store.  Operations are pure in-memory
work measured in microseconds, so a global lock costs nothing noticeable.

ROLLBACK
---------
``transaction()`` snapshots every table on entry.  If the body raises, all
tables are restored before the lock is released, so a failed operation
leaves no trace even if it had already written to one table.  Entities
are frozen dataclasses, so a shallow copy of each table is a complete
snapshot.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from campus.repos.certificate_repo import CertificateLog, InMemoryCertificateLog
from campus.repos.course_repo import CourseRepo, InMemoryCourseRepo
from campus.repos.discussion_repo import DiscussionRepo, InMemoryDiscussionRepo
from campus.repos.enrollment_repo import EnrollmentRepo, InMemoryEnrollmentRepo
from campus.repos.quiz_repo import (
    InMemoryQuizAttemptLog,
    InMemoryQuizRepo,
    QuizAttemptLog,
    QuizRepo,
)
from campus.repos.user_repo import InMemoryUserRepo, UserRepo

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def _utc_now() -> int:
    return int(datetime.now(UTC).timestamp())


class EntityStore:
    """Process-wide state. Build one at startup and pass it to services."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.users: UserRepo = InMemoryUserRepo()
        self.courses: CourseRepo = InMemoryCourseRepo()
        self.quizzes: QuizRepo = InMemoryQuizRepo()
        self.enrollments: EnrollmentRepo = InMemoryEnrollmentRepo()
        self.quiz_attempts: QuizAttemptLog = InMemoryQuizAttemptLog()
        self.discussions: DiscussionRepo = InMemoryDiscussionRepo()
        self.certificates: CertificateLog = InMemoryCertificateLog()

        self._clock = clock or _utc_now
        self._last_now = 0
        self._lock = threading.RLock()

    def _tables(self) -> tuple:
        return (
            self.users,
            self.courses,
            self.quizzes,
            self.enrollments,
            self.quiz_attempts,
            self.discussions,
            self.certificates,
        )

    def now(self) -> int:
        """Current epoch seconds; never earlier than a previous reading."""
        with self._lock:
            self._last_now = max(self._last_now, self._clock())
            return self._last_now

    @contextmanager
    def read(self) -> Iterator[EntityStore]:
        with self._lock:
            yield self

    @contextmanager
    def transaction(self) -> Iterator[EntityStore]:
        with self._lock:
            saved = [(table, table.snapshot()) for table in self._tables()]
            try:
                yield self
            except Exception:
                for table, state in saved:
                    table.restore(state)
                logger.debug("Transaction rolled back")
                raise

    def counts(self) -> dict[str, int]:
        """Row count per table, for the health endpoint."""
        names = (
            "users",
            "courses",
            "quizzes",
            "enrollments",
            "quiz_attempts",
            "discussions",
            "certificates",
        )
        with self._lock:
            return {
                name: len(table.snapshot())
                for name, table in zip(names, self._tables(), strict=True)
            }
