from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Certificate:
    """Issued course-completion certificate.

    Name fields are copied at issuance so the record keeps reading the same
    after later profile edits. certificate_hash is an opaque content
    fingerprint used for public verification lookups.
    """

    student_id: str
    course_id: str
    course_title: str
    student_name: str
    instructor_name: str
    issued_at: int
    certificate_hash: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.student_id, self.course_id)
