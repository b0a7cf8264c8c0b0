from __future__ import annotations

from typing import Protocol

from campus.models.certificate import Certificate


class CertificateLog(Protocol):
    def get_by_hash(self, certificate_hash: str) -> Certificate | None: ...
    def append(self, certificate: Certificate) -> None: ...
    def list_by_student(self, student_id: str) -> list[Certificate]: ...
    def snapshot(self) -> list[Certificate]: ...
    def restore(self, state: list[Certificate]) -> None: ...


class InMemoryCertificateLog:
    """Append-only certificate log with a lookup index on the fingerprint.

    The (student_id, course_id) uniqueness check here is the storage-level
    backstop for issue-at-most-once; the service checks the enrollment flag
    first and reports the friendlier error.
    """

    def __init__(self) -> None:
        self._entries: list[Certificate] = []
        self._by_key: dict[tuple[str, str], Certificate] = {}
        self._by_hash: dict[str, Certificate] = {}

    def get_by_hash(self, certificate_hash: str) -> Certificate | None:
        return self._by_hash.get(certificate_hash)

    def append(self, certificate: Certificate) -> None:
        if certificate.key in self._by_key:
            raise ValueError("certificate already issued")
        if certificate.certificate_hash in self._by_hash:
            raise ValueError("certificate hash collision")
        self._entries.append(certificate)
        self._by_key[certificate.key] = certificate
        self._by_hash[certificate.certificate_hash] = certificate

    def list_by_student(self, student_id: str) -> list[Certificate]:
        return [c for c in self._entries if c.student_id == student_id]

    def snapshot(self) -> list[Certificate]:
        return list(self._entries)

    def restore(self, state: list[Certificate]) -> None:
        self._entries = list(state)
        self._by_key = {c.key: c for c in self._entries}
        self._by_hash = {c.certificate_hash: c for c in self._entries}
