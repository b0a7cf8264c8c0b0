"""Certificate issuance and verification endpoints.

POST /v1/courses/{course_id}/certificate     — issue for a completed course
GET  /v1/certificates                        — caller's certificates
GET  /v1/certificates/{certificate_hash}/verify — public lookup, no token
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from campus.api.dependencies import Caller, Store
from campus.models.certificate import Certificate
from campus.services import certificate_service

router = APIRouter(tags=["certificates"])


class CertificateOut(BaseModel):
    student_id: str
    course_id: str
    course_title: str
    student_name: str
    instructor_name: str
    issued_at: int
    certificate_hash: str


def certificate_out(certificate: Certificate) -> CertificateOut:
    return CertificateOut(
        student_id=certificate.student_id,
        course_id=certificate.course_id,
        course_title=certificate.course_title,
        student_name=certificate.student_name,
        instructor_name=certificate.instructor_name,
        issued_at=certificate.issued_at,
        certificate_hash=certificate.certificate_hash,
    )


@router.post(
    "/v1/courses/{course_id}/certificate",
    response_model=CertificateOut,
    status_code=status.HTTP_201_CREATED,
)
def issue_certificate(
    course_id: str, principal: Caller, store: Store
) -> CertificateOut:
    certificate = certificate_service.issue_certificate(
        store, principal.user_id, course_id
    )
    return certificate_out(certificate)


@router.get("/v1/certificates", response_model=list[CertificateOut])
def get_student_certificates(principal: Caller, store: Store) -> list[CertificateOut]:
    certificates = certificate_service.get_student_certificates(
        store, principal.user_id
    )
    return [certificate_out(c) for c in certificates]


@router.get(
    "/v1/certificates/{certificate_hash}/verify", response_model=CertificateOut
)
def verify_certificate(certificate_hash: str, store: Store) -> CertificateOut:
    """Public: anyone holding a fingerprint can check what it certifies."""
    certificate = certificate_service.verify_certificate(store, certificate_hash)
    if certificate is None:
        raise HTTPException(status_code=404, detail="certificate not found")
    return certificate_out(certificate)
