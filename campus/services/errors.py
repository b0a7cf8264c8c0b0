"""Failure taxonomy shared by every service.

Services raise these; the API layer maps them to HTTP status codes
(see campus.api.errors). None of them is fatal to the process, and a
failed operation never leaves a partial write behind.
"""

from __future__ import annotations


class CampusError(Exception):
    kind = "error"


class NotFoundError(CampusError):
    """A referenced entity (or the caller's own User) does not exist."""

    kind = "not_found"


class AlreadyExistsError(CampusError):
    """A uniqueness invariant would be violated."""

    kind = "already_exists"


class UnauthorizedError(CampusError):
    """Role or ownership check failed."""

    kind = "unauthorized"


class ValidationError(CampusError, ValueError):
    """Well-formed request that breaks a business rule."""

    kind = "validation"
