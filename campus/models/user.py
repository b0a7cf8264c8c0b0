from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """Closed set of platform roles. Fixed for the lifetime of a user."""

    STUDENT = "student"
    TEACHER = "teacher"


@dataclass(frozen=True, slots=True)
class User:
    id: str  # caller identity, not generated
    name: str
    role: UserRole
    bio: str = ""
    profile_photo: str = ""
    created_at: int = 0

    @staticmethod
    def new(
        *,
        id: str,
        name: str,
        role: UserRole,
        bio: str = "",
        profile_photo: str = "",
        created_at: int,
    ) -> User:
        return User(
            id=id,
            name=name,
            role=role,
            bio=bio,
            profile_photo=profile_photo,
            created_at=created_at,
        )
