"""Profile endpoints for the calling identity.

POST /v1/users/me  — create own profile (once; role fixed from then on)
GET  /v1/users/me  — load own profile
PUT  /v1/users/me  — edit name, bio and photo (not role)
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from campus.api.dependencies import Caller, Store
from campus.models.user import User, UserRole
from campus.services import users_service

router = APIRouter(prefix="/v1/users", tags=["users"])


class UserOut(BaseModel):
    id: str
    name: str
    role: UserRole
    bio: str
    profile_photo: str
    created_at: int


class UserCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    role: UserRole
    bio: str = ""
    profile_photo: str = ""


class UserUpdateIn(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    bio: str = ""
    profile_photo: str = ""


def user_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        name=user.name,
        role=user.role,
        bio=user.bio,
        profile_photo=user.profile_photo,
        created_at=user.created_at,
    )


@router.post("/me", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreateIn, principal: Caller, store: Store) -> UserOut:
    user = users_service.create_user(
        store,
        principal.user_id,
        name=payload.name,
        role=payload.role,
        bio=payload.bio,
        profile_photo=payload.profile_photo,
    )
    return user_out(user)


@router.get("/me", response_model=UserOut)
def get_user(principal: Caller, store: Store) -> UserOut:
    user = users_service.get_user(store, principal.user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="user not found")
    return user_out(user)


@router.put("/me", response_model=UserOut)
def update_user_profile(
    payload: UserUpdateIn, principal: Caller, store: Store
) -> UserOut:
    user = users_service.update_user_profile(
        store,
        principal.user_id,
        name=payload.name,
        bio=payload.bio,
        profile_photo=payload.profile_photo,
    )
    return user_out(user)
