from __future__ import annotations

import logging
from dataclasses import replace

from campus.models.user import User, UserRole
from campus.repos.store import EntityStore
from campus.services import errors, guards

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        logger.warning("Rejected blank name")
        raise errors.ValidationError("name must be non-empty")
    return name


def create_user(
    store: EntityStore,
    caller_id: str,
    *,
    name: str,
    role: UserRole,
    bio: str = "",
    profile_photo: str = "",
) -> User:
    """Create the caller's profile. One per identity; role is fixed for good."""
    with store.transaction():
        guards.require_no_profile(store, caller_id)
        user = User.new(
            id=caller_id,
            name=_clean_name(name),
            role=role,
            bio=bio,
            profile_photo=profile_photo,
            created_at=store.now(),
        )
        store.users.add(user)

    logger.info("Created user id=%s role=%s", user.id, user.role.value)
    return user


def get_user(store: EntityStore, caller_id: str) -> User | None:
    with store.read():
        return store.users.get_by_id(caller_id)


def update_user_profile(
    store: EntityStore,
    caller_id: str,
    *,
    name: str,
    bio: str,
    profile_photo: str,
) -> User:
    # Role is not editable.  Names already copied into courses, discussions
    # and certificates keep their old value.
    with store.transaction():
        user = guards.require_profile(store, caller_id)
        updated = replace(
            user, name=_clean_name(name), bio=bio, profile_photo=profile_photo
        )
        store.users.update(updated)

    logger.info("Updated profile user=%s", caller_id)
    return updated
