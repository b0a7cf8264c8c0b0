from __future__ import annotations

from typing import Protocol

from campus.models.user import User


class UserRepo(Protocol):
    def get_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> None: ...
    def update(self, user: User) -> None: ...
    def snapshot(self) -> dict[str, User]: ...
    def restore(self, state: dict[str, User]) -> None: ...


class InMemoryUserRepo:
    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    def add(self, user: User) -> None:
        if user.id in self._by_id:
            raise ValueError("user already exists")
        self._by_id[user.id] = user

    def update(self, user: User) -> None:
        if user.id not in self._by_id:
            raise KeyError("user not found")
        self._by_id[user.id] = user

    def snapshot(self) -> dict[str, User]:
        return dict(self._by_id)

    def restore(self, state: dict[str, User]) -> None:
        self._by_id = dict(state)
