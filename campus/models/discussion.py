from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class Reply:
    id: str
    author_id: str
    author_name: str  # snapshot
    content: str
    created_at: int

    @staticmethod
    def new(
        *, author_id: str, author_name: str, content: str, created_at: int
    ) -> Reply:
        return Reply(
            id=str(uuid4()),
            author_id=author_id,
            author_name=author_name,
            content=content,
            created_at=created_at,
        )


@dataclass(frozen=True, slots=True)
class Discussion:
    id: str
    course_id: str
    author_id: str
    author_name: str  # snapshot
    title: str
    content: str
    replies: tuple[Reply, ...] = ()  # append-only, insertion order
    created_at: int = 0

    @staticmethod
    def new(
        *,
        course_id: str,
        author_id: str,
        author_name: str,
        title: str,
        content: str,
        created_at: int,
    ) -> Discussion:
        return Discussion(
            id=str(uuid4()),
            course_id=course_id,
            author_id=author_id,
            author_name=author_name,
            title=title,
            content=content,
            created_at=created_at,
        )
