from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class Lesson:
    id: str
    title: str
    content: str
    order: int
    video_url: str | None = None
    quiz_id: str | None = None

    @staticmethod
    def new(
        *, title: str, content: str, order: int, video_url: str | None = None
    ) -> Lesson:
        return Lesson(
            id=str(uuid4()),
            title=title,
            content=content,
            order=order,
            video_url=video_url,
        )


@dataclass(frozen=True, slots=True)
class Course:
    id: str
    title: str
    description: str
    instructor_id: str
    instructor_name: str  # snapshot at creation, never re-synced
    lessons: tuple[Lesson, ...] = ()  # sorted by Lesson.order
    created_at: int = 0
    updated_at: int = 0

    @staticmethod
    def new(
        *,
        title: str,
        description: str,
        instructor_id: str,
        instructor_name: str,
        created_at: int,
    ) -> Course:
        return Course(
            id=str(uuid4()),
            title=title,
            description=description,
            instructor_id=instructor_id,
            instructor_name=instructor_name,
            created_at=created_at,
            updated_at=created_at,
        )

    @property
    def lesson_ids(self) -> frozenset[str]:
        return frozenset(lesson.id for lesson in self.lessons)

    def find_lesson(self, lesson_id: str) -> Lesson | None:
        return next((lesson for lesson in self.lessons if lesson.id == lesson_id), None)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()
