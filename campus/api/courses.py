"""Course catalogue and authoring endpoints.

GET  /v1/courses                          — whole catalogue
GET  /v1/courses/mine                     — courses the caller teaches
GET  /v1/courses/search?q=                — title/description substring match
GET  /v1/courses/{course_id}              — one course with its lessons
POST /v1/courses                          — create (teachers only)
POST /v1/courses/{course_id}/lessons      — add a lesson (instructor only)
GET  /v1/courses/{course_id}/enrollments  — roster (instructor only)
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from campus.api.dependencies import Caller, Store
from campus.api.enrollments import EnrollmentOut, enrollment_out
from campus.models.course import Course, Lesson
from campus.services import courses_service

router = APIRouter(prefix="/v1/courses", tags=["courses"])


class LessonOut(BaseModel):
    id: str
    title: str
    content: str
    video_url: str | None
    quiz_id: str | None
    order: int


class CourseOut(BaseModel):
    id: str
    title: str
    description: str
    instructor_id: str
    instructor_name: str
    lessons: list[LessonOut]
    created_at: int
    updated_at: int


class CourseCreateIn(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = ""


class LessonCreateIn(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    content: str = ""
    video_url: str | None = None
    order: int = Field(ge=0)


def lesson_out(lesson: Lesson) -> LessonOut:
    return LessonOut(
        id=lesson.id,
        title=lesson.title,
        content=lesson.content,
        video_url=lesson.video_url,
        quiz_id=lesson.quiz_id,
        order=lesson.order,
    )


def course_out(course: Course) -> CourseOut:
    return CourseOut(
        id=course.id,
        title=course.title,
        description=course.description,
        instructor_id=course.instructor_id,
        instructor_name=course.instructor_name,
        lessons=[lesson_out(lesson) for lesson in course.lessons],
        created_at=course.created_at,
        updated_at=course.updated_at,
    )


@router.post("", response_model=CourseOut, status_code=status.HTTP_201_CREATED)
def create_course(payload: CourseCreateIn, principal: Caller, store: Store) -> CourseOut:
    course = courses_service.create_course(
        store,
        principal.user_id,
        title=payload.title,
        description=payload.description,
    )
    return course_out(course)


@router.get("", response_model=list[CourseOut])
def get_all_courses(_principal: Caller, store: Store) -> list[CourseOut]:
    return [course_out(c) for c in courses_service.get_all_courses(store)]


# Literal paths are registered before /{course_id} so they aren't
# swallowed by the path parameter.


@router.get("/mine", response_model=list[CourseOut])
def get_instructor_courses(principal: Caller, store: Store) -> list[CourseOut]:
    courses = courses_service.get_instructor_courses(store, principal.user_id)
    return [course_out(c) for c in courses]


@router.get("/search", response_model=list[CourseOut])
def search_courses(
    _principal: Caller,
    store: Store,
    q: str = Query(default="", max_length=200),
) -> list[CourseOut]:
    return [course_out(c) for c in courses_service.search_courses(store, q)]


@router.get("/{course_id}", response_model=CourseOut)
def get_course(course_id: str, _principal: Caller, store: Store) -> CourseOut:
    course = courses_service.get_course(store, course_id)
    if course is None:
        raise HTTPException(status_code=404, detail="course not found")
    return course_out(course)


@router.post(
    "/{course_id}/lessons",
    response_model=LessonOut,
    status_code=status.HTTP_201_CREATED,
)
def add_lesson_to_course(
    course_id: str,
    payload: LessonCreateIn,
    principal: Caller,
    store: Store,
) -> LessonOut:
    lesson = courses_service.add_lesson_to_course(
        store,
        principal.user_id,
        course_id,
        title=payload.title,
        content=payload.content,
        order=payload.order,
        video_url=payload.video_url,
    )
    return lesson_out(lesson)


@router.get("/{course_id}/enrollments", response_model=list[EnrollmentOut])
def get_course_enrollments(
    course_id: str, principal: Caller, store: Store
) -> list[EnrollmentOut]:
    enrollments = courses_service.get_course_enrollments(
        store, principal.user_id, course_id
    )
    return [enrollment_out(e) for e in enrollments]
