"""Course discussion threads.

POST /v1/courses/{course_id}/discussions   — open a thread (any user)
GET  /v1/courses/{course_id}/discussions   — list a course's threads
POST /v1/discussions/{discussion_id}/replies — append a reply
"""

from __future__ import annotations

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from campus.api.dependencies import Caller, Store
from campus.models.discussion import Discussion, Reply
from campus.services import discussion_service

router = APIRouter(tags=["discussions"])


class ReplyOut(BaseModel):
    id: str
    author_id: str
    author_name: str
    content: str
    created_at: int


class DiscussionOut(BaseModel):
    id: str
    course_id: str
    author_id: str
    author_name: str
    title: str
    content: str
    replies: list[ReplyOut]
    created_at: int


class DiscussionCreateIn(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)


class ReplyCreateIn(BaseModel):
    content: str = Field(min_length=1)


def reply_out(reply: Reply) -> ReplyOut:
    return ReplyOut(
        id=reply.id,
        author_id=reply.author_id,
        author_name=reply.author_name,
        content=reply.content,
        created_at=reply.created_at,
    )


def discussion_out(discussion: Discussion) -> DiscussionOut:
    return DiscussionOut(
        id=discussion.id,
        course_id=discussion.course_id,
        author_id=discussion.author_id,
        author_name=discussion.author_name,
        title=discussion.title,
        content=discussion.content,
        replies=[reply_out(r) for r in discussion.replies],
        created_at=discussion.created_at,
    )


@router.post(
    "/v1/courses/{course_id}/discussions",
    response_model=DiscussionOut,
    status_code=status.HTTP_201_CREATED,
)
def create_discussion(
    course_id: str, payload: DiscussionCreateIn, principal: Caller, store: Store
) -> DiscussionOut:
    discussion = discussion_service.create_discussion(
        store,
        principal.user_id,
        course_id,
        title=payload.title,
        content=payload.content,
    )
    return discussion_out(discussion)


@router.get("/v1/courses/{course_id}/discussions", response_model=list[DiscussionOut])
def get_course_discussions(
    course_id: str, _principal: Caller, store: Store
) -> list[DiscussionOut]:
    discussions = discussion_service.get_course_discussions(store, course_id)
    return [discussion_out(d) for d in discussions]


@router.post(
    "/v1/discussions/{discussion_id}/replies",
    response_model=ReplyOut,
    status_code=status.HTTP_201_CREATED,
)
def reply_to_discussion(
    discussion_id: str, payload: ReplyCreateIn, principal: Caller, store: Store
) -> ReplyOut:
    reply = discussion_service.reply_to_discussion(
        store, principal.user_id, discussion_id, content=payload.content
    )
    return reply_out(reply)
