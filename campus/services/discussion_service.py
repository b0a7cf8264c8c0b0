from __future__ import annotations

import logging
from dataclasses import replace

from campus.models.discussion import Discussion, Reply
from campus.repos.store import EntityStore
from campus.services import errors, guards

logger = logging.getLogger(__name__)


def create_discussion(
    store: EntityStore,
    caller_id: str,
    course_id: str,
    *,
    title: str,
    content: str,
) -> Discussion:
    """Open a thread on a course. Any user, either role."""
    with store.transaction():
        author = guards.require_profile(store, caller_id)
        guards.require_course(store, course_id)
        discussion = Discussion.new(
            course_id=course_id,
            author_id=author.id,
            author_name=author.name,
            title=title,
            content=content,
            created_at=store.now(),
        )
        store.discussions.add(discussion)

    logger.info(
        "Created discussion id=%s course=%s author=%s",
        discussion.id,
        course_id,
        caller_id,
    )
    return discussion


def get_course_discussions(store: EntityStore, course_id: str) -> list[Discussion]:
    with store.read():
        return store.discussions.list_by_course(course_id)


def reply_to_discussion(
    store: EntityStore, caller_id: str, discussion_id: str, *, content: str
) -> Reply:
    # Replies are append-only: no edit, no delete.
    with store.transaction():
        author = guards.require_profile(store, caller_id)
        discussion = store.discussions.get_by_id(discussion_id)
        if discussion is None:
            raise errors.NotFoundError("discussion not found")

        reply = Reply.new(
            author_id=author.id,
            author_name=author.name,
            content=content,
            created_at=store.now(),
        )
        store.discussions.update(
            replace(discussion, replies=discussion.replies + (reply,))
        )

    logger.info("Reply id=%s on discussion=%s by=%s", reply.id, discussion_id, caller_id)
    return reply
