"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from discuss.domain.model import Comment
from discuss.domain.value import ROOT_COMMENT_ID, CommentId, CommentStatus, PostId

logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: int | None,
    parent_id: int = ROOT_COMMENT_ID,
    post_id: int = 1,
    status: CommentStatus = CommentStatus.PUBLISHED,
    content: str | None = None,
) -> Comment:
    """Helper to build a comment for tests.

    Creation time grows with the ID so newest-first order matches
    descending ID order.
    """
    offset = timedelta(minutes=comment_id or 0)
    return Comment(
        id=CommentId(comment_id) if comment_id is not None else None,
        post_id=PostId(post_id),
        parent_id=CommentId(parent_id),
        author=f"author-{comment_id}",
        email=f"author-{comment_id}@example.com",
        content=content or f"Comment {comment_id}",
        status=status,
        gravatar_md5="0" * 32,
        created_at=BASE_TIME + offset,
        updated_at=BASE_TIME + offset,
    )
