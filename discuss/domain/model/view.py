"""Comment views.

Views are built fresh per request from loaded Comment records and are
discarded once the response is produced. Unlike entities they are mutable:
tree nodes collect children and reply views receive their parent after
construction.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, CommentStatus, PostId


@dataclass
class CommentView:
    """Display fields of a comment plus its formatted avatar URL."""

    id: CommentId
    post_id: PostId
    parent_id: CommentId
    author: str
    email: str
    author_url: str | None
    content: str
    status: CommentStatus
    gravatar_md5: str | None
    ip_address: str | None
    user_agent: str | None
    is_admin: bool
    allow_notification: bool
    created_at: datetime
    avatar: str | None = None

    @classmethod
    def from_comment(cls, comment: Comment, avatar: str | None = None):
        """Build a view of ``comment``; subclass fields keep their defaults."""
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            author=comment.author,
            email=comment.email,
            author_url=comment.author_url,
            content=comment.content,
            status=comment.status,
            gravatar_md5=comment.gravatar_md5,
            ip_address=comment.ip_address,
            user_agent=comment.user_agent,
            is_admin=comment.is_admin,
            allow_notification=comment.allow_notification,
            created_at=comment.created_at,
            avatar=avatar,
        )


@dataclass
class CommentNode(CommentView):
    """Node in a comment forest.

    Owned by the tree it belongs to; children are ordered siblings.
    """

    children: list["CommentNode"] = field(default_factory=list)

    def walk(self) -> Iterator["CommentNode"]:
        """Yield this node and every descendant, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass
class CommentWithParent(CommentView):
    """Flat reply view carrying a snapshot of its parent comment."""

    parent: Optional["CommentWithParent"] = None


@dataclass
class CommentWithHasChildren(CommentView):
    """Top-level comment view flagged with whether it has published replies."""

    has_children: bool = False
