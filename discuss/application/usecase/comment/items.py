"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import (
    CommentNode,
    CommentView,
    CommentWithHasChildren,
    CommentWithParent,
)
from discuss.domain.value import CommentStatus


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    post_id: int
    parent_id: int
    author: str
    author_url: str | None
    avatar: str | None
    content: str
    status: CommentStatus
    is_admin: bool
    created_at: datetime

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        """Convert a domain view to a response item."""
        return cls(
            comment_id=view.id,
            post_id=view.post_id,
            parent_id=view.parent_id,
            author=view.author,
            author_url=view.author_url,
            avatar=view.avatar,
            content=view.content,
            status=view.status,
            is_admin=view.is_admin,
            created_at=view.created_at,
        )


class CommentNodeItem(CommentItem):
    """Comment item with nested replies."""

    children: list["CommentNodeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeItem":
        """Convert a tree node and its whole subtree.

        Items are built bottom-up from a pre-order listing, so every child
        item exists before its parent is constructed.
        """
        order = list(node.walk())
        items: dict[int, CommentNodeItem] = {}
        for current in reversed(order):
            items[id(current)] = cls(
                **CommentItem.from_view(current).model_dump(),
                children=[items[id(child)] for child in current.children],
            )
        return items[id(node)]


class CommentWithParentItem(CommentItem):
    """Comment item with the comment it replies to."""

    parent: CommentItem | None

    @classmethod
    def from_with_parent(cls, view: CommentWithParent) -> "CommentWithParentItem":
        return cls(
            **CommentItem.from_view(view).model_dump(),
            parent=CommentItem.from_view(view.parent) if view.parent else None,
        )


class TopCommentItem(CommentItem):
    """Top-level comment item flagged with reply presence."""

    has_children: bool

    @classmethod
    def from_with_has_children(cls, view: CommentWithHasChildren) -> "TopCommentItem":
        return cls(
            **CommentItem.from_view(view).model_dump(),
            has_children=view.has_children,
        )
