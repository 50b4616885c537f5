"""Domain model entities and views for comments."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.page import CommentTreePage, Page
from discuss.domain.model.view import (
    CommentNode,
    CommentView,
    CommentWithHasChildren,
    CommentWithParent,
)

__all__ = [
    "Comment",
    "CommentNode",
    "CommentTreePage",
    "CommentView",
    "CommentWithHasChildren",
    "CommentWithParent",
    "Page",
]
