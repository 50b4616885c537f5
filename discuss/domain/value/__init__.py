"""Domain value objects for comments."""

from discuss.domain.value.identifiers import ROOT_COMMENT_ID, CommentId, PostId
from discuss.domain.value.types import (
    CommentQuery,
    CommentStatus,
    PageRequest,
    SortDirection,
    SortOrder,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    "ROOT_COMMENT_ID",
    # Types
    "CommentQuery",
    "CommentStatus",
    "PageRequest",
    "SortDirection",
    "SortOrder",
]
