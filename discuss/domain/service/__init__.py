"""Domain services."""

from .avatar_service import AvatarService
from .base import Service
from .children_counter import ChildrenCounter
from .comment_service import CommentService
from .comment_tree import (
    CommentTreeBuilder,
    CommentTreePaginator,
    SiblingComparator,
    build_comment_comparator,
)
from .descendant_collector import DescendantCollector
from .parent_attacher import ParentAttacher

__all__ = [
    "AvatarService",
    "ChildrenCounter",
    "CommentService",
    "CommentTreeBuilder",
    "CommentTreePaginator",
    "DescendantCollector",
    "ParentAttacher",
    "Service",
    "SiblingComparator",
    "build_comment_comparator",
]
