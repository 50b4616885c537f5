"""Comment forest assembly and top-level pagination."""

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key

import logfire

from discuss.domain.error import InvalidArgumentError
from discuss.domain.model import Comment, CommentNode, CommentTreePage
from discuss.domain.value import (
    ROOT_COMMENT_ID,
    CommentId,
    SortDirection,
    SortOrder,
)

from .avatar_service import AvatarService
from .base import Service

SiblingComparator = Callable[[CommentNode, CommentNode], int]


def build_comment_comparator(sort: Sequence[SortOrder] = ()) -> SiblingComparator:
    """Build the sibling comparator for a comment forest.

    Siblings are only ever compared on ``id``. The direction is taken from
    the first order on the field named ``id`` and defaults to descending;
    orders on any other field are ignored, so asking for ``created_at``
    still yields id order.

    Args:
        sort: Requested sort orders

    Returns:
        Comparator returning a negative, zero or positive int
    """
    order = next(
        (order for order in sort if order.field == "id"),
        SortOrder(field="id", direction=SortDirection.DESC),
    )
    sign = 1 if order.direction == SortDirection.ASC else -1

    def compare(current: CommentNode, other: CommentNode) -> int:
        return sign * ((current.id > other.id) - (current.id < other.id))

    return compare


class CommentTreeBuilder(Service):
    """Turns a flat, unordered comment collection into a forest.

    The forest hangs off a virtual root with id ROOT_COMMENT_ID that is never
    returned; the builder returns the root's children.
    """

    def __init__(self, avatar_service: AvatarService) -> None:
        """Initialize tree builder.

        Args:
            avatar_service: Formats the avatar URL of each node
        """
        self.avatar_service = avatar_service

    def build_forest(
        self,
        comments: Iterable[Comment],
        comparator: SiblingComparator | None = None,
    ) -> list[CommentNode]:
        """Build the comment forest.

        Algorithm:
        1. Group the comments into a working pool keyed by parent id
        2. Starting at the virtual root, consume the pool bucket of the
           current node, wrap each comment as a child node (input order)
        3. Descend into each new child, then sort the children once the
           whole subtree is finished (post-order)

        A bucket is removed from the pool the first time it is consumed, so
        every comment is placed at most once and the walk terminates even on
        cyclic parent graphs. Comments unreachable from the root (orphans,
        cycles) are left out. The walk uses an explicit stack, so reply
        chains of any depth are supported.

        Args:
            comments: Flat comment collection of a single post
            comparator: Optional sibling ordering, applied at every level

        Returns:
            Top-level nodes, each carrying its full subtree
        """
        pool: dict[CommentId, list[Comment]] = defaultdict(list)
        count = 0
        for comment in comments:
            pool[comment.parent_id].append(comment)
            count += 1

        forest: list[CommentNode] = []
        self._populate(forest, pool, comparator)

        logfire.debug(
            "Comment forest built",
            comment_count=count,
            thread_count=len(forest),
            unplaced_count=sum(len(bucket) for bucket in pool.values()),
        )
        return forest

    def _populate(
        self,
        forest: list[CommentNode],
        pool: dict[CommentId, list[Comment]],
        comparator: SiblingComparator | None,
    ) -> None:
        # (parent id, sibling list, subtree finished)
        stack: list[tuple[CommentId, list[CommentNode], bool]] = [
            (ROOT_COMMENT_ID, forest, False)
        ]
        while stack:
            parent_id, children, finished = stack.pop()
            if finished:
                if comparator is not None and children:
                    children.sort(key=cmp_to_key(comparator))
                continue

            for comment in pool.pop(parent_id, []):
                children.append(
                    CommentNode.from_comment(
                        comment,
                        avatar=self.avatar_service.build_avatar_url(
                            comment.gravatar_md5
                        ),
                    )
                )

            stack.append((parent_id, children, True))
            # Reversed so the first child is descended into first
            for child in reversed(children):
                stack.append((child.id, child.children, False))


class CommentTreePaginator(Service):
    """Pages a comment forest by top-level thread.

    A page never splits a thread: every subtree travels with its
    top-level ancestor.
    """

    def page(
        self,
        forest: Sequence[CommentNode],
        total_comments: int,
        page: int,
        size: int,
    ) -> CommentTreePage:
        """Slice the top-level threads of ``forest``.

        Args:
            forest: Ordered top-level nodes
            total_comments: Size of the flat input the forest was built from
            page: Zero-based page number
            size: Threads per page

        Returns:
            Page of threads; empty content when the page is out of range

        Raises:
            InvalidArgumentError: If size is not positive
        """
        if size < 1:
            raise InvalidArgumentError("size", "page size must be positive")

        start = page * size
        if start < 0 or start >= len(forest):
            content: list[CommentNode] = []
        else:
            end = min(start + size, len(forest))
            logfire.debug(
                "Slicing comment forest",
                thread_count=len(forest),
                start_index=start,
                end_index=end,
            )
            content = list(forest[start:end])

        return CommentTreePage(
            content=content,
            page=page,
            size=size,
            total_threads=len(forest),
            total_comments=total_comments,
        )
