"""Recursive descendant discovery."""

from collections.abc import Collection

import logfire

from discuss.domain.error import InvalidArgumentError
from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, CommentStatus, PostId

from .base import Service


class DescendantCollector(Service):
    """Collects every descendant of a set of comments.

    Used for cascading removal (all statuses) and full-thread expansion
    (published only).
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize descendant collector.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def collect(
        self,
        seed_ids: Collection[CommentId],
        post_id: PostId,
        status: CommentStatus | None = None,
    ) -> list[Comment]:
        """Collect all descendants of the seed comments.

        Expands one tree level per iteration with a single batched
        children query, until a level comes back empty. Results are
        deduplicated by id and no id is expanded twice, so malformed
        (cyclic) parent graphs terminate too. Seeds are never part of
        the result.

        Args:
            seed_ids: Comments whose descendants to collect
            post_id: Post the comments belong to
            status: Only follow comments in this status (all if None)

        Returns:
            Descendants ordered by ID ascending

        Raises:
            InvalidArgumentError: If post_id is missing
        """
        if post_id is None:
            raise InvalidArgumentError("post_id", "post id must not be None")

        seeds = set(seed_ids)
        if not seeds:
            return []

        with logfire.span(
            "descendant_collector.collect",
            seed_count=len(seeds),
            post_id=post_id,
            status=status.value if status else None,
        ):
            collected: dict[CommentId, Comment] = {}
            expanded: set[CommentId] = set(seeds)
            levels = 0

            frontier = await self.comment_repository.find_children(
                seeds, post_id=post_id, status=status
            )
            while frontier:
                levels += 1
                next_ids: set[CommentId] = set()
                for comment in frontier:
                    if comment.id in seeds:
                        continue
                    collected.setdefault(comment.id, comment)
                    if comment.id not in expanded:
                        next_ids.add(comment.id)

                if not next_ids:
                    break

                expanded |= next_ids
                frontier = await self.comment_repository.find_children(
                    next_ids, post_id=post_id, status=status
                )

            logfire.info(
                "Descendants collected",
                seed_count=len(seeds),
                descendant_count=len(collected),
                levels=levels,
            )
            return sorted(collected.values(), key=lambda comment: comment.id)
