"""Direct children presence for top-level comments."""

from collections.abc import Collection

import logfire

from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, CommentStatus

from .base import Service


class ChildrenCounter(Service):
    """Tells which comments have published replies, without loading them."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def has_children(
        self, comment_ids: Collection[CommentId]
    ) -> dict[CommentId, bool]:
        """Map each comment ID to whether it has published direct children.

        Args:
            comment_ids: Comment IDs to check

        Returns:
            Dictionary mapping every given ID to True/False
        """
        if not comment_ids:
            return {}

        # Batch query to count all children at once (avoid N+1)
        counts = await self.comment_repository.count_direct_children(
            comment_ids, CommentStatus.PUBLISHED
        )
        logfire.debug(
            "Direct children counted",
            comment_count=len(comment_ids),
            with_children=len(counts),
        )
        return {cid: counts.get(cid, 0) > 0 for cid in comment_ids}
