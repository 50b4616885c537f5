"""In-memory comment repository for testing."""

from collections import Counter
from collections.abc import Collection
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, CommentStatus, PostId


def _newest_first(comments: list[Comment]) -> list[Comment]:
    return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._last_id = 0

    def _matching(
        self,
        post_id: PostId | None = None,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
        keyword: str | None = None,
    ) -> list[Comment]:
        comments = list(self._comments.values())

        if post_id is not None:
            comments = [c for c in comments if c.post_id == post_id]
        if status is not None:
            comments = [c for c in comments if c.status == status]
        if parent_id is not None:
            comments = [c for c in comments if c.parent_id == parent_id]
        if keyword:
            needle = keyword.lower()
            comments = [
                c
                for c in comments
                if needle in c.author.lower()
                or needle in c.content.lower()
                or needle in c.email.lower()
            ]

        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all_by_ids(self, comment_ids: Collection[CommentId]) -> list[Comment]:
        """Find comments by IDs."""
        if not comment_ids:
            return []
        wanted = set(comment_ids)
        return sorted(
            (c for c in self._comments.values() if c.id in wanted), key=lambda c: c.id
        )

    async def find_all_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
    ) -> list[Comment]:
        """Find all comments of a post."""
        return sorted(self._matching(post_id, status), key=lambda c: c.id)

    async def find_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one page of a post's comments, newest first."""
        comments = _newest_first(self._matching(post_id, status, parent_id))
        return comments[offset : offset + limit]

    async def count_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
    ) -> int:
        """Count a post's comments."""
        return len(self._matching(post_id, status, parent_id))

    async def find_children(
        self,
        parent_ids: Collection[CommentId],
        post_id: PostId | None = None,
        status: CommentStatus | None = None,
    ) -> list[Comment]:
        """Find direct children of several comments."""
        if not parent_ids:
            return []
        wanted = set(parent_ids)
        return sorted(
            (c for c in self._matching(post_id, status) if c.parent_id in wanted),
            key=lambda c: c.id,
        )

    async def count_direct_children(
        self,
        parent_ids: Collection[CommentId],
        status: CommentStatus,
    ) -> dict[CommentId, int]:
        """Count direct children per parent."""
        if not parent_ids:
            return {}
        wanted = set(parent_ids)
        return dict(
            Counter(
                c.parent_id
                for c in self._matching(status=status)
                if c.parent_id in wanted
            )
        )

    async def count_by_post_ids(
        self,
        post_ids: Collection[PostId],
        status: CommentStatus | None = None,
    ) -> dict[PostId, int]:
        """Count comments per post."""
        if not post_ids:
            return {}
        wanted = set(post_ids)
        return dict(
            Counter(c.post_id for c in self._matching(status=status) if c.post_id in wanted)
        )

    async def find_all(
        self,
        status: CommentStatus | None = None,
        keyword: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments across all posts, newest first."""
        comments = _newest_first(self._matching(status=status, keyword=keyword))
        return comments[offset : offset + limit]

    async def count(
        self,
        status: CommentStatus | None = None,
        keyword: str | None = None,
    ) -> int:
        """Count comments across all posts."""
        return len(self._matching(status=status, keyword=keyword))

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment, assigning the next ID on insert."""
        if comment.id is None:
            self._last_id += 1
            comment = comment.model_copy(update={"id": CommentId(self._last_id)})
        else:
            self._last_id = max(self._last_id, comment.id)
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment."""
        return self._comments.pop(comment_id, None)

    async def delete_by_post(self, post_id: PostId) -> list[Comment]:
        """Delete every comment of a post."""
        removed = sorted(self._matching(post_id), key=lambda c: c.id)
        for comment in removed:
            del self._comments[comment.id]
        return removed
