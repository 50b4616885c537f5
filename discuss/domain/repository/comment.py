"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, CommentStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.

    Batched lookups given an empty id collection return an empty result
    without querying the store.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_ids(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Find every comment whose ID is in ``comment_ids``.

        Args:
            comment_ids: Comment IDs to look up

        Returns:
            Matching comments ordered by ID
        """
        pass

    @abstractmethod
    async def find_all_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
    ) -> List[Comment]:
        """Find all comments of a post, top-level and nested alike.

        Args:
            post_id: The post ID
            status: Only comments in this status (all statuses if None)

        Returns:
            Flat list of comments ordered by ID
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of a post's comments, newest first.

        Args:
            post_id: The post ID
            status: Only comments in this status (all statuses if None)
            parent_id: Only direct children of this comment (any parent if None)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments ordered by creation time descending
        """
        pass

    @abstractmethod
    async def count_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
    ) -> int:
        """Count a post's comments with the same filters as find_by_post."""
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_ids: Collection[CommentId],
        post_id: PostId | None = None,
        status: CommentStatus | None = None,
    ) -> List[Comment]:
        """Find direct children of several comments in one query.

        Args:
            parent_ids: Parent comment IDs
            post_id: Only children on this post (any post if None)
            status: Only children in this status (all statuses if None)

        Returns:
            Direct child comments ordered by ID
        """
        pass

    @abstractmethod
    async def count_direct_children(
        self,
        parent_ids: Collection[CommentId],
        status: CommentStatus,
    ) -> dict[CommentId, int]:
        """Count direct children per parent in one query.

        Parents without children in the given status are absent from the result.
        """
        pass

    @abstractmethod
    async def count_by_post_ids(
        self,
        post_ids: Collection[PostId],
        status: CommentStatus | None = None,
    ) -> dict[PostId, int]:
        """Count comments per post in one query.

        Posts without comments are absent from the result.
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: CommentStatus | None = None,
        keyword: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all posts, newest first.

        Args:
            status: Only comments in this status (all statuses if None)
            keyword: Case-insensitive match on author, content or email
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments ordered by creation time descending
        """
        pass

    @abstractmethod
    async def count(
        self,
        status: CommentStatus | None = None,
        keyword: str | None = None,
    ) -> int:
        """Count comments with the same filters as find_all."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        A comment without an ID is inserted and receives the next ID.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a single comment (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            The deleted comment, None if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> List[Comment]:
        """Delete every comment of a post.

        Returns:
            The deleted comments
        """
        pass
