"""Comment domain service."""

import hashlib
from collections.abc import Collection, Sequence
from datetime import datetime
from typing import Any

import logfire

from discuss.config import CommentSettings
from discuss.domain.error import (
    BusinessRuleViolationError,
    InvalidArgumentError,
    NotFoundError,
)
from discuss.domain.event import CommentEvent, CommentEventPublisher
from discuss.domain.model import (
    Comment,
    CommentTreePage,
    CommentView,
    CommentWithHasChildren,
    CommentWithParent,
    Page,
)
from discuss.domain.repository import CommentRepository
from discuss.domain.value import (
    ROOT_COMMENT_ID,
    CommentId,
    CommentQuery,
    CommentStatus,
    PageRequest,
    PostId,
)

from .avatar_service import AvatarService
from .base import Service
from .children_counter import ChildrenCounter
from .comment_tree import (
    CommentTreeBuilder,
    CommentTreePaginator,
    build_comment_comparator,
)
from .descendant_collector import DescendantCollector
from .parent_attacher import ParentAttacher


def _require(value: Any, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError(argument, f"{argument} must not be None")


def _normalize_url(url: str) -> str:
    url = url.strip()
    if url and "://" not in url and not url.startswith("//"):
        url = f"http://{url}"
    return url


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        event_publisher: CommentEventPublisher,
        comment_settings: CommentSettings,
        avatar_service: AvatarService,
        tree_builder: CommentTreeBuilder,
        tree_paginator: CommentTreePaginator,
        descendant_collector: DescendantCollector,
        parent_attacher: ParentAttacher,
        children_counter: ChildrenCounter,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            event_publisher: Sink for new/reply notifications
            comment_settings: Comment settings (moderation defaults)
            avatar_service: Avatar URL formatting
            tree_builder: Builds comment forests
            tree_paginator: Pages comment forests by thread
            descendant_collector: Collects comment descendants
            parent_attacher: Attaches parents to reply views
            children_counter: Checks top-level comments for replies
        """
        self.comment_repository = comment_repository
        self.event_publisher = event_publisher
        self.comment_settings = comment_settings
        self.avatar_service = avatar_service
        self.tree_builder = tree_builder
        self.tree_paginator = tree_paginator
        self.descendant_collector = descendant_collector
        self.parent_attacher = parent_attacher
        self.children_counter = children_counter

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            InvalidArgumentError: If comment_id is missing
            NotFoundError: If the comment does not exist
        """
        _require(comment_id, "comment_id")
        with logfire.span("comment_service.get_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        """List every comment of a post, any status."""
        _require(post_id, "post_id")
        with logfire.span("comment_service.list_by_post", post_id=post_id):
            comments = await self.comment_repository.find_all_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def page_latest(
        self, top: int, status: CommentStatus | None = None
    ) -> Page[Comment]:
        """Get the ``top`` most recent comments across all posts."""
        if top < 1:
            raise InvalidArgumentError("top", "top must be positive")
        return await self.page_by_query(
            CommentQuery(status=status), PageRequest(page=0, size=top)
        )

    async def page_by_status(
        self, status: CommentStatus, page_request: PageRequest
    ) -> Page[Comment]:
        """Page all comments in a status, newest first."""
        _require(status, "status")
        return await self.page_by_query(CommentQuery(status=status), page_request)

    async def page_by_query(
        self, query: CommentQuery, page_request: PageRequest
    ) -> Page[Comment]:
        """Page comments for moderation, filtered by status and keyword."""
        _require(query, "query")
        _require(page_request, "page_request")
        with logfire.span(
            "comment_service.page_by_query",
            status=query.status.value if query.status else None,
            keyword=query.keyword,
            page=page_request.page,
            size=page_request.size,
        ):
            keyword = query.keyword.strip() if query.keyword else None
            total = await self.comment_repository.count(
                status=query.status, keyword=keyword
            )
            comments = await self.comment_repository.find_all(
                status=query.status,
                keyword=keyword,
                limit=page_request.size,
                offset=page_request.offset,
            )
            return Page(
                content=comments,
                page=page_request.page,
                size=page_request.size,
                total=total,
            )

    async def page_tree(
        self,
        post_id: PostId,
        page_request: PageRequest,
        status: CommentStatus | None = CommentStatus.PUBLISHED,
    ) -> CommentTreePage:
        """Get one page of a post's comment tree.

        Args:
            post_id: Post ID
            page_request: Page number/size and sort (only ``id`` order is honored)
            status: Only comments in this status; None for every status

        Returns:
            Page of top-level threads with full subtrees
        """
        _require(post_id, "post_id")
        _require(page_request, "page_request")
        with logfire.span(
            "comment_service.page_tree",
            post_id=post_id,
            page=page_request.page,
            size=page_request.size,
            status=status.value if status else None,
        ):
            comments = await self.comment_repository.find_all_by_post(
                post_id, status=status
            )
            return self.page_tree_of(comments, page_request)

    def page_tree_of(
        self, comments: Sequence[Comment], page_request: PageRequest
    ) -> CommentTreePage:
        """Build and page the comment tree of an already loaded collection."""
        _require(comments, "comments")
        _require(page_request, "page_request")

        comparator = build_comment_comparator(page_request.sort)
        forest = self.tree_builder.build_forest(comments, comparator)
        tree_page = self.tree_paginator.page(
            forest, len(comments), page_request.page, page_request.size
        )
        logfire.info(
            "Comment tree paged",
            total_threads=tree_page.total_threads,
            total_comments=tree_page.total_comments,
            page_threads=len(tree_page.content),
        )
        return tree_page

    async def page_with_parent(
        self, post_id: PostId, page_request: PageRequest
    ) -> Page[CommentWithParent]:
        """Page a post's published comments flat, each with its parent."""
        _require(post_id, "post_id")
        _require(page_request, "page_request")
        with logfire.span(
            "comment_service.page_with_parent",
            post_id=post_id,
            page=page_request.page,
            size=page_request.size,
        ):
            total = await self.comment_repository.count_by_post(
                post_id, status=CommentStatus.PUBLISHED
            )
            comments = await self.comment_repository.find_by_post(
                post_id,
                status=CommentStatus.PUBLISHED,
                limit=page_request.size,
                offset=page_request.offset,
            )
            views = await self.parent_attacher.attach(comments)
            return Page(
                content=views,
                page=page_request.page,
                size=page_request.size,
                total=total,
            )

    async def page_top_comments(
        self, post_id: PostId, status: CommentStatus, page_request: PageRequest
    ) -> Page[CommentWithHasChildren]:
        """Page a post's top-level comments, flagged with reply presence."""
        _require(post_id, "post_id")
        _require(status, "status")
        _require(page_request, "page_request")
        with logfire.span(
            "comment_service.page_top_comments",
            post_id=post_id,
            status=status.value,
            page=page_request.page,
            size=page_request.size,
        ):
            total = await self.comment_repository.count_by_post(
                post_id, status=status, parent_id=ROOT_COMMENT_ID
            )
            top_comments = await self.comment_repository.find_by_post(
                post_id,
                status=status,
                parent_id=ROOT_COMMENT_ID,
                limit=page_request.size,
                offset=page_request.offset,
            )
            if not top_comments:
                return Page(
                    content=[],
                    page=page_request.page,
                    size=page_request.size,
                    total=total,
                )

            has_children = await self.children_counter.has_children(
                [comment.id for comment in top_comments]
            )

            content = []
            for comment in top_comments:
                view = CommentWithHasChildren.from_comment(
                    comment,
                    avatar=self.avatar_service.build_avatar_url(comment.gravatar_md5),
                )
                view.has_children = has_children.get(comment.id, False)
                content.append(view)

            return Page(
                content=content,
                page=page_request.page,
                size=page_request.size,
                total=total,
            )

    async def list_children(
        self,
        post_id: PostId,
        parent_id: CommentId,
        status: CommentStatus | None = None,
    ) -> list[Comment]:
        """List every descendant of a comment, ordered by ID ascending."""
        _require(post_id, "post_id")
        _require(parent_id, "parent_id")
        return await self.descendant_collector.collect(
            {parent_id}, post_id=post_id, status=status
        )

    def convert_to_view(self, comment: Comment) -> CommentView:
        """Convert a comment to a flat view with its avatar URL."""
        return CommentView.from_comment(
            comment, avatar=self.avatar_service.build_avatar_url(comment.gravatar_md5)
        )

    def convert_to_views(self, comments: Sequence[Comment]) -> list[CommentView]:
        return [self.convert_to_view(comment) for comment in comments]

    async def count_by_post(self, post_id: PostId) -> int:
        _require(post_id, "post_id")
        return await self.comment_repository.count_by_post(post_id)

    async def count_by_post_ids(
        self,
        post_ids: Collection[PostId],
        status: CommentStatus | None = None,
    ) -> dict[PostId, int]:
        """Count comments per post in one query; empty input returns {}."""
        if not post_ids:
            return {}
        return await self.comment_repository.count_by_post_ids(post_ids, status=status)

    async def count_by_status(self, status: CommentStatus) -> int:
        _require(status, "status")
        return await self.comment_repository.count(status=status)

    async def create_comment(
        self,
        post_id: PostId,
        author: str,
        email: str,
        content: str,
        parent_id: CommentId = ROOT_COMMENT_ID,
        author_url: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        allow_notification: bool = True,
        is_admin: bool = False,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Administrator comments are published immediately. Guest comments
        wait in the auditing state when ``new_need_check`` is enabled.
        Publishes exactly one event: new for top-level, reply otherwise.

        Args:
            post_id: Post ID
            author: Display name of the author
            email: Author email, hashed for the avatar
            content: Comment text
            parent_id: Parent comment ID for replies (ROOT_COMMENT_ID for top-level)
            author_url: Author website, normalized to an absolute URL
            ip_address: Client address
            user_agent: Client user agent
            allow_notification: Whether the author wants reply notifications
            is_admin: Whether the author is an administrator

        Returns:
            Created comment

        Raises:
            InvalidArgumentError: If post_id or parent_id is missing
            NotFoundError: If the parent comment does not exist
            BusinessRuleViolationError: If the parent belongs to another post
        """
        _require(post_id, "post_id")
        _require(parent_id, "parent_id")
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            parent_id=parent_id,
            is_admin=is_admin,
        ):
            # If replying, verify parent exists on the same post
            if parent_id != ROOT_COMMENT_ID:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise BusinessRuleViolationError(
                        "Parent comment does not belong to this post"
                    )

            if is_admin or not self.comment_settings.new_need_check:
                status = CommentStatus.PUBLISHED
            else:
                status = CommentStatus.AUDITING

            now = datetime.now()
            comment = Comment(
                post_id=post_id,
                parent_id=parent_id,
                author=author,
                email=email,
                author_url=_normalize_url(author_url) if author_url else None,
                content=content,
                status=status,
                gravatar_md5=hashlib.md5(email.encode("utf-8")).hexdigest(),
                ip_address=ip_address,
                user_agent=user_agent,
                is_admin=is_admin,
                allow_notification=allow_notification,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            await self.event_publisher.publish(CommentEvent.for_created(saved))
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                parent_id=parent_id,
                status=status.value,
            )
            return saved

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Change the moderation status of a comment.

        Raises:
            InvalidArgumentError: If comment_id or status is missing
            NotFoundError: If the comment does not exist
        """
        _require(comment_id, "comment_id")
        _require(status, "status")
        with logfire.span(
            "comment_service.update_status",
            comment_id=comment_id,
            status=status.value,
        ):
            comment = await self.get_by_id(comment_id)
            updated = await self.comment_repository.save(
                comment.model_copy(update={"status": status, "updated_at": datetime.now()})
            )
            logfire.info(
                "Comment status updated",
                comment_id=comment_id,
                old_status=comment.status.value,
                new_status=status.value,
            )
            return updated

    async def update_status_by_ids(
        self, comment_ids: Sequence[CommentId], status: CommentStatus
    ) -> list[Comment]:
        """Change the status of several comments, one at a time."""
        if not comment_ids:
            return []
        return [
            await self.update_status(comment_id, status) for comment_id in comment_ids
        ]

    async def remove_by_id(self, comment_id: CommentId) -> Comment:
        """Remove a comment together with all of its descendants.

        Descendants are deleted one record at a time, in ID order, before
        the comment itself. A failure part-way leaves earlier deletions in
        place; descendants already gone when reached are skipped.

        Returns:
            The removed comment

        Raises:
            InvalidArgumentError: If comment_id is missing
            NotFoundError: If the comment does not exist
        """
        _require(comment_id, "comment_id")
        with logfire.span("comment_service.remove_by_id", comment_id=comment_id):
            comment = await self.get_by_id(comment_id)

            descendants = await self.descendant_collector.collect(
                {comment_id}, post_id=comment.post_id
            )
            for descendant in descendants:
                removed = await self.comment_repository.delete(descendant.id)
                if removed is None:
                    logfire.warn(
                        "Descendant already removed",
                        comment_id=descendant.id,
                        root_comment_id=comment_id,
                    )

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment removed",
                comment_id=comment_id,
                post_id=comment.post_id,
                descendant_count=len(descendants),
            )
            return comment

    async def remove_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Remove several comments with their descendants.

        IDs already removed as the descendant of an earlier ID are skipped.
        """
        removed: list[Comment] = []
        for comment_id in comment_ids:
            try:
                removed.append(await self.remove_by_id(comment_id))
            except NotFoundError:
                logfire.warn("Comment already removed", comment_id=comment_id)
        return removed

    async def remove_by_post(self, post_id: PostId) -> list[Comment]:
        """Remove every comment of a post."""
        _require(post_id, "post_id")
        with logfire.span("comment_service.remove_by_post", post_id=post_id):
            removed = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Post comments removed", post_id=post_id, count=len(removed))
            return removed
