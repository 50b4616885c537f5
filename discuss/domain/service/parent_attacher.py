"""Parent resolution for flat reply listings."""

from collections.abc import Sequence
from dataclasses import replace

import logfire

from discuss.domain.model import Comment, CommentWithParent
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId

from .avatar_service import AvatarService
from .base import Service


class ParentAttacher(Service):
    """Attaches each comment's immediate parent to its view."""

    def __init__(
        self, comment_repository: CommentRepository, avatar_service: AvatarService
    ) -> None:
        """Initialize parent attacher.

        Args:
            comment_repository: Comment repository
            avatar_service: Formats avatar URLs of comments and parents
        """
        self.comment_repository = comment_repository
        self.avatar_service = avatar_service

    def _to_view(self, comment: Comment) -> CommentWithParent:
        return CommentWithParent.from_comment(
            comment, avatar=self.avatar_service.build_avatar_url(comment.gravatar_md5)
        )

    async def attach(self, comments: Sequence[Comment]) -> list[CommentWithParent]:
        """Build with-parent views for a page of comments.

        Parents are fetched in one batched query. A parent view is built
        once per call and cached; every child receives its own copy, so no
        two children share a parent view instance. Top-level comments and
        comments whose parent no longer exists get ``parent=None``.

        Args:
            comments: Ordered page of comments

        Returns:
            Views in the same order as ``comments``
        """
        parent_ids = {
            comment.parent_id for comment in comments if not comment.is_top_level
        }

        with logfire.span(
            "parent_attacher.attach",
            comment_count=len(comments),
            parent_count=len(parent_ids),
        ):
            parents = (
                await self.comment_repository.find_all_by_ids(parent_ids)
                if parent_ids
                else []
            )
            parent_index = {parent.id: parent for parent in parents}
            parent_views: dict[CommentId, CommentWithParent] = {}

            views = []
            for comment in comments:
                view = self._to_view(comment)

                parent_view = parent_views.get(comment.parent_id)
                if parent_view is None:
                    parent = parent_index.get(comment.parent_id)
                    if parent is not None:
                        parent_view = self._to_view(parent)
                        parent_views[parent.id] = parent_view

                view.parent = replace(parent_view) if parent_view is not None else None
                views.append(view)

            if len(parent_index) < len(parent_ids):
                logfire.warn(
                    "Parent comments missing",
                    missing_ids=sorted(parent_ids - parent_index.keys()),
                )
            return views
