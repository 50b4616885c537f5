"""List comment children use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, CommentStatus, PostId

from .items import CommentItem


class ListCommentChildrenRequest(BaseModel):
    """List comment children request."""

    post_id: int
    comment_id: int


class ListCommentChildrenResponse(BaseModel):
    """List comment children response."""

    post_id: int
    comment_id: int
    comments: list[CommentItem]


class ListCommentChildrenUseCase:
    """Use case for expanding a whole published reply chain below a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ListCommentChildrenRequest
    ) -> ListCommentChildrenResponse:
        """Execute list comment children flow.

        Args:
            request: Post ID and the comment to expand

        Returns:
            Every published descendant, ordered by ID ascending
        """
        children = await self.comment_service.list_children(
            PostId(request.post_id),
            CommentId(request.comment_id),
            status=CommentStatus.PUBLISHED,
        )
        views = self.comment_service.convert_to_views(children)
        return ListCommentChildrenResponse(
            post_id=request.post_id,
            comment_id=request.comment_id,
            comments=[CommentItem.from_view(view) for view in views],
        )
