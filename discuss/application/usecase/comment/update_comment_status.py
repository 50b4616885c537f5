"""Update comment status use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, CommentStatus


class UpdateCommentStatusRequest(BaseModel):
    """Update comment status request."""

    comment_ids: list[int]
    status: CommentStatus


class UpdateCommentStatusResponse(BaseModel):
    """Update comment status response."""

    comment_ids: list[int]
    status: CommentStatus


class UpdateCommentStatusUseCase:
    """Use case for moderating comments: publish, send back to audit or recycle."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: UpdateCommentStatusRequest
    ) -> UpdateCommentStatusResponse:
        """Execute update comment status flow.

        Raises:
            NotFoundError: If any of the comments does not exist
        """
        updated = await self.comment_service.update_status_by_ids(
            [CommentId(comment_id) for comment_id in request.comment_ids],
            request.status,
        )
        return UpdateCommentStatusResponse(
            comment_ids=[comment.id for comment in updated],
            status=request.status,
        )
