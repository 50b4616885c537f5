"""Remove comment use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    comment_id: int


class RemoveCommentResponse(BaseModel):
    """Remove comment response."""

    comment_id: int
    post_id: int


class RemoveCommentUseCase:
    """Use case for removing a comment together with its whole reply chain."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize remove comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: RemoveCommentRequest) -> RemoveCommentResponse:
        """Execute remove comment flow.

        Args:
            request: Remove comment request

        Returns:
            Remove comment response identifying the removed comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        removed = await self.comment_service.remove_by_id(CommentId(request.comment_id))
        return RemoveCommentResponse(comment_id=removed.id, post_id=removed.post_id)
