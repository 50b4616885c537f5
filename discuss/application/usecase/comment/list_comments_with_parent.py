"""List comments with parent use case."""

from pydantic import BaseModel, Field

from discuss.domain.service import CommentService
from discuss.domain.value import PageRequest, PostId

from .items import CommentWithParentItem


class ListCommentsWithParentRequest(BaseModel):
    """List comments with parent request."""

    post_id: int
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1, le=100)


class ListCommentsWithParentResponse(BaseModel):
    """List comments with parent response."""

    post_id: int
    comments: list[CommentWithParentItem]
    page: int
    size: int
    total: int


class ListCommentsWithParentUseCase:
    """Use case for a flat, newest-first listing where replies show their parent."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ListCommentsWithParentRequest
    ) -> ListCommentsWithParentResponse:
        """Execute list comments with parent flow.

        Args:
            request: Post ID and page descriptor

        Returns:
            Page of published comments, each with its parent (if any)
        """
        page = await self.comment_service.page_with_parent(
            PostId(request.post_id),
            PageRequest(page=request.page, size=request.size),
        )
        return ListCommentsWithParentResponse(
            post_id=request.post_id,
            comments=[CommentWithParentItem.from_with_parent(v) for v in page.content],
            page=page.page,
            size=page.size,
            total=page.total,
        )
