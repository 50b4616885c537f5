"""List top-level comments use case."""

from pydantic import BaseModel, Field

from discuss.domain.service import CommentService
from discuss.domain.value import CommentStatus, PageRequest, PostId

from .items import TopCommentItem


class ListTopCommentsRequest(BaseModel):
    """List top-level comments request."""

    post_id: int
    status: CommentStatus = CommentStatus.PUBLISHED
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1, le=100)


class ListTopCommentsResponse(BaseModel):
    """List top-level comments response."""

    post_id: int
    comments: list[TopCommentItem]
    page: int
    size: int
    total: int


class ListTopCommentsUseCase:
    """Use case for paging top-level comments without loading their replies.

    Clients expand a thread on demand through ListCommentChildrenUseCase.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list top comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListTopCommentsRequest) -> ListTopCommentsResponse:
        """Execute list top comments flow.

        Args:
            request: Post ID, status and page descriptor

        Returns:
            Page of top-level comments flagged with has_children
        """
        page = await self.comment_service.page_top_comments(
            PostId(request.post_id),
            request.status,
            PageRequest(page=request.page, size=request.size),
        )
        return ListTopCommentsResponse(
            post_id=request.post_id,
            comments=[TopCommentItem.from_with_has_children(v) for v in page.content],
            page=page.page,
            size=page.size,
            total=page.total,
        )
