"""Get comment tree use case."""

import logfire
from pydantic import BaseModel, Field

from discuss.domain.service import CommentService
from discuss.domain.value import CommentStatus, PageRequest, PostId, SortOrder

from .items import CommentNodeItem


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    post_id: int
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1, le=100)
    sort: list[str] = []  # "field[,direction]", only "id" affects ordering
    include_unpublished: bool = False  # Moderation view: every status


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    post_id: int
    comments: list[CommentNodeItem]
    page: int
    size: int
    total_pages: int
    total_threads: int
    total_comments: int


class GetCommentTreeUseCase:
    """Use case for getting one page of a post's threaded comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Threads are paged at the top level only; every page carries the
        complete subtrees of its threads.

        Args:
            request: Post ID, page descriptor and sort orders

        Returns:
            Page of comment threads with thread and comment totals

        Raises:
            InvalidArgumentError: If a sort order cannot be parsed
        """
        with logfire.span(
            "get_comment_tree.execute",
            post_id=request.post_id,
            page=request.page,
            size=request.size,
        ):
            page_request = PageRequest(
                page=request.page,
                size=request.size,
                sort=tuple(SortOrder.parse(order) for order in request.sort),
            )
            status = None if request.include_unpublished else CommentStatus.PUBLISHED

            tree_page = await self.comment_service.page_tree(
                PostId(request.post_id), page_request, status=status
            )

            return GetCommentTreeResponse(
                post_id=request.post_id,
                comments=[CommentNodeItem.from_node(node) for node in tree_page.content],
                page=tree_page.page,
                size=tree_page.size,
                total_pages=tree_page.total_pages,
                total_threads=tree_page.total_threads,
                total_comments=tree_page.total_comments,
            )
