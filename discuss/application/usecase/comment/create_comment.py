"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from discuss.domain.service import CommentService
from discuss.domain.value import ROOT_COMMENT_ID, CommentId, CommentStatus, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    author: str = Field(min_length=1, max_length=50)
    email: str = Field(max_length=255)
    content: str = Field(min_length=1, max_length=1023)
    parent_id: int = ROOT_COMMENT_ID  # Parent comment ID for replies
    author_url: str | None = Field(default=None, max_length=127)
    allow_notification: bool = True
    is_admin: bool = False  # Set by the caller after authentication
    ip_address: str | None = None
    user_agent: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    post_id: int
    parent_id: int
    author: str
    author_url: str | None
    avatar: str | None
    content: str
    status: CommentStatus
    created_at: datetime


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Create comment response with the stored comment

        Raises:
            NotFoundError: If the parent comment does not exist
            BusinessRuleViolationError: If the parent belongs to another post
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            author=request.author,
            email=request.email,
            content=request.content,
            parent_id=CommentId(request.parent_id),
            author_url=request.author_url,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
            allow_notification=request.allow_notification,
            is_admin=request.is_admin,
        )
        view = self.comment_service.convert_to_view(comment)

        return CreateCommentResponse(
            comment_id=view.id,
            post_id=view.post_id,
            parent_id=view.parent_id,
            author=view.author,
            author_url=view.author_url,
            avatar=view.avatar,
            content=view.content,
            status=view.status,
            created_at=view.created_at,
        )
