"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    ListCommentChildrenRequest,
    ListCommentChildrenResponse,
    ListCommentChildrenUseCase,
    ListCommentsWithParentRequest,
    ListCommentsWithParentResponse,
    ListCommentsWithParentUseCase,
    ListTopCommentsRequest,
    ListTopCommentsResponse,
    ListTopCommentsUseCase,
    RemoveCommentRequest,
    RemoveCommentResponse,
    RemoveCommentUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusResponse,
    UpdateCommentStatusUseCase,
)
from discuss.domain.error import (
    BusinessRuleViolationError,
    InvalidArgumentError,
    NotFoundError,
)
from discuss.domain.value import ROOT_COMMENT_ID, CommentStatus

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


@router.get(
    "/posts/{post_id}/comments/tree", response_model=GetCommentTreeResponse
)
async def get_comment_tree(
    post_id: int,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    page: int = Query(default=0, ge=0),
    size: int = Query(default=10, ge=1, le=100),
    sort: list[str] = Query(default=[]),
    include_unpublished: bool = False,
) -> GetCommentTreeResponse:
    """Get a page of threaded comments for a post.

    Threads are paged at the top level; each returned thread carries its
    complete reply subtree.

    Args:
        post_id: Post ID
        get_comment_tree_use_case: Get comment tree use case from DI
        page: Zero-based page index
        size: Threads per page
        sort: Sort orders such as ``id,asc``; only ``id`` affects ordering
        include_unpublished: Include auditing and recycled comments

    Returns:
        Page of comment threads
    """
    try:
        request = GetCommentTreeRequest(
            post_id=post_id,
            page=page,
            size=size,
            sort=sort,
            include_unpublished=include_unpublished,
        )
        return await get_comment_tree_use_case.execute(request)
    except InvalidArgumentError as e:
        logfire.warn("Comment tree request rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "/posts/{post_id}/comments/list", response_model=ListCommentsWithParentResponse
)
async def list_comments_with_parent(
    post_id: int,
    list_comments_with_parent_use_case: FromDishka[ListCommentsWithParentUseCase],
    page: int = Query(default=0, ge=0),
    size: int = Query(default=10, ge=1, le=100),
) -> ListCommentsWithParentResponse:
    """List published comments newest first, each reply with its parent."""
    request = ListCommentsWithParentRequest(post_id=post_id, page=page, size=size)
    return await list_comments_with_parent_use_case.execute(request)


@router.get("/posts/{post_id}/comments/top", response_model=ListTopCommentsResponse)
async def list_top_comments(
    post_id: int,
    list_top_comments_use_case: FromDishka[ListTopCommentsUseCase],
    page: int = Query(default=0, ge=0),
    size: int = Query(default=10, ge=1, le=100),
) -> ListTopCommentsResponse:
    """List published top-level comments, flagged with whether they have replies.

    Args:
        post_id: Post ID
        list_top_comments_use_case: List top comments use case from DI
        page: Zero-based page index
        size: Comments per page

    Returns:
        Page of top-level comments
    """
    request = ListTopCommentsRequest(post_id=post_id, page=page, size=size)
    return await list_top_comments_use_case.execute(request)


@router.get(
    "/posts/{post_id}/comments/{comment_id}/children",
    response_model=ListCommentChildrenResponse,
)
async def list_comment_children(
    post_id: int,
    comment_id: int,
    list_comment_children_use_case: FromDishka[ListCommentChildrenUseCase],
) -> ListCommentChildrenResponse:
    """List every published reply below a comment, at any depth."""
    request = ListCommentChildrenRequest(post_id=post_id, comment_id=comment_id)
    return await list_comment_children_use_case.execute(request)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    author: str = Field(min_length=1, max_length=50)
    email: str = Field(max_length=255)
    content: str = Field(min_length=1, max_length=1023)
    author_url: str | None = Field(default=None, max_length=127)
    parent_id: int = ROOT_COMMENT_ID  # Parent comment ID for replies
    allow_notification: bool = True


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a guest comment on a post or reply to another comment.

    Args:
        post_id: Post ID
        body: Comment creation data
        request: Incoming request (client address and user agent)
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: If the parent is missing or belongs to another post
    """
    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            author=body.author,
            email=body.email,
            content=body.content,
            author_url=body.author_url,
            parent_id=body.parent_id,
            allow_notification=body.allow_notification,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (BusinessRuleViolationError, InvalidArgumentError) as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put(
    "/comments/{comment_id}/status/{comment_status}",
    response_model=UpdateCommentStatusResponse,
)
async def update_comment_status(
    comment_id: int,
    comment_status: CommentStatus,
    update_comment_status_use_case: FromDishka[UpdateCommentStatusUseCase],
) -> UpdateCommentStatusResponse:
    """Change the moderation status of a comment.

    Raises:
        HTTPException: If the comment does not exist
    """
    try:
        request = UpdateCommentStatusRequest(
            comment_ids=[comment_id], status=comment_status
        )
        return await update_comment_status_use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Status update failed - comment not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put(
    "/comments/status/{comment_status}", response_model=UpdateCommentStatusResponse
)
async def update_comments_status(
    comment_status: CommentStatus,
    comment_ids: list[int],
    update_comment_status_use_case: FromDishka[UpdateCommentStatusUseCase],
) -> UpdateCommentStatusResponse:
    """Change the moderation status of several comments.

    The request is rolled back as a whole if any comment does not exist.
    """
    try:
        request = UpdateCommentStatusRequest(
            comment_ids=comment_ids, status=comment_status
        )
        return await update_comment_status_use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Batch status update failed - comment not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}", response_model=RemoveCommentResponse)
async def remove_comment(
    comment_id: int,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
) -> RemoveCommentResponse:
    """Remove a comment together with all of its replies.

    Args:
        comment_id: Comment ID
        remove_comment_use_case: Remove comment use case from DI

    Returns:
        The removed comment's ID and post

    Raises:
        HTTPException: If the comment does not exist
    """
    try:
        request = RemoveCommentRequest(comment_id=comment_id)
        return await remove_comment_use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Comment removal failed - comment not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
