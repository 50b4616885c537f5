"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comment_tree import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from .items import CommentItem, CommentNodeItem, CommentWithParentItem, TopCommentItem
from .list_comment_children import (
    ListCommentChildrenRequest,
    ListCommentChildrenResponse,
    ListCommentChildrenUseCase,
)
from .list_comments_with_parent import (
    ListCommentsWithParentRequest,
    ListCommentsWithParentResponse,
    ListCommentsWithParentUseCase,
)
from .list_top_comments import (
    ListTopCommentsRequest,
    ListTopCommentsResponse,
    ListTopCommentsUseCase,
)
from .remove_comment import (
    RemoveCommentRequest,
    RemoveCommentResponse,
    RemoveCommentUseCase,
)
from .update_comment_status import (
    UpdateCommentStatusRequest,
    UpdateCommentStatusResponse,
    UpdateCommentStatusUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CommentWithParentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
    "ListCommentChildrenRequest",
    "ListCommentChildrenResponse",
    "ListCommentChildrenUseCase",
    "ListCommentsWithParentRequest",
    "ListCommentsWithParentResponse",
    "ListCommentsWithParentUseCase",
    "ListTopCommentsRequest",
    "ListTopCommentsResponse",
    "ListTopCommentsUseCase",
    "RemoveCommentRequest",
    "RemoveCommentResponse",
    "RemoveCommentUseCase",
    "TopCommentItem",
    "UpdateCommentStatusRequest",
    "UpdateCommentStatusResponse",
    "UpdateCommentStatusUseCase",
]
