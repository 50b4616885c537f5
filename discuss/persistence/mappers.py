"""Mappers between database rows and domain models."""

from typing import Any, Dict

from discuss.domain.model import Comment
from discuss.domain.value import CommentId, CommentStatus, PostId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        parent_id=CommentId(row["parent_id"]),
        author=row["author"],
        email=row["email"],
        author_url=row.get("author_url"),
        content=row["content"],
        status=CommentStatus(row["status"]),
        gravatar_md5=row.get("gravatar_md5"),
        ip_address=row.get("ip_address"),
        user_agent=row.get("user_agent"),
        is_admin=row["is_admin"],
        allow_notification=row["allow_notification"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The ID is left out when unset so the database assigns it.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    values = comment.model_dump(mode="python")
    values["status"] = comment.status.value
    if values["id"] is None:
        del values["id"]
    return values
