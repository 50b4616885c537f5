"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresCommentRepository",
]
