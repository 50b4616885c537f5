"""SQLAlchemy table definitions for comments.

These table definitions are used with SQLAlchemy Core queries and to create
the schema (see ``discuss.persistence.database.create_schema``).
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

from discuss.domain.value import CommentStatus

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("post_id", Integer, nullable=False),
    # 0 for top-level comments, so no foreign key
    Column("parent_id", BigInteger, nullable=False, server_default="0"),
    Column("author", String(50), nullable=False),
    Column("email", String(255), nullable=False),
    Column("author_url", String(127), nullable=True),
    Column("content", String(1023), nullable=False),
    Column(
        "status",
        Enum(
            *[status.value for status in CommentStatus],
            name="comment_status",
        ),
        nullable=False,
        server_default=CommentStatus.AUDITING.value,
    ),
    Column("gravatar_md5", String(127), nullable=True),
    Column("ip_address", String(127), nullable=True),
    Column("user_agent", String(512), nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("allow_notification", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_status", comments_table.c.status)
Index("idx_comments_created_at", comments_table.c.created_at)
