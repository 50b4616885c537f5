"""PostgreSQL implementation of Comment repository."""

from collections.abc import Collection
from typing import List, Optional

from sqlalchemy import Select, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, CommentStatus, PostId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(
        self,
        stmt: Select,
        post_id: PostId | None = None,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
        keyword: str | None = None,
    ) -> Select:
        if post_id is not None:
            stmt = stmt.where(comments_table.c.post_id == post_id)
        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)
        if parent_id is not None:
            stmt = stmt.where(comments_table.c.parent_id == parent_id)
        if keyword:
            like = f"%{keyword}%"
            stmt = stmt.where(
                or_(
                    comments_table.c.author.ilike(like),
                    comments_table.c.content.ilike(like),
                    comments_table.c.email.ilike(like),
                )
            )
        return stmt

    async def _fetch_all(self, stmt: Select) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all_by_ids(self, comment_ids: Collection[CommentId]) -> List[Comment]:
        """Find comments by IDs."""
        if not comment_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.id.in_(list(comment_ids)))
            .order_by(comments_table.c.id)
        )
        return await self._fetch_all(stmt)

    async def find_all_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
    ) -> List[Comment]:
        """Find all comments of a post."""
        stmt = self._filtered(select(comments_table), post_id=post_id, status=status)
        return await self._fetch_all(stmt.order_by(comments_table.c.id))

    async def find_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of a post's comments, newest first."""
        stmt = self._filtered(
            select(comments_table), post_id=post_id, status=status, parent_id=parent_id
        )
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_by_post(
        self,
        post_id: PostId,
        status: CommentStatus | None = None,
        parent_id: CommentId | None = None,
    ) -> int:
        """Count a post's comments."""
        stmt = self._filtered(
            select(func.count()).select_from(comments_table),
            post_id=post_id,
            status=status,
            parent_id=parent_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_children(
        self,
        parent_ids: Collection[CommentId],
        post_id: PostId | None = None,
        status: CommentStatus | None = None,
    ) -> List[Comment]:
        """Find direct children of several comments."""
        if not parent_ids:
            return []
        stmt = self._filtered(select(comments_table), post_id=post_id, status=status)
        stmt = stmt.where(comments_table.c.parent_id.in_(list(parent_ids))).order_by(
            comments_table.c.id
        )
        return await self._fetch_all(stmt)

    async def count_direct_children(
        self,
        parent_ids: Collection[CommentId],
        status: CommentStatus,
    ) -> dict[CommentId, int]:
        """Count direct children per parent."""
        if not parent_ids:
            return {}
        stmt = (
            select(comments_table.c.parent_id, func.count().label("children"))
            .where(comments_table.c.parent_id.in_(list(parent_ids)))
            .where(comments_table.c.status == status.value)
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        return {
            CommentId(row.parent_id): row.children for row in result.fetchall()
        }

    async def count_by_post_ids(
        self,
        post_ids: Collection[PostId],
        status: CommentStatus | None = None,
    ) -> dict[PostId, int]:
        """Count comments per post."""
        if not post_ids:
            return {}
        stmt = self._filtered(
            select(comments_table.c.post_id, func.count().label("comments")),
            status=status,
        )
        stmt = stmt.where(comments_table.c.post_id.in_(list(post_ids))).group_by(
            comments_table.c.post_id
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id): row.comments for row in result.fetchall()}

    async def find_all(
        self,
        status: CommentStatus | None = None,
        keyword: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all posts, newest first."""
        stmt = self._filtered(select(comments_table), status=status, keyword=keyword)
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count(
        self,
        status: CommentStatus | None = None,
        keyword: str | None = None,
    ) -> int:
        """Count comments across all posts."""
        stmt = self._filtered(
            select(func.count()).select_from(comments_table),
            status=status,
            keyword=keyword,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        values = comment_to_dict(comment)
        existing = (
            await self.find_by_id(comment.id) if comment.id is not None else None
        )

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**values)
                .returning(comments_table)
            )
        else:
            # Insert - ID assigned by the database unless the comment carries one
            stmt = comments_table.insert().values(**values).returning(comments_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment (hard delete)."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete_by_post(self, post_id: PostId) -> List[Comment]:
        """Delete every comment of a post."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.post_id == post_id)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        removed = [row_to_comment(row._asdict()) for row in result.fetchall()]
        await self.session.flush()
        return sorted(removed, key=lambda c: c.id)
