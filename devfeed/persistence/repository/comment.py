"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import Comment
from devfeed.domain.repository import CommentRepository
from devfeed.domain.value import CommentId, ItemKind
from devfeed.persistence.mappers import comment_to_dict, row_to_comment
from devfeed.persistence.tables import comments_table


def _item_column(item_kind: ItemKind):
    if item_kind == ItemKind.POST:
        return comments_table.c.post_id
    return comments_table.c.poll_id


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_item(
        self,
        item_kind: ItemKind,
        item_id: UUID,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments on a post or poll, oldest first."""
        stmt = select(comments_table).where(_item_column(item_kind) == item_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))

        stmt = stmt.order_by(comments_table.c.created_at)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_item(self, item_kind: ItemKind, item_id: UUID) -> int:
        """Count comments on an item (excluding deleted)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_item_column(item_kind) == item_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Update the text content of a comment and mark it edited."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(
                content=text,
                is_edited=True,
                updated_at=datetime.now(),
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete(self, comment_id: CommentId, deleted_at: datetime) -> bool:
        """Mark a comment deleted. Replies are left untouched."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at, updated_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
