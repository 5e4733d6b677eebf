"""PostgreSQL implementation of Stack repository."""

from typing import List

from sqlalchemy import and_, delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import StackEntry
from devfeed.domain.repository import StackRepository
from devfeed.domain.value import PostId, UserId
from devfeed.persistence.mappers import row_to_stack_entry, stack_entry_to_dict
from devfeed.persistence.tables import post_stack_table


class PostgresStackRepository(StackRepository):
    """PostgreSQL implementation of StackRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def push(self, entry: StackEntry) -> StackEntry:
        """Insert an entry; the unique constraint rejects duplicates.

        The insert runs in a savepoint, so a rejected duplicate leaves the
        surrounding transaction usable.
        """
        stmt = insert(post_stack_table).values(**stack_entry_to_dict(entry))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return entry

    async def pop(self, user_id: UserId, post_id: PostId) -> bool:
        stmt = delete(post_stack_table).where(
            and_(
                post_stack_table.c.user_id == user_id,
                post_stack_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def contains(self, user_id: UserId, post_id: PostId) -> bool:
        stmt = select(post_stack_table.c.id).where(
            and_(
                post_stack_table.c.user_id == user_id,
                post_stack_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_user(self, user_id: UserId) -> List[StackEntry]:
        """A user's entries, most recently pushed first."""
        stmt = (
            select(post_stack_table)
            .where(post_stack_table.c.user_id == user_id)
            .order_by(desc(post_stack_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_stack_entry(row._asdict()) for row in result.fetchall()]

    async def count_by_user(self, user_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(post_stack_table)
            .where(post_stack_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def clear(self, user_id: UserId) -> int:
        stmt = delete(post_stack_table).where(post_stack_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
