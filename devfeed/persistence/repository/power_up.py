"""PostgreSQL implementation of PowerUp repository.

Post power-ups live in ``post_likes`` and comment power-ups in
``comment_power_ups``; each table has its own target column.
"""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import Column, Table, and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import PowerUp
from devfeed.domain.repository import PowerUpRepository
from devfeed.domain.value import PowerUpTarget, UserId
from devfeed.persistence.mappers import power_up_to_dict, row_to_power_up
from devfeed.persistence.tables import comment_power_ups_table, post_likes_table


def _table_for(target_type: PowerUpTarget) -> tuple[Table, Column]:
    if target_type == PowerUpTarget.POST:
        return post_likes_table, post_likes_table.c.post_id
    return comment_power_ups_table, comment_power_ups_table.c.comment_id


class PostgresPowerUpRepository(PowerUpRepository):
    """PostgreSQL implementation of PowerUpRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_id: UUID,
    ) -> Optional[PowerUp]:
        """Find a user's power-up on a specific item."""
        table, target_column = _table_for(target_type)
        stmt = select(table).where(
            and_(table.c.user_id == user_id, target_column == target_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_power_up(row._asdict(), target_type) if row else None

    async def save(self, power_up: PowerUp) -> PowerUp:
        """Save a power-up (create).

        The unique constraint raises IntegrityError on duplicates. The insert
        runs in a savepoint so the surrounding transaction stays usable.
        """
        table, _ = _table_for(power_up.target_type)
        stmt = insert(table).values(**power_up_to_dict(power_up))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return power_up

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_id: UUID,
    ) -> bool:
        """Delete a power-up by user and item."""
        table, target_column = _table_for(target_type)
        stmt = delete(table).where(
            and_(table.c.user_id == user_id, target_column == target_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_target(self, target_type: PowerUpTarget, target_id: UUID) -> int:
        """Count power-ups on an item."""
        table, target_column = _table_for(target_type)
        stmt = select(func.count()).select_from(table).where(target_column == target_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_targets(
        self,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Count power-ups on many items in one grouped query."""
        counts = {UUID(str(tid)): 0 for tid in target_ids}
        if not counts:
            return counts

        table, target_column = _table_for(target_type)
        stmt = (
            select(target_column, func.count())
            .where(target_column.in_(list(counts)))
            .group_by(target_column)
        )
        result = await self.session.execute(stmt)
        for target_id, count in result.fetchall():
            counts[UUID(str(target_id))] = count
        return counts

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> List[PowerUp]:
        """Find a user's power-ups on multiple items (batch query)."""
        if not target_ids:
            return []

        table, target_column = _table_for(target_type)
        stmt = select(table).where(
            and_(table.c.user_id == user_id, target_column.in_(list(target_ids)))
        )
        result = await self.session.execute(stmt)
        return [row_to_power_up(row._asdict(), target_type) for row in result.fetchall()]
