"""PostgreSQL implementation of Poll repository."""

from collections import defaultdict
from typing import List, Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import Poll, PollOption
from devfeed.domain.repository import PollRepository
from devfeed.domain.value import PollId
from devfeed.persistence.mappers import (
    poll_option_to_dict,
    poll_to_dict,
    row_to_poll,
    row_to_poll_option,
)
from devfeed.persistence.tables import poll_options_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load_options(self, poll_ids: list[PollId]) -> dict[PollId, list[PollOption]]:
        """Options of several polls in one query, each list in display order."""
        options: dict[PollId, list[PollOption]] = defaultdict(list)
        if not poll_ids:
            return options

        stmt = (
            select(poll_options_table)
            .where(poll_options_table.c.poll_id.in_(poll_ids))
            .order_by(poll_options_table.c.option_order)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            data = row._asdict()
            options[data["poll_id"]].append(row_to_poll_option(data))
        return options

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll with its options."""
        stmt = select(polls_table).where(polls_table.c.id == poll_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        options = await self._load_options([poll_id])
        return row_to_poll(row._asdict(), options.get(poll_id, []))

    async def find_active(self) -> List[Poll]:
        """Active polls, newest first."""
        stmt = (
            select(polls_table)
            .where(polls_table.c.is_active.is_(True))
            .order_by(desc(polls_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]

        options = await self._load_options([row["id"] for row in rows])
        return [row_to_poll(row, options.get(row["id"], [])) for row in rows]

    async def find_recent_questions(self, limit: int) -> List[str]:
        """Questions of the most recently created polls."""
        stmt = (
            select(polls_table.c.question)
            .order_by(desc(polls_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [question for (question,) in result.fetchall()]

    async def save(self, poll: Poll) -> Poll:
        """Insert a poll and its options in a nested transaction.

        If any option fails to insert, the poll row is rolled back too.
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(polls_table).values(**poll_to_dict(poll)))
            if poll.options:
                await self.session.execute(
                    insert(poll_options_table),
                    [poll_option_to_dict(poll.id, option) for option in poll.options],
                )
        await self.session.flush()
        return poll
