"""PostgreSQL implementation of PollVote repository."""

from typing import Dict, Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import PollVote
from devfeed.domain.repository import PollVoteRepository
from devfeed.domain.value import PollId, PollOptionId, UserId
from devfeed.persistence.mappers import poll_vote_to_dict, row_to_poll_vote
from devfeed.persistence.tables import poll_votes_table


class PostgresPollVoteRepository(PollVoteRepository):
    """PostgreSQL implementation of PollVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[PollVote]:
        stmt = select(poll_votes_table).where(
            and_(
                poll_votes_table.c.poll_id == poll_id,
                poll_votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_poll_vote(row._asdict()) if row else None

    async def save(self, vote: PollVote) -> PollVote:
        """Insert a vote in a savepoint; duplicates raise IntegrityError."""
        stmt = insert(poll_votes_table).values(**poll_vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def count_by_option(self, poll_id: PollId) -> Dict[PollOptionId, int]:
        stmt = (
            select(poll_votes_table.c.poll_option_id, func.count())
            .where(poll_votes_table.c.poll_id == poll_id)
            .group_by(poll_votes_table.c.poll_option_id)
        )
        result = await self.session.execute(stmt)
        return {
            PollOptionId(option_id): count for option_id, count in result.fetchall()
        }
