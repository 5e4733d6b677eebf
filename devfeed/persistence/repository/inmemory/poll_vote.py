"""In-memory poll vote repository for testing."""

from collections import Counter
from typing import Optional

from sqlalchemy.exc import IntegrityError

from devfeed.domain.model.poll import PollVote
from devfeed.domain.repository.poll_vote import PollVoteRepository
from devfeed.domain.value import PollId, PollOptionId, UserId


class InMemoryPollVoteRepository(PollVoteRepository):
    """In-memory implementation of PollVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[PollVote] = []

    async def find_by_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[PollVote]:
        for vote in self._votes:
            if vote.poll_id == poll_id and vote.user_id == user_id:
                return vote
        return None

    async def save(self, vote: PollVote) -> PollVote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on this poll
        """
        if await self.find_by_user(vote.poll_id, vote.user_id):
            raise IntegrityError("Duplicate poll vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def count_by_option(self, poll_id: PollId) -> dict[PollOptionId, int]:
        return dict(Counter(v.option_id for v in self._votes if v.poll_id == poll_id))
