"""Poll vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from devfeed.domain.model.poll import PollVote
from devfeed.domain.value import PollId, PollOptionId, UserId


class PollVoteRepository(ABC):
    """Repository for poll votes."""

    @abstractmethod
    async def find_by_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[PollVote]:
        """Find a user's vote on a poll."""
        pass

    @abstractmethod
    async def save(self, vote: PollVote) -> PollVote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on this poll
        """
        pass

    @abstractmethod
    async def count_by_option(self, poll_id: PollId) -> Dict[PollOptionId, int]:
        """Vote count per option of a poll. Options without votes are absent."""
        pass
