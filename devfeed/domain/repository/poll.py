"""Poll repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devfeed.domain.model.poll import Poll
from devfeed.domain.value import PollId


class PollRepository(ABC):
    """Repository for Poll aggregate (poll plus its options)."""

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll with its options ordered by option order."""
        pass

    @abstractmethod
    async def find_active(self) -> List[Poll]:
        """Active polls, newest first."""
        pass

    @abstractmethod
    async def find_recent_questions(self, limit: int) -> List[str]:
        """Questions of the most recently created polls, newest first."""
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Save a poll together with its options.

        Either the poll and all options are stored, or nothing is.
        """
        pass
