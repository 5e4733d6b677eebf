"""In-memory poll repository for testing."""

from typing import Optional

from devfeed.domain.model.poll import Poll
from devfeed.domain.repository.poll import PollRepository
from devfeed.domain.value import PollId


class InMemoryPollRepository(PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self) -> None:
        self._polls: dict[PollId, Poll] = {}

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        return self._polls.get(poll_id)

    async def find_active(self) -> list[Poll]:
        """Active polls, newest first."""
        polls = [p for p in self._polls.values() if p.is_active]
        polls.sort(key=lambda p: p.created_at, reverse=True)
        return polls

    async def find_recent_questions(self, limit: int) -> list[str]:
        """Questions of the newest polls."""
        polls = sorted(self._polls.values(), key=lambda p: p.created_at, reverse=True)
        return [p.question for p in polls[:limit]]

    async def save(self, poll: Poll) -> Poll:
        """Save a poll with its options, ordered by option order."""
        poll = poll.model_copy(
            update={"options": sorted(poll.options, key=lambda o: o.order)}
        )
        self._polls[poll.id] = poll
        return poll
