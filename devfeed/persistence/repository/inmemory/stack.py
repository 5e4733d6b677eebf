"""In-memory stack repository for testing."""

from sqlalchemy.exc import IntegrityError

from devfeed.domain.model.stack import StackEntry
from devfeed.domain.repository.stack import StackRepository
from devfeed.domain.value import PostId, UserId


class InMemoryStackRepository(StackRepository):
    """In-memory implementation of StackRepository for testing."""

    def __init__(self) -> None:
        self._entries: list[StackEntry] = []

    async def push(self, entry: StackEntry) -> StackEntry:
        """Add an entry.

        Raises:
            IntegrityError: If the post is already on the user's stack
        """
        if await self.contains(entry.user_id, entry.post_id):
            raise IntegrityError("Duplicate stack entry", None, Exception())

        self._entries.append(entry)
        return entry

    async def pop(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove an entry if present."""
        for i, entry in enumerate(self._entries):
            if entry.user_id == user_id and entry.post_id == post_id:
                self._entries.pop(i)
                return True
        return False

    async def contains(self, user_id: UserId, post_id: PostId) -> bool:
        return any(
            e.user_id == user_id and e.post_id == post_id for e in self._entries
        )

    async def find_by_user(self, user_id: UserId) -> list[StackEntry]:
        """A user's entries, most recently pushed first."""
        entries = [e for e in self._entries if e.user_id == user_id]
        # Reverse insertion order first so equal timestamps keep newest-push-first
        entries.reverse()
        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries

    async def count_by_user(self, user_id: UserId) -> int:
        return sum(1 for e in self._entries if e.user_id == user_id)

    async def clear(self, user_id: UserId) -> int:
        """Remove all of a user's entries."""
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.user_id != user_id]
        return before - len(self._entries)
