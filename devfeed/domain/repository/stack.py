"""Stack repository interface."""

from abc import ABC, abstractmethod
from typing import List

from devfeed.domain.model.stack import StackEntry
from devfeed.domain.value import PostId, UserId


class StackRepository(ABC):
    """Repository for users' save-for-later stacks."""

    @abstractmethod
    async def push(self, entry: StackEntry) -> StackEntry:
        """Add a post to a user's stack.

        Raises:
            IntegrityError: If the post is already on the stack
        """
        pass

    @abstractmethod
    async def pop(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a post from a user's stack. Returns False if absent."""
        pass

    @abstractmethod
    async def contains(self, user_id: UserId, post_id: PostId) -> bool:
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[StackEntry]:
        """Entries of a user's stack, most recently pushed first."""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def clear(self, user_id: UserId) -> int:
        """Remove every entry of a user's stack. Returns how many were removed."""
        pass
