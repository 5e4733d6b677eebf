"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from devfeed.domain.model.comment import Comment
from devfeed.domain.value import CommentId, ItemKind


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    Returned comments always have power_up_count == 0; counts are joined
    by the services.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (deleted or not), None otherwise
        """
        pass

    @abstractmethod
    async def find_by_item(
        self,
        item_kind: ItemKind,
        item_id: UUID,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments attached to a post or poll.

        Args:
            item_kind: Kind of the owning item
            item_id: ID of the owning item
            include_deleted: Whether to include soft-deleted comments

        Returns:
            Comments ordered by creation time, oldest first
        """
        pass

    @abstractmethod
    async def count_by_item(self, item_kind: ItemKind, item_id: UUID) -> int:
        """Count non-deleted comments on an item."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Replace the text of a non-deleted comment and mark it edited.

        Returns:
            The updated comment, or None if missing or deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId, deleted_at: datetime) -> bool:
        """Set deleted_at on a comment. Replies are left untouched.

        Returns:
            True if a non-deleted comment was marked deleted
        """
        pass
