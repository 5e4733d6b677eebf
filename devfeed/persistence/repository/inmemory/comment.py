"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from devfeed.domain.model.comment import Comment
from devfeed.domain.repository.comment import CommentRepository
from devfeed.domain.value import CommentId, ItemKind


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_item(
        self,
        item_kind: ItemKind,
        item_id: UUID,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find all comments on an item, oldest first."""
        comments = [
            c for c in self._comments.values() if c.belongs_to(item_kind, item_id)
        ]

        # Filter deleted
        if not include_deleted:
            comments = [c for c in comments if c.deleted_at is None]

        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_item(self, item_kind: ItemKind, item_id: UUID) -> int:
        """Count comments on an item (excluding deleted)."""
        return sum(
            1
            for c in self._comments.values()
            if c.belongs_to(item_kind, item_id) and c.deleted_at is None
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Replace text and mark edited, unless missing or deleted."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None

        updated = comment.model_copy(
            update={"text": text, "is_edited": True, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId, deleted_at: datetime) -> bool:
        """Set deleted_at on a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return False

        self._comments[comment_id] = comment.model_copy(
            update={"deleted_at": deleted_at, "updated_at": deleted_at}
        )
        return True
