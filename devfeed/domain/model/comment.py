"""Comment entity.

Comments are threaded discussions attached to exactly one post or poll.
Threads are stored flat (each row points at its parent) and assembled
into a tree on every read.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from devfeed.domain.model.common import PoweredUpModel
from devfeed.domain.value import CommentId, ItemKind, UserId


class Comment(PoweredUpModel):
    """Comment entity.

    Threading is managed through parent_id only (None for top-level).
    Soft deletion sets deleted_at and keeps the text; replies to a
    deleted comment keep pointing at it.
    """

    id: CommentId
    item_kind: ItemKind
    item_id: UUID  # PostId or PollId
    author_id: UserId
    text: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    is_edited: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def belongs_to(self, item_kind: ItemKind, item_id: UUID) -> bool:
        """Whether this comment is attached to the given item."""
        return self.item_kind == item_kind and self.item_id == item_id
