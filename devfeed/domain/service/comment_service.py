"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from devfeed.config import ThreadSettings
from devfeed.domain.error import (
    ContentDeletedException,
    DepthLimitExceededError,
    NotFoundError,
    ValidationError,
)
from devfeed.domain.model.comment import Comment
from devfeed.domain.repository import CommentRepository, PowerUpRepository
from devfeed.domain.value import CommentId, ItemKind, PowerUpTarget, UserId

from .base import Service
from .thread import CommentNode, build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        power_up_repository: PowerUpRepository,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            power_up_repository: Power-up repository (popularity counts)
            thread_settings: Nesting and length limits
        """
        self.comment_repository = comment_repository
        self.power_up_repository = power_up_repository
        self.thread_settings = thread_settings

    async def create_comment(
        self,
        item_kind: ItemKind,
        item_id: UUID,
        author_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or poll, or reply to another comment.

        Args:
            item_kind: Kind of the owning item
            item_id: Owning item ID
            author_id: Author user ID
            text: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is empty or too long, or the parent
                belongs to another item
            NotFoundError: If the parent comment doesn't exist
            ContentDeletedException: If the parent comment is deleted
            DepthLimitExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            item_kind=item_kind.value,
            item_id=str(item_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = self._clean_text(text)

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))
                if parent.is_deleted:
                    logfire.warn("Reply to deleted comment", parent_id=str(parent_id))
                    raise ContentDeletedException("comment", str(parent_id))
                if not parent.belongs_to(item_kind, item_id):
                    logfire.error(
                        "Parent comment does not belong to item",
                        parent_id=str(parent_id),
                        parent_item_id=str(parent.item_id),
                        target_item_id=str(item_id),
                    )
                    raise ValidationError("Parent comment does not belong to this item")

                depth = await self.get_depth(parent) + 1
                if depth > self.thread_settings.max_depth:
                    logfire.warn(
                        "Reply depth limit reached",
                        parent_id=str(parent_id),
                        depth=depth,
                        max_depth=self.thread_settings.max_depth,
                    )
                    raise DepthLimitExceededError(self.thread_settings.max_depth)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                item_kind=item_kind,
                item_id=item_id,
                author_id=author_id,
                text=text,
                parent_id=parent_id,
                is_edited=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                item_id=str(item_id),
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID, with its power-up count.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found (deleted or not), None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                return None

            count = await self.power_up_repository.count_by_target(
                PowerUpTarget.COMMENT, comment.id
            )
            logfire.info("Comment found", comment_id=str(comment_id))
            return comment.with_power_up_count(count)

    async def get_depth(self, comment: Comment) -> int:
        """Nesting depth of a comment (top-level comments are at depth 0).

        Deleted ancestors still count. Walks at most max_depth + 1 parents;
        a broken or cyclic parent chain stops the walk.
        """
        depth = 0
        seen = {comment.id}
        current = comment
        while current.parent_id and depth <= self.thread_settings.max_depth:
            if current.parent_id in seen:
                break
            parent = await self.comment_repository.find_by_id(current.parent_id)
            if not parent:
                break
            depth += 1
            seen.add(parent.id)
            current = parent
        return depth

    async def get_thread(self, item_kind: ItemKind, item_id: UUID) -> list[CommentNode]:
        """Get the ranked comment forest of a post or poll.

        Deleted comments are left out, which also drops their replies.

        Args:
            item_kind: Kind of the owning item
            item_id: Owning item ID

        Returns:
            Root nodes ordered by popularity, children ranked at every level
        """
        with logfire.span(
            "comment_service.get_thread",
            item_kind=item_kind.value,
            item_id=str(item_id),
        ):
            comments = await self.comment_repository.find_by_item(
                item_kind=item_kind, item_id=item_id, include_deleted=False
            )

            counts = await self.power_up_repository.count_by_targets(
                PowerUpTarget.COMMENT, [c.id for c in comments]
            )
            comments = [c.with_power_up_count(counts.get(c.id, 0)) for c in comments]

            roots = build_comment_tree(comments)
            total = count_nodes(roots)

            if total < len(comments):
                logfire.warn(
                    "Unreachable comments dropped from thread",
                    item_id=str(item_id),
                    dropped=len(comments) - total,
                )
            logfire.info(
                "Comment thread built",
                item_id=str(item_id),
                roots=len(roots),
                total=total,
            )
            return roots

    async def count_comments(self, item_kind: ItemKind, item_id: UUID) -> int:
        """Count non-deleted comments on a post or poll."""
        with logfire.span(
            "comment_service.count_comments",
            item_kind=item_kind.value,
            item_id=str(item_id),
        ):
            return await self.comment_repository.count_by_item(item_kind, item_id)

    async def update_text(self, comment_id: CommentId, text: str) -> Comment | None:
        """Update the text content of a comment.

        Args:
            comment_id: Comment ID
            text: New text content

        Returns:
            Updated comment if found and updated, None if comment doesn't exist or is deleted

        Raises:
            ValidationError: If the text is empty or too long
        """
        with logfire.span(
            "comment_service.update_text",
            comment_id=str(comment_id),
            text_length=len(text),
        ):
            text = self._clean_text(text)
            updated = await self.comment_repository.update_text(comment_id, text)

            if updated:
                logfire.info(
                    "Comment text updated",
                    comment_id=str(comment_id),
                    item_id=str(updated.item_id),
                    text_length=len(updated.text),
                )
            else:
                logfire.warn(
                    "Comment not found or deleted for text update",
                    comment_id=str(comment_id),
                )

            return updated

    async def soft_delete(self, comment_id: CommentId) -> bool:
        """Soft delete a comment. Replies keep pointing at it.

        Args:
            comment_id: Comment ID

        Returns:
            True if the comment was deleted by this call
        """
        with logfire.span("comment_service.soft_delete", comment_id=str(comment_id)):
            deleted = await self.comment_repository.soft_delete(
                comment_id, datetime.now()
            )
            if deleted:
                logfire.info("Comment deleted", comment_id=str(comment_id))
            else:
                logfire.warn(
                    "Comment not found or already deleted",
                    comment_id=str(comment_id),
                )
            return deleted

    def _clean_text(self, text: str) -> str:
        text = text.strip()
        if not text:
            raise ValidationError("Comment text cannot be empty")
        if len(text) > self.thread_settings.max_comment_length:
            raise ValidationError(
                f"Comment text cannot exceed {self.thread_settings.max_comment_length} characters"
            )
        return text
