"""Update comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.error import ContentDeletedException, NotAuthorizedError, NotFoundError
from devfeed.domain.service import CommentService, PowerUpService
from devfeed.domain.value import CommentId, ItemKind, PowerUpTarget, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    text: str  # New text content (required, cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment_id: str
    item_kind: ItemKind
    item_id: str
    author_id: str
    text: str
    parent_id: str | None
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    power_up_count: int
    has_powered_up: bool


class UpdateCommentUseCase(
    BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]
):
    """Use case for updating a comment's text content."""

    def __init__(
        self,
        comment_service: CommentService,
        power_up_service: PowerUpService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            power_up_service: Power-up service
        """
        self.comment_service = comment_service
        self.power_up_service = power_up_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID, and new text

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            ContentDeletedException: If comment is deleted
            ValidationError: If the new text is empty or too long
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        # 1. Retrieve existing comment
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        # 2. Check authorization (user owns comment)
        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        # 3. Check not deleted
        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        # 4. Update via service
        updated = await self.comment_service.update_text(comment_id, request.text)
        if updated is None:
            # Deleted between the check and the update
            raise ContentDeletedException("comment", request.comment_id)

        status = await self.power_up_service.get_status(
            PowerUpTarget.COMMENT, comment_id, user_id
        )

        return UpdateCommentResponse(
            comment_id=str(updated.id),
            item_kind=updated.item_kind,
            item_id=str(updated.item_id),
            author_id=str(updated.author_id),
            text=updated.text,
            parent_id=str(updated.parent_id) if updated.parent_id else None,
            is_edited=updated.is_edited,
            created_at=updated.created_at,
            updated_at=updated.updated_at,
            power_up_count=status.count,
            has_powered_up=status.powered_up,
        )
