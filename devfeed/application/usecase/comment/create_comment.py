"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.service import CommentService, PollService, PostService
from devfeed.domain.value import CommentId, ItemKind, UserId

from .item import ensure_item_exists


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    item_kind: ItemKind
    item_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    item_kind: ItemKind
    item_id: str
    author_id: str
    text: str
    parent_id: str | None
    created_at: datetime


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for commenting on a post or poll, or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        poll_service: PollService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            poll_service: Poll domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.poll_service = poll_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the post or poll exists
        2. Create comment via comment service (validates parent and depth)

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            NotFoundError: If the item or parent comment doesn't exist
            ValidationError: If text or parent is invalid
            DepthLimitExceededError: If the reply would nest too deep
        """
        item_id = UUID(request.item_id)
        await ensure_item_exists(
            request.item_kind, item_id, self.post_service, self.poll_service
        )

        comment = await self.comment_service.create_comment(
            item_kind=request.item_kind,
            item_id=item_id,
            author_id=UserId(UUID(request.author_id)),
            text=request.text,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            item_kind=comment.item_kind,
            item_id=str(comment.item_id),
            author_id=str(comment.author_id),
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
