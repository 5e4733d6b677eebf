"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.error import ContentDeletedException, NotAuthorizedError, NotFoundError
from devfeed.domain.service import CommentService
from devfeed.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase(
    BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]
):
    """Use case for soft-deleting a comment.

    Replies are not touched; they drop out of the thread because their
    parent no longer appears in it.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            ContentDeletedException: If comment is already deleted
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        deleted = await self.comment_service.soft_delete(comment_id)
        if not deleted:
            raise ContentDeletedException("comment", request.comment_id)

        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)
