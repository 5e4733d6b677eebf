"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.error import NotFoundError
from devfeed.domain.service import (
    CommentService,
    PostService,
    PowerUpService,
    StackService,
)
from devfeed.domain.value import ItemKind, PostId, PowerUpTarget, UserId

from .post_item import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Authenticated user, if any


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem
    comment_count: int


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for a single post's detail view."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        power_up_service: PowerUpService,
        stack_service: StackService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service (comment count)
            power_up_service: Power-up service for per-user state
            stack_service: Stack service for per-user state
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.power_up_service = power_up_service
        self.stack_service = stack_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        has_powered_up = False
        in_stack = False
        if request.user_id:
            user_id = UserId(UUID(request.user_id))
            status = await self.power_up_service.get_status(
                PowerUpTarget.POST, post_id, user_id
            )
            has_powered_up = status.powered_up
            in_stack = await self.stack_service.is_in_stack(user_id, post_id)

        comment_count = await self.comment_service.count_comments(ItemKind.POST, post_id)

        return GetPostResponse(
            post=PostItem.from_domain(post, has_powered_up=has_powered_up, in_stack=in_stack),
            comment_count=comment_count,
        )
