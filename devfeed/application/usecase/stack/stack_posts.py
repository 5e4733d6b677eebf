"""Stack use cases: push, pop, list and clear a user's saved posts."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.application.usecase.feed.post_item import PostItem
from devfeed.domain.service import PowerUpService, StackService
from devfeed.domain.value import PostId, PowerUpTarget, UserId


class StackRequest(BaseModel):
    """Push or pop request."""

    user_id: str  # User ID from authenticated user
    post_id: str  # UUID string


class PushToStackResponse(BaseModel):
    """Push response. added is False when the post was already stacked."""

    post_id: str
    added: bool
    count: int


class PopFromStackResponse(BaseModel):
    """Pop response. removed is False when the post wasn't stacked."""

    post_id: str
    removed: bool
    count: int


class StackItem(BaseModel):
    """A stacked post with the time it was pushed."""

    post: PostItem
    stacked_at: datetime


class GetStackRequest(BaseModel):
    user_id: str


class GetStackResponse(BaseModel):
    items: list[StackItem]
    total: int


class ClearStackResponse(BaseModel):
    removed: int


class PushToStackUseCase(BaseUseCase[StackRequest, PushToStackResponse]):
    """Use case for saving a post for later."""

    def __init__(self, stack_service: StackService) -> None:
        self.stack_service = stack_service

    async def execute(self, request: StackRequest) -> PushToStackResponse:
        """Execute push flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        added = await self.stack_service.push(user_id, PostId(UUID(request.post_id)))
        count = await self.stack_service.count(user_id)
        return PushToStackResponse(post_id=request.post_id, added=added, count=count)


class PopFromStackUseCase(BaseUseCase[StackRequest, PopFromStackResponse]):
    """Use case for removing a post from the stack."""

    def __init__(self, stack_service: StackService) -> None:
        self.stack_service = stack_service

    async def execute(self, request: StackRequest) -> PopFromStackResponse:
        user_id = UserId(UUID(request.user_id))
        removed = await self.stack_service.pop(user_id, PostId(UUID(request.post_id)))
        count = await self.stack_service.count(user_id)
        return PopFromStackResponse(post_id=request.post_id, removed=removed, count=count)


class GetStackUseCase(BaseUseCase[GetStackRequest, GetStackResponse]):
    """Use case for listing a user's stack, most recently pushed first."""

    def __init__(
        self, stack_service: StackService, power_up_service: PowerUpService
    ) -> None:
        """Initialize get stack use case.

        Args:
            stack_service: Stack domain service
            power_up_service: Power-up service for per-user state
        """
        self.stack_service = stack_service
        self.power_up_service = power_up_service

    async def execute(self, request: GetStackRequest) -> GetStackResponse:
        user_id = UserId(UUID(request.user_id))
        stacked = await self.stack_service.get_stack(user_id)

        powered_up = await self.power_up_service.get_user_power_ups(
            user_id, PowerUpTarget.POST, [post.id for _, post in stacked]
        )

        items = [
            StackItem(
                post=PostItem.from_domain(
                    post, has_powered_up=post.id in powered_up, in_stack=True
                ),
                stacked_at=entry.created_at,
            )
            for entry, post in stacked
        ]
        return GetStackResponse(items=items, total=len(items))


class ClearStackUseCase(BaseUseCase[GetStackRequest, ClearStackResponse]):
    """Use case for emptying a user's stack."""

    def __init__(self, stack_service: StackService) -> None:
        self.stack_service = stack_service

    async def execute(self, request: GetStackRequest) -> ClearStackResponse:
        removed = await self.stack_service.clear(UserId(UUID(request.user_id)))
        return ClearStackResponse(removed=removed)
