"""List feed use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.service import (
    PostService,
    PowerUpService,
    PreferencesService,
    StackService,
)
from devfeed.domain.value import PowerUpTarget, RiskLevel, UserId

from .post_item import PostItem


class ListFeedRequest(BaseModel):
    """List feed request. All filters are optional and combined with AND.

    An authenticated request without any filter uses the user's saved topics.
    """

    topic: str | None = None
    tag: str | None = None
    risk_level: RiskLevel | None = None
    search: str | None = None
    user_id: str | None = None  # Authenticated user, if any


class ListFeedResponse(BaseModel):
    """List feed response."""

    posts: list[PostItem]
    total: int


def _has_filter(request: ListFeedRequest) -> bool:
    return any(
        value is not None
        for value in (request.topic, request.tag, request.risk_level, request.search)
    )


class ListFeedUseCase(BaseUseCase[ListFeedRequest, ListFeedResponse]):
    """Use case for the ranked post feed."""

    def __init__(
        self,
        post_service: PostService,
        power_up_service: PowerUpService,
        stack_service: StackService,
        preferences_service: PreferencesService,
    ) -> None:
        """Initialize list feed use case.

        Args:
            post_service: Post domain service
            power_up_service: Power-up service for per-user state
            stack_service: Stack service for per-user state
            preferences_service: Saved topics for unfiltered requests
        """
        self.post_service = post_service
        self.power_up_service = power_up_service
        self.stack_service = stack_service
        self.preferences_service = preferences_service

    async def execute(self, request: ListFeedRequest) -> ListFeedResponse:
        """Execute list feed flow.

        Posts come back most powered-up first, newest first among equals.
        """
        with logfire.span(
            "list_feed.execute",
            topic=request.topic,
            tag=request.tag,
            search=request.search,
        ):
            user_id = UserId(UUID(request.user_id)) if request.user_id else None

            topics = None
            if user_id and not _has_filter(request):
                topics = await self.preferences_service.load_filter_preferences(user_id)
                if topics:
                    logfire.info(
                        "Applying saved topics", user_id=str(user_id), topics=topics
                    )

            posts = await self.post_service.list_feed(
                topic=request.topic,
                tag=request.tag,
                risk_level=request.risk_level,
                search=request.search,
                topics=topics or None,
            )

            powered_up = await self.power_up_service.get_user_power_ups(
                user_id, PowerUpTarget.POST, [post.id for post in posts]
            )
            stacked = await self.stack_service.get_post_ids(user_id) if user_id else set()

            items = [
                PostItem.from_domain(
                    post,
                    has_powered_up=post.id in powered_up,
                    in_stack=post.id in stacked,
                )
                for post in posts
            ]
            return ListFeedResponse(posts=items, total=len(items))
