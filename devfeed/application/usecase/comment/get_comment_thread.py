"""Get comment thread use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.config import ThreadSettings
from devfeed.domain.service import (
    CommentService,
    PollService,
    PostService,
    PowerUpService,
)
from devfeed.domain.service.thread import count_nodes, iter_nodes
from devfeed.domain.value import ItemKind, PowerUpTarget, UserId

from .item import ensure_item_exists


class CommentNodeResponse(BaseModel):
    """Comment with its ranked replies, for rendering a thread."""

    comment_id: str
    author_id: str
    text: str
    parent_id: str | None
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    power_up_count: int
    has_powered_up: bool
    depth: int
    can_reply: bool
    children: list["CommentNodeResponse"]


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    item_kind: ItemKind
    item_id: str  # UUID string
    user_id: str | None = None  # Authenticated user, if any


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    item_kind: ItemKind
    item_id: str
    comments: list[CommentNodeResponse]
    total: int
    max_depth: int


class GetCommentThreadUseCase(
    BaseUseCase[GetCommentThreadRequest, GetCommentThreadResponse]
):
    """Use case for reading the ranked comment thread of a post or poll."""

    def __init__(
        self,
        comment_service: CommentService,
        power_up_service: PowerUpService,
        post_service: PostService,
        poll_service: PollService,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            power_up_service: Power-up service for per-user state
            post_service: Post domain service
            poll_service: Poll domain service
            thread_settings: Reply depth limit
        """
        self.comment_service = comment_service
        self.power_up_service = power_up_service
        self.post_service = post_service
        self.poll_service = poll_service
        self.thread_settings = thread_settings

    async def execute(self, request: GetCommentThreadRequest) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Steps:
        1. Verify the item exists
        2. Build the ranked tree via comment service
        3. Mark comments the user has powered up (batch query)
        4. Flatten-walk the tree into nested response nodes with depth and
           reply affordance

        Args:
            request: Get comment thread request

        Returns:
            Nested thread with the number of comments it contains
        """
        item_id = UUID(request.item_id)
        await ensure_item_exists(
            request.item_kind, item_id, self.post_service, self.poll_service
        )

        with logfire.span(
            "get_comment_thread.execute",
            item_kind=request.item_kind.value,
            item_id=request.item_id,
        ):
            roots = await self.comment_service.get_thread(request.item_kind, item_id)

            user_id = UserId(UUID(request.user_id)) if request.user_id else None
            powered_up = await self.power_up_service.get_user_power_ups(
                user_id,
                PowerUpTarget.COMMENT,
                [node.id for node, _ in iter_nodes(roots)],
            )

            max_depth = self.thread_settings.max_depth
            top_level: list[CommentNodeResponse] = []
            ancestors: list[CommentNodeResponse] = []

            # iter_nodes yields in display order, so each node's parent is
            # the last ancestor one level up
            for node, depth in iter_nodes(roots):
                comment = node.comment
                item = CommentNodeResponse(
                    comment_id=str(comment.id),
                    author_id=str(comment.author_id),
                    text=comment.text,
                    parent_id=str(comment.parent_id) if depth > 0 else None,
                    is_edited=comment.is_edited,
                    created_at=comment.created_at,
                    updated_at=comment.updated_at,
                    power_up_count=comment.power_up_count,
                    has_powered_up=comment.id in powered_up,
                    depth=depth,
                    can_reply=depth < max_depth,
                    children=[],
                )

                del ancestors[depth:]
                if depth == 0:
                    top_level.append(item)
                else:
                    ancestors[-1].children.append(item)
                ancestors.append(item)

            return GetCommentThreadResponse(
                item_kind=request.item_kind,
                item_id=request.item_id,
                comments=top_level,
                total=count_nodes(roots),
                max_depth=max_depth,
            )
