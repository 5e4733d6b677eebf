"""Stack (save-for-later) domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from devfeed.domain.error import NotFoundError
from devfeed.domain.model.post import Post
from devfeed.domain.model.stack import StackEntry
from devfeed.domain.repository import StackRepository
from devfeed.domain.value import PostId, UserId

from .base import Service
from .post_service import PostService


class StackService(Service):
    """Domain service for users' save-for-later stacks."""

    def __init__(
        self,
        stack_repository: StackRepository,
        post_service: PostService,
    ) -> None:
        """Initialize stack service.

        Args:
            stack_repository: Stack repository
            post_service: Post domain service
        """
        self.stack_repository = stack_repository
        self.post_service = post_service

    async def push(self, user_id: UserId, post_id: PostId) -> bool:
        """Add a post to the user's stack.

        Args:
            user_id: User ID
            post_id: Post ID

        Returns:
            True if added, False if the post was already on the stack

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "stack_service.push", user_id=str(user_id), post_id=str(post_id)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            try:
                await self.stack_repository.push(
                    StackEntry(user_id=user_id, post_id=post_id, created_at=datetime.now())
                )
            except IntegrityError:
                logfire.info(
                    "Post already on stack", user_id=str(user_id), post_id=str(post_id)
                )
                return False

            logfire.info("Post pushed to stack", user_id=str(user_id), post_id=str(post_id))
            return True

    async def pop(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a post from the user's stack.

        Returns:
            True if removed, False if it wasn't on the stack
        """
        with logfire.span(
            "stack_service.pop", user_id=str(user_id), post_id=str(post_id)
        ):
            removed = await self.stack_repository.pop(user_id, post_id)
            if removed:
                logfire.info(
                    "Post popped from stack", user_id=str(user_id), post_id=str(post_id)
                )
            else:
                logfire.info(
                    "Post not on stack", user_id=str(user_id), post_id=str(post_id)
                )
            return removed

    async def is_in_stack(self, user_id: UserId, post_id: PostId) -> bool:
        return await self.stack_repository.contains(user_id, post_id)

    async def get_post_ids(self, user_id: UserId) -> set[PostId]:
        """IDs of every post on the user's stack."""
        entries = await self.stack_repository.find_by_user(user_id)
        return {entry.post_id for entry in entries}

    async def get_stack(self, user_id: UserId) -> list[tuple[StackEntry, Post]]:
        """The user's stacked posts, most recently pushed first.

        Entries whose post no longer exists are skipped.
        """
        with logfire.span("stack_service.get_stack", user_id=str(user_id)):
            entries = await self.stack_repository.find_by_user(user_id)
            posts = await self.post_service.get_posts_by_ids([e.post_id for e in entries])

            stacked = [(e, posts[e.post_id]) for e in entries if e.post_id in posts]
            if len(stacked) < len(entries):
                logfire.warn(
                    "Stack entries reference missing posts",
                    user_id=str(user_id),
                    missing=len(entries) - len(stacked),
                )
            logfire.info("Stack loaded", user_id=str(user_id), count=len(stacked))
            return stacked

    async def count(self, user_id: UserId) -> int:
        with logfire.span("stack_service.count", user_id=str(user_id)):
            return await self.stack_repository.count_by_user(user_id)

    async def clear(self, user_id: UserId) -> int:
        """Empty the user's stack. Returns how many entries were removed."""
        with logfire.span("stack_service.clear", user_id=str(user_id)):
            removed = await self.stack_repository.clear(user_id)
            logfire.info("Stack cleared", user_id=str(user_id), removed=removed)
            return removed
