"""Power-up domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from devfeed.domain.error import NotFoundError
from devfeed.domain.model.power_up import PowerUp
from devfeed.domain.repository import (
    CommentRepository,
    PostRepository,
    PowerUpRepository,
)
from devfeed.domain.value import CommentId, PostId, PowerUpId, PowerUpTarget, UserId

from .base import Service


@dataclass(frozen=True)
class PowerUpStatus:
    """A user's power-up state on one item, with the item's total."""

    target_type: PowerUpTarget
    target_id: UUID
    powered_up: bool
    count: int


class PowerUpService(Service):
    """Domain service for power-up (like) operations."""

    def __init__(
        self,
        power_up_repository: PowerUpRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize power-up service.

        Args:
            power_up_repository: Power-up repository
            post_repository: Post repository (target lookup)
            comment_repository: Comment repository (target lookup)
        """
        self.power_up_repository = power_up_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def toggle(
        self, target_type: PowerUpTarget, target_id: UUID, user_id: UserId
    ) -> PowerUpStatus:
        """Power up an item, or remove the user's power-up if present.

        Args:
            target_type: Post or comment
            target_id: Item ID
            user_id: User ID

        Returns:
            The new state and count

        Raises:
            NotFoundError: If the item doesn't exist (or is a deleted comment)
        """
        with logfire.span(
            "power_up_service.toggle",
            target_type=target_type.value,
            target_id=str(target_id),
            user_id=str(user_id),
        ):
            await self._ensure_target_exists(target_type, target_id)

            removed = await self.power_up_repository.delete_by_user_and_target(
                user_id=user_id, target_type=target_type, target_id=target_id
            )

            if removed:
                logfire.info(
                    "Power-up removed",
                    target_type=target_type.value,
                    target_id=str(target_id),
                    user_id=str(user_id),
                )
            else:
                power_up = PowerUp(
                    id=PowerUpId(uuid4()),
                    user_id=user_id,
                    target_type=target_type,
                    target_id=target_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.power_up_repository.save(power_up)
                    logfire.info(
                        "Power-up added",
                        target_type=target_type.value,
                        target_id=str(target_id),
                        user_id=str(user_id),
                    )
                except IntegrityError:
                    # A concurrent request added it first; the user is powered up
                    logfire.warn(
                        "Duplicate power-up attempt",
                        target_type=target_type.value,
                        target_id=str(target_id),
                        user_id=str(user_id),
                    )

            count = await self.power_up_repository.count_by_target(
                target_type, target_id
            )
            return PowerUpStatus(
                target_type=target_type,
                target_id=target_id,
                powered_up=not removed,
                count=count,
            )

    async def get_status(
        self,
        target_type: PowerUpTarget,
        target_id: UUID,
        user_id: UserId | None = None,
    ) -> PowerUpStatus:
        """Current count of an item and whether the user powered it up.

        Anonymous callers always get powered_up=False.
        """
        with logfire.span(
            "power_up_service.get_status",
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            count = await self.power_up_repository.count_by_target(
                target_type, target_id
            )
            powered_up = False
            if user_id is not None:
                existing = await self.power_up_repository.find_by_user_and_target(
                    user_id=user_id, target_type=target_type, target_id=target_id
                )
                powered_up = existing is not None

            return PowerUpStatus(
                target_type=target_type,
                target_id=target_id,
                powered_up=powered_up,
                count=count,
            )

    async def get_counts(
        self, target_type: PowerUpTarget, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Power-up counts for many items at once (0 for items without any)."""
        if not target_ids:
            return {}

        with logfire.span(
            "power_up_service.get_counts",
            target_type=target_type.value,
            count=len(target_ids),
        ):
            return await self.power_up_repository.count_by_targets(
                target_type, target_ids
            )

    async def get_user_power_ups(
        self,
        user_id: UserId | None,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> set[UUID]:
        """IDs among target_ids that the user has powered up.

        Args:
            user_id: User ID, or None for anonymous callers
            target_type: Post or comment
            target_ids: Item IDs to check

        Returns:
            Set of powered-up item IDs (empty for anonymous callers)
        """
        if user_id is None or not target_ids:
            return set()

        # Batch query to fetch all power-ups at once (avoid N+1)
        power_ups = await self.power_up_repository.find_by_user_and_targets(
            user_id=user_id, target_type=target_type, target_ids=target_ids
        )
        return {UUID(str(p.target_id)) for p in power_ups}

    async def _ensure_target_exists(
        self, target_type: PowerUpTarget, target_id: UUID
    ) -> None:
        if target_type == PowerUpTarget.POST:
            post = await self.post_repository.find_by_id(PostId(target_id))
            if not post:
                logfire.warn("Power-up on non-existent post", post_id=str(target_id))
                raise NotFoundError("Post", str(target_id))
            return

        comment = await self.comment_repository.find_by_id(CommentId(target_id))
        if not comment or comment.is_deleted:
            logfire.warn(
                "Power-up on non-existent comment", comment_id=str(target_id)
            )
            raise NotFoundError("Comment", str(target_id))
