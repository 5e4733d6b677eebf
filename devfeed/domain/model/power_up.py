"""Power-up entity.

A power-up is a like: one per user per post or comment.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from devfeed.domain.model.common import DomainModel
from devfeed.domain.value import PowerUpId, PowerUpTarget, UserId


class PowerUp(DomainModel):
    """Power-up entity.

    Business rules:
    - One power-up per user per item (enforced by unique constraint)
    - Polymorphic reference to the target (post or comment)
    """

    id: PowerUpId
    user_id: UserId
    target_type: PowerUpTarget
    target_id: UUID  # PostId or CommentId
    created_at: datetime = Field(default_factory=datetime.now)
