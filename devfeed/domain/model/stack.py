"""Stack entry entity.

The stack is a user's save-for-later list of posts.
"""

from datetime import datetime

from pydantic import Field

from devfeed.domain.model.common import DomainModel
from devfeed.domain.value import PostId, UserId


class StackEntry(DomainModel):
    """A post pushed onto a user's stack. Unique per (user, post)."""

    user_id: UserId
    post_id: PostId
    created_at: datetime = Field(default_factory=datetime.now)
