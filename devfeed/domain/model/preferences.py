"""User preferences entity.

Preferences live on the user's profile: the topics the feed is filtered
to by default and how often polls should appear.
"""

from datetime import datetime

from pydantic import Field

from devfeed.domain.model.common import DomainModel
from devfeed.domain.value import PollFrequency, UserId


class UserPreferences(DomainModel):
    """A user's saved feed preferences. Empty topics means no filter."""

    user_id: UserId
    topics: list[str] = Field(default_factory=list)
    poll_frequency: PollFrequency = PollFrequency.NORMAL
    updated_at: datetime = Field(default_factory=datetime.now)
