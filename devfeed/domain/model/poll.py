"""Poll aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devfeed.domain.model.common import DomainModel
from devfeed.domain.value import PollId, PollOptionId, PollVoteId, UserId


class PollOption(DomainModel):
    """One answer of a poll, displayed in ascending order."""

    id: PollOptionId
    text: str = Field(min_length=1)
    order: int = Field(default=0, ge=0)


class Poll(DomainModel):
    """Poll aggregate root.

    A poll owns its options; they are saved and loaded together.
    """

    id: PollId
    question: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    is_active: bool = True
    options: list[PollOption] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def has_option(self, option_id: PollOptionId) -> bool:
        return any(option.id == option_id for option in self.options)


class PollVote(DomainModel):
    """A user's answer to a poll. One vote per user per poll."""

    id: PollVoteId
    poll_id: PollId
    option_id: PollOptionId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
