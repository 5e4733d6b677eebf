"""Domain value objects for the feed."""

from devfeed.domain.value.identifiers import (
    CommentId,
    PollId,
    PollOptionId,
    PollVoteId,
    PostId,
    PowerUpId,
    UserId,
)
from devfeed.domain.value.types import (
    CodeSnippet,
    ItemKind,
    PollFrequency,
    PowerUpTarget,
    RiskLevel,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "PollId",
    "PollOptionId",
    "CommentId",
    "PowerUpId",
    "PollVoteId",
    # Types
    "ItemKind",
    "PollFrequency",
    "PowerUpTarget",
    "RiskLevel",
    "CodeSnippet",
]
