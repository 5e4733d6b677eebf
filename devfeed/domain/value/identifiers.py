"""Strongly typed identifiers for feed entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
PollId = NewType("PollId", UUID)
PollOptionId = NewType("PollOptionId", UUID)
CommentId = NewType("CommentId", UUID)
PowerUpId = NewType("PowerUpId", UUID)
PollVoteId = NewType("PollVoteId", UUID)
