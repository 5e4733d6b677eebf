"""Repository interfaces for the feed domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from devfeed.domain.repository.comment import CommentRepository
from devfeed.domain.repository.poll import PollRepository
from devfeed.domain.repository.poll_vote import PollVoteRepository
from devfeed.domain.repository.post import PostRepository
from devfeed.domain.repository.power_up import PowerUpRepository
from devfeed.domain.repository.preferences import PreferencesRepository
from devfeed.domain.repository.stack import StackRepository

__all__ = [
    "CommentRepository",
    "PollRepository",
    "PollVoteRepository",
    "PostRepository",
    "PowerUpRepository",
    "PreferencesRepository",
    "StackRepository",
]
