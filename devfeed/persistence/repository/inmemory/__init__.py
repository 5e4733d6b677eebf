"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .poll import InMemoryPollRepository
from .poll_vote import InMemoryPollVoteRepository
from .post import InMemoryPostRepository
from .power_up import InMemoryPowerUpRepository
from .preferences import InMemoryPreferencesRepository
from .stack import InMemoryStackRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPollRepository",
    "InMemoryPollVoteRepository",
    "InMemoryPostRepository",
    "InMemoryPowerUpRepository",
    "InMemoryPreferencesRepository",
    "InMemoryStackRepository",
]
