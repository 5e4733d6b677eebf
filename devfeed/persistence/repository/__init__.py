"""PostgreSQL repository implementations."""

from devfeed.persistence.repository.comment import PostgresCommentRepository
from devfeed.persistence.repository.poll import PostgresPollRepository
from devfeed.persistence.repository.poll_vote import PostgresPollVoteRepository
from devfeed.persistence.repository.post import PostgresPostRepository
from devfeed.persistence.repository.power_up import PostgresPowerUpRepository
from devfeed.persistence.repository.preferences import PostgresPreferencesRepository
from devfeed.persistence.repository.stack import PostgresStackRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPollRepository",
    "PostgresPollVoteRepository",
    "PostgresPostRepository",
    "PostgresPowerUpRepository",
    "PostgresPreferencesRepository",
    "PostgresStackRepository",
]
