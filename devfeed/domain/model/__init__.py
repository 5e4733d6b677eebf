"""Domain model entities for the feed."""

from devfeed.domain.model.comment import Comment
from devfeed.domain.model.generation import GeneratedPoll, GeneratedTip, IngestionReport
from devfeed.domain.model.poll import Poll, PollOption, PollVote
from devfeed.domain.model.post import Post
from devfeed.domain.model.power_up import PowerUp
from devfeed.domain.model.preferences import UserPreferences
from devfeed.domain.model.stack import StackEntry

__all__ = [
    "Comment",
    "GeneratedPoll",
    "GeneratedTip",
    "IngestionReport",
    "Post",
    "Poll",
    "PollOption",
    "PollVote",
    "PowerUp",
    "StackEntry",
    "UserPreferences",
]
