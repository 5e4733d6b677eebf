"""Feed use cases."""

from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_feed import ListFeedRequest, ListFeedResponse, ListFeedUseCase
from .list_polls import ListPollsResponse, ListPollsUseCase, PollItem, PollOptionItem
from .post_item import PostItem

__all__ = [
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListFeedRequest",
    "ListFeedResponse",
    "ListFeedUseCase",
    "ListPollsResponse",
    "ListPollsUseCase",
    "PollItem",
    "PollOptionItem",
    "PostItem",
]
