"""Poll voting use cases."""

from .vote import (
    GetPollResultsRequest,
    GetPollResultsUseCase,
    PollOptionResult,
    PollResultsResponse,
    SubmitVoteRequest,
    SubmitVoteUseCase,
)

__all__ = [
    "GetPollResultsRequest",
    "GetPollResultsUseCase",
    "PollOptionResult",
    "PollResultsResponse",
    "SubmitVoteRequest",
    "SubmitVoteUseCase",
]
