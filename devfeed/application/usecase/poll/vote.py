"""Poll voting use cases: submit a vote and read the results."""

from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.error import NotFoundError
from devfeed.domain.service import PollResults, PollService
from devfeed.domain.value import PollId, PollOptionId, UserId


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    poll_id: str  # UUID string
    option_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class GetPollResultsRequest(BaseModel):
    """Get poll results request."""

    poll_id: str  # UUID string
    user_id: str | None = None  # Authenticated user, if any


class PollOptionResult(BaseModel):
    """One option with its vote count."""

    option_id: str
    text: str
    order: int
    vote_count: int


class PollResultsResponse(BaseModel):
    """Poll results. user_vote is the caller's option, if they voted."""

    poll_id: str
    question: str
    options: list[PollOptionResult]
    total_votes: int
    user_vote: str | None = None

    @classmethod
    def from_results(cls, results: PollResults) -> "PollResultsResponse":
        return cls(
            poll_id=str(results.poll.id),
            question=results.poll.question,
            options=[
                PollOptionResult(
                    option_id=str(option.id),
                    text=option.text,
                    order=option.order,
                    vote_count=results.count_for(option.id),
                )
                for option in results.poll.options
            ],
            total_votes=results.total_votes,
            user_vote=str(results.user_vote) if results.user_vote else None,
        )


class SubmitVoteUseCase(BaseUseCase[SubmitVoteRequest, PollResultsResponse]):
    """Use case for answering a poll. Returns the updated results."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: SubmitVoteRequest) -> PollResultsResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the poll doesn't exist
            ValidationError: If the option belongs to another poll
            AlreadyVotedError: If the user already voted
        """
        poll_id = PollId(UUID(request.poll_id))
        user_id = UserId(UUID(request.user_id))
        await self.poll_service.submit_vote(
            poll_id, PollOptionId(UUID(request.option_id)), user_id
        )

        results = await self.poll_service.get_results(poll_id, user_id)
        if results is None:
            raise NotFoundError("Poll", request.poll_id)
        return PollResultsResponse.from_results(results)


class GetPollResultsUseCase(BaseUseCase[GetPollResultsRequest, PollResultsResponse]):
    """Use case for a poll's vote counts."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: GetPollResultsRequest) -> PollResultsResponse:
        """Execute results flow.

        Raises:
            NotFoundError: If the poll doesn't exist
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        results = await self.poll_service.get_results(
            PollId(UUID(request.poll_id)), user_id
        )
        if results is None:
            raise NotFoundError("Poll", request.poll_id)
        return PollResultsResponse.from_results(results)
