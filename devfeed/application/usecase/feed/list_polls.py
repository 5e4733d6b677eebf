"""List polls use case."""

from datetime import datetime

from pydantic import BaseModel

from devfeed.domain.service import PollService


class PollOptionItem(BaseModel):
    """Poll option in response."""

    option_id: str
    text: str
    order: int


class PollItem(BaseModel):
    """Poll in response."""

    poll_id: str
    question: str
    description: str | None
    category: str | None
    options: list[PollOptionItem]
    created_at: datetime


class ListPollsResponse(BaseModel):
    """List polls response."""

    polls: list[PollItem]


class ListPollsUseCase:
    """Use case for listing active polls, newest first."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize list polls use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self) -> ListPollsResponse:
        polls = await self.poll_service.list_active_polls()
        return ListPollsResponse(
            polls=[
                PollItem(
                    poll_id=str(poll.id),
                    question=poll.question,
                    description=poll.description,
                    category=poll.category,
                    options=[
                        PollOptionItem(
                            option_id=str(option.id),
                            text=option.text,
                            order=option.order,
                        )
                        for option in poll.options
                    ],
                    created_at=poll.created_at,
                )
                for poll in polls
            ]
        )
