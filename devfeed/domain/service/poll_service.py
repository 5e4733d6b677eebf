"""Poll domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from devfeed.domain.error import AlreadyVotedError, NotFoundError, ValidationError
from devfeed.domain.model.poll import Poll, PollVote
from devfeed.domain.repository import PollRepository, PollVoteRepository
from devfeed.domain.value import PollId, PollOptionId, PollVoteId, UserId

from .base import Service


@dataclass(frozen=True)
class PollResults:
    """Vote counts of a poll, and the option the user picked if any."""

    poll: Poll
    vote_counts: dict[PollOptionId, int] = field(default_factory=dict)
    total_votes: int = 0
    user_vote: PollOptionId | None = None

    def count_for(self, option_id: PollOptionId) -> int:
        return self.vote_counts.get(option_id, 0)


class PollService(Service):
    """Domain service for poll operations."""

    def __init__(
        self,
        poll_repository: PollRepository,
        poll_vote_repository: PollVoteRepository,
    ) -> None:
        """Initialize poll service.

        Args:
            poll_repository: Poll repository
            poll_vote_repository: Poll vote repository
        """
        self.poll_repository = poll_repository
        self.poll_vote_repository = poll_vote_repository

    async def save_poll(self, poll: Poll) -> Poll:
        """Save a poll with its options."""
        with logfire.span(
            "poll_service.save_poll",
            poll_id=str(poll.id),
            options=len(poll.options),
        ):
            saved = await self.poll_repository.save(poll)
            logfire.info("Poll saved", poll_id=str(saved.id))
            return saved

    async def get_poll_by_id(self, poll_id: PollId) -> Poll | None:
        """Get a poll by ID.

        Args:
            poll_id: Poll ID

        Returns:
            Poll with its options if found, None otherwise
        """
        with logfire.span("poll_service.get_poll_by_id", poll_id=str(poll_id)):
            poll = await self.poll_repository.find_by_id(poll_id)
            if poll:
                logfire.info("Poll found", poll_id=str(poll_id))
            else:
                logfire.warn("Poll not found", poll_id=str(poll_id))
            return poll

    async def list_active_polls(self) -> list[Poll]:
        """Active polls, newest first."""
        with logfire.span("poll_service.list_active_polls"):
            polls = await self.poll_repository.find_active()
            logfire.info("Active polls listed", count=len(polls))
            return polls

    async def get_recent_questions(self, limit: int) -> list[str]:
        """Questions of the most recently created polls, newest first."""
        with logfire.span("poll_service.get_recent_questions", limit=limit):
            if limit <= 0:
                return []
            questions = await self.poll_repository.find_recent_questions(limit)
            logfire.info("Recent questions loaded", count=len(questions))
            return questions

    async def submit_vote(
        self, poll_id: PollId, option_id: PollOptionId, user_id: UserId
    ) -> PollVote:
        """Record a user's answer to a poll. Votes are final.

        Args:
            poll_id: Poll ID
            option_id: Chosen option, must belong to the poll
            user_id: Voting user

        Returns:
            The stored vote

        Raises:
            NotFoundError: If the poll doesn't exist
            ValidationError: If the option isn't one of the poll's options
            AlreadyVotedError: If the user already voted on this poll
        """
        with logfire.span(
            "poll_service.submit_vote",
            poll_id=str(poll_id),
            option_id=str(option_id),
            user_id=str(user_id),
        ):
            poll = await self.poll_repository.find_by_id(poll_id)
            if not poll:
                raise NotFoundError("Poll", str(poll_id))
            if not poll.has_option(option_id):
                raise ValidationError(
                    f"Option {option_id} does not belong to poll {poll_id}"
                )

            if await self.has_user_voted(poll_id, user_id):
                logfire.warn(
                    "Repeated vote rejected", poll_id=str(poll_id), user_id=str(user_id)
                )
                raise AlreadyVotedError(str(poll_id))

            vote = PollVote(
                id=PollVoteId(uuid4()),
                poll_id=poll_id,
                option_id=option_id,
                user_id=user_id,
                created_at=datetime.now(),
            )
            try:
                await self.poll_vote_repository.save(vote)
            except IntegrityError as e:
                # A concurrent request stored the user's vote first
                raise AlreadyVotedError(str(poll_id)) from e

            logfire.info(
                "Vote submitted",
                poll_id=str(poll_id),
                option_id=str(option_id),
                user_id=str(user_id),
            )
            return vote

    async def get_results(
        self, poll_id: PollId, user_id: UserId | None = None
    ) -> PollResults | None:
        """Per-option vote counts of a poll.

        Args:
            poll_id: Poll ID
            user_id: If given, the user's own vote is included

        Returns:
            Results, or None if the poll doesn't exist
        """
        with logfire.span("poll_service.get_results", poll_id=str(poll_id)):
            poll = await self.poll_repository.find_by_id(poll_id)
            if not poll:
                logfire.warn("Poll not found", poll_id=str(poll_id))
                return None

            counts = await self.poll_vote_repository.count_by_option(poll_id)
            # Only the poll's current options count towards the total
            counts = {o.id: counts.get(o.id, 0) for o in poll.options}
            user_vote = await self.get_user_vote(poll_id, user_id) if user_id else None

            results = PollResults(
                poll=poll,
                vote_counts=counts,
                total_votes=sum(counts.values()),
                user_vote=user_vote,
            )
            logfire.info(
                "Poll results loaded",
                poll_id=str(poll_id),
                total_votes=results.total_votes,
            )
            return results

    async def has_user_voted(self, poll_id: PollId, user_id: UserId) -> bool:
        return await self.get_user_vote(poll_id, user_id) is not None

    async def get_user_vote(
        self, poll_id: PollId, user_id: UserId
    ) -> PollOptionId | None:
        """The option a user voted for, None if they haven't voted."""
        vote = await self.poll_vote_repository.find_by_user(poll_id, user_id)
        return vote.option_id if vote else None
