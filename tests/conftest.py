"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt
import logfire

from devfeed.config import AuthSettings
from devfeed.domain.model import Comment, Poll, PollOption, Post
from devfeed.domain.value import (
    CommentId,
    ItemKind,
    PollId,
    PollOptionId,
    PostId,
    UserId,
)

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after BASE_TIME, for deterministic ordering."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_post(title: str = "Use functools.cache for pure helpers", **fields) -> Post:
    """Helper function to build a post with sensible defaults."""
    fields.setdefault("id", PostId(uuid4()))
    fields.setdefault("created_at", BASE_TIME)
    fields.setdefault("updated_at", fields["created_at"])
    return Post(title=title, **fields)


def make_comment(
    item_id: UUID,
    parent_id: CommentId | None = None,
    created_at: datetime = BASE_TIME,
    power_up_count: int = 0,
    item_kind: ItemKind = ItemKind.POST,
    **fields,
) -> Comment:
    """Helper function to build a comment with sensible defaults."""
    fields.setdefault("id", CommentId(uuid4()))
    fields.setdefault("author_id", UserId(uuid4()))
    fields.setdefault("text", "Nice tip")
    return Comment(
        item_kind=item_kind,
        item_id=item_id,
        parent_id=parent_id,
        created_at=created_at,
        updated_at=created_at,
        power_up_count=power_up_count,
        **fields,
    )


def make_poll(
    question: str = "Which formatter do you use?",
    options: list[str] | None = None,
    **fields,
) -> Poll:
    """Helper function to build a poll; options are ordered as given."""
    options = options if options is not None else ["black", "ruff", "yapf"]
    fields.setdefault("id", PollId(uuid4()))
    fields.setdefault("created_at", BASE_TIME)
    return Poll(
        question=question,
        options=[
            PollOption(id=PollOptionId(uuid4()), text=text, order=i)
            for i, text in enumerate(options)
        ],
        **fields,
    )


def make_token(
    user_id: UUID | str,
    settings: AuthSettings | None = None,
    expires_in: timedelta = timedelta(hours=1),
    **claims,
) -> str:
    """Sign an access token the way the hosted auth provider does."""
    settings = settings or AuthSettings()
    payload = {
        "sub": str(user_id),
        "aud": settings.jwt_audience,
        "exp": datetime.now(timezone.utc) + expires_in,
        "role": "authenticated",
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
