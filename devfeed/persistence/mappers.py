"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Column names follow
the hosted platform's schema, which differs from the model field names in
a few places (content/text, user_id/author_id, parent_comment_id/parent_id).
"""

from typing import Any, Dict, Optional
from uuid import UUID

from devfeed.domain.model import (
    Comment,
    Poll,
    PollOption,
    PollVote,
    Post,
    PowerUp,
    StackEntry,
    UserPreferences,
)
from devfeed.domain.value import (
    CodeSnippet,
    CommentId,
    ItemKind,
    PollFrequency,
    PollId,
    PollOptionId,
    PollVoteId,
    PostId,
    PowerUpId,
    PowerUpTarget,
    RiskLevel,
    UserId,
)


def _to_uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_to_uuid(row["id"])),
        title=row["title"],
        summary=row.get("summary"),
        problem_solved=row.get("problem_solved"),
        upside=row.get("upside"),
        downside=row.get("downside"),
        risk_level=RiskLevel(row["risk_level"]) if row.get("risk_level") else None,
        performance_impact=row.get("performance_impact"),
        doc_url=row.get("doc_url"),
        primary_topic=row.get("primary_topic"),
        syntax=row.get("syntax"),
        code_snippets=[CodeSnippet(**s) for s in row.get("code_snippets") or []],
        dependencies=list(row.get("dependencies") or []),
        compatibility_min_version=row.get("compatibility_min_version"),
        compatibility_deprecated_in=row.get("compatibility_deprecated_in"),
        tags=list(row.get("tags") or []),
        difficulty=row.get("difficulty"),
        last_verified=row["last_verified"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    power_up_count is derived and never written.
    """
    data = post.model_dump(exclude={"power_up_count"})
    data["risk_level"] = post.risk_level.value if post.risk_level else None
    data["code_snippets"] = [s.model_dump() for s in post.code_snippets]
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Exactly one of post_id and poll_id is set on a row.
    """
    if row.get("post_id") is not None:
        item_kind, item_id = ItemKind.POST, _to_uuid(row["post_id"])
    else:
        item_kind, item_id = ItemKind.POLL, _to_uuid(row["poll_id"])

    parent_id = _to_uuid(row.get("parent_comment_id"))

    return Comment(
        id=CommentId(_to_uuid(row["id"])),
        item_kind=item_kind,
        item_id=item_id,
        author_id=UserId(_to_uuid(row["user_id"])),
        text=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        is_edited=row.get("is_edited", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "post_id": comment.item_id if comment.item_kind == ItemKind.POST else None,
        "poll_id": comment.item_id if comment.item_kind == ItemKind.POLL else None,
        "user_id": comment.author_id,
        "parent_comment_id": comment.parent_id,
        "content": comment.text,
        "is_edited": comment.is_edited,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "deleted_at": comment.deleted_at,
    }


def row_to_power_up(row: Dict[str, Any], target_type: PowerUpTarget) -> PowerUp:
    """Convert a post_likes or comment_power_ups row to PowerUp."""
    target_column = "post_id" if target_type == PowerUpTarget.POST else "comment_id"
    return PowerUp(
        id=PowerUpId(_to_uuid(row["id"])),
        user_id=UserId(_to_uuid(row["user_id"])),
        target_type=target_type,
        target_id=_to_uuid(row[target_column]),
        created_at=row["created_at"],
    )


def power_up_to_dict(power_up: PowerUp) -> Dict[str, Any]:
    """Convert PowerUp to a row of the table matching its target type."""
    target_column = (
        "post_id" if power_up.target_type == PowerUpTarget.POST else "comment_id"
    )
    return {
        "id": power_up.id,
        "user_id": power_up.user_id,
        target_column: power_up.target_id,
        "created_at": power_up.created_at,
    }


def row_to_poll_option(row: Dict[str, Any]) -> PollOption:
    return PollOption(
        id=PollOptionId(_to_uuid(row["id"])),
        text=row["option_text"],
        order=row["option_order"],
    )


def row_to_poll(row: Dict[str, Any], options: list[PollOption]) -> Poll:
    """Convert a polls row and its option rows to Poll."""
    return Poll(
        id=PollId(_to_uuid(row["id"])),
        question=row["question"],
        description=row.get("description"),
        category=row.get("category"),
        is_active=row["is_active"],
        options=options,
        created_at=row["created_at"],
    )


def poll_to_dict(poll: Poll) -> Dict[str, Any]:
    return poll.model_dump(exclude={"options"})


def poll_option_to_dict(poll_id: PollId, option: PollOption) -> Dict[str, Any]:
    return {
        "id": option.id,
        "poll_id": poll_id,
        "option_text": option.text,
        "option_order": option.order,
    }


def row_to_stack_entry(row: Dict[str, Any]) -> StackEntry:
    return StackEntry(
        user_id=UserId(_to_uuid(row["user_id"])),
        post_id=PostId(_to_uuid(row["post_id"])),
        created_at=row["created_at"],
    )


def stack_entry_to_dict(entry: StackEntry) -> Dict[str, Any]:
    return entry.model_dump()


def row_to_poll_vote(row: Dict[str, Any]) -> PollVote:
    return PollVote(
        id=PollVoteId(_to_uuid(row["id"])),
        poll_id=PollId(_to_uuid(row["poll_id"])),
        option_id=PollOptionId(_to_uuid(row["poll_option_id"])),
        user_id=UserId(_to_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def poll_vote_to_dict(vote: PollVote) -> Dict[str, Any]:
    return {
        "id": vote.id,
        "poll_id": vote.poll_id,
        "poll_option_id": vote.option_id,
        "user_id": vote.user_id,
        "created_at": vote.created_at,
    }


def row_to_preferences(row: Dict[str, Any]) -> UserPreferences:
    """Convert a profiles row to UserPreferences.

    A profile created before preferences existed has no poll_frequency.
    """
    frequency = row.get("poll_frequency")
    return UserPreferences(
        user_id=UserId(_to_uuid(row["id"])),
        topics=list(row.get("filter_preferences") or []),
        poll_frequency=PollFrequency(frequency) if frequency else PollFrequency.NORMAL,
        updated_at=row["updated_at"],
    )


def preferences_to_dict(preferences: UserPreferences) -> Dict[str, Any]:
    return {
        "id": preferences.user_id,
        "filter_preferences": list(preferences.topics),
        "poll_frequency": preferences.poll_frequency.value,
        "updated_at": preferences.updated_at,
    }
