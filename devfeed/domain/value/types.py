"""Domain value types for the feed."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ItemKind(str, Enum):
    """Kind of feed item a comment can be attached to."""

    POST = "post"
    POLL = "poll"


class PowerUpTarget(str, Enum):
    """Type of entity that can be powered up."""

    POST = "post"
    COMMENT = "comment"


class RiskLevel(str, Enum):
    """How risky it is to adopt a tip."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class PollFrequency(str, Enum):
    """How often polls are mixed into a user's feed."""

    NEVER = "never"
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class CodeSnippet(BaseModel):
    """A labelled code sample attached to a tip. Compared by value."""

    model_config = ConfigDict(frozen=True)

    label: str
    language: str
    content: str
