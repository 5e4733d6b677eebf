"""Post aggregate root.

A post is one technical tip in the feed. Most of them are written by the
content-generation job; all fields except the title are optional.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from devfeed.domain.model.common import PoweredUpModel
from devfeed.domain.value import CodeSnippet, PostId, RiskLevel


class Post(PoweredUpModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    summary: Optional[str] = None
    problem_solved: Optional[str] = None
    upside: Optional[str] = None
    downside: Optional[str] = None
    risk_level: Optional[RiskLevel] = None
    performance_impact: Optional[str] = None
    doc_url: Optional[str] = None
    primary_topic: Optional[str] = None
    syntax: Optional[str] = None
    code_snippets: list[CodeSnippet] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    compatibility_min_version: Optional[str] = None
    compatibility_deprecated_in: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    last_verified: date = Field(default_factory=date.today)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match on title, summary and problem_solved."""
        needle = term.lower()
        return any(
            needle in field.lower()
            for field in (self.title, self.summary, self.problem_solved)
            if field
        )
