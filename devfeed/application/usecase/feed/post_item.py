"""Post representation shared by the feed and stack use cases."""

from datetime import date, datetime

from pydantic import BaseModel

from devfeed.domain.model import Post
from devfeed.domain.value import CodeSnippet, RiskLevel


class PostItem(BaseModel):
    """Post with popularity and per-user state."""

    post_id: str
    title: str
    summary: str | None
    problem_solved: str | None
    upside: str | None
    downside: str | None
    risk_level: RiskLevel | None
    performance_impact: str | None
    doc_url: str | None
    primary_topic: str | None
    syntax: str | None
    code_snippets: list[CodeSnippet]
    dependencies: list[str]
    compatibility_min_version: str | None
    compatibility_deprecated_in: str | None
    tags: list[str]
    difficulty: str | None
    last_verified: date
    created_at: datetime
    power_up_count: int
    has_powered_up: bool
    in_stack: bool

    @classmethod
    def from_domain(
        cls, post: Post, has_powered_up: bool = False, in_stack: bool = False
    ) -> "PostItem":
        """Convert a Post (with power_up_count joined) to a response item."""
        return cls(
            post_id=str(post.id),
            title=post.title,
            summary=post.summary,
            problem_solved=post.problem_solved,
            upside=post.upside,
            downside=post.downside,
            risk_level=post.risk_level,
            performance_impact=post.performance_impact,
            doc_url=post.doc_url,
            primary_topic=post.primary_topic,
            syntax=post.syntax,
            code_snippets=post.code_snippets,
            dependencies=post.dependencies,
            compatibility_min_version=post.compatibility_min_version,
            compatibility_deprecated_in=post.compatibility_deprecated_in,
            tags=post.tags,
            difficulty=post.difficulty,
            last_verified=post.last_verified,
            created_at=post.created_at,
            power_up_count=post.power_up_count,
            has_powered_up=has_powered_up,
            in_stack=in_stack,
        )
