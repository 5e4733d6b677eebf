"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import Post
from devfeed.domain.repository import PostRepository
from devfeed.domain.value import PostId, RiskLevel
from devfeed.persistence.mappers import post_to_dict, row_to_post
from devfeed.persistence.tables import post_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(post_table).where(post_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        topic: Optional[str] = None,
        tag: Optional[str] = None,
        risk_level: Optional[RiskLevel] = None,
        search: Optional[str] = None,
        topics: Optional[List[str]] = None,
    ) -> List[Post]:
        """Find posts matching all given filters."""
        stmt = select(post_table)

        if topic:
            stmt = stmt.where(post_table.c.primary_topic == topic)
        if topics:
            stmt = stmt.where(post_table.c.primary_topic.in_(topics))
        if tag:
            stmt = stmt.where(post_table.c.tags.any(tag))
        if risk_level:
            stmt = stmt.where(post_table.c.risk_level == risk_level.value)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    post_table.c.title.ilike(pattern),
                    post_table.c.summary.ilike(pattern),
                    post_table.c.problem_solved.ilike(pattern),
                )
            )

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_recent_titles(self, limit: int) -> List[str]:
        """Titles of the most recently created posts."""
        stmt = (
            select(post_table.c.title)
            .order_by(desc(post_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [title for (title,) in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                post_table.update()
                .where(post_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = post_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post
