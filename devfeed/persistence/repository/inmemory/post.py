"""In-memory post repository for testing."""

from typing import List, Optional

from devfeed.domain.model.post import Post
from devfeed.domain.repository.post import PostRepository
from devfeed.domain.value import PostId, RiskLevel


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        topic: Optional[str] = None,
        tag: Optional[str] = None,
        risk_level: Optional[RiskLevel] = None,
        search: Optional[str] = None,
        topics: Optional[List[str]] = None,
    ) -> list[Post]:
        """Find posts matching all given filters."""
        posts = list(self._posts.values())

        if topic:
            posts = [p for p in posts if p.primary_topic == topic]
        if tag:
            posts = [p for p in posts if tag in p.tags]
        if risk_level:
            posts = [p for p in posts if p.risk_level == risk_level]
        if search:
            posts = [p for p in posts if p.matches_search(search)]
        if topics:
            posts = [p for p in posts if p.primary_topic in topics]

        return posts

    async def find_recent_titles(self, limit: int) -> list[str]:
        """Titles of the newest posts."""
        posts = sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)
        return [p.title for p in posts[:limit]]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
