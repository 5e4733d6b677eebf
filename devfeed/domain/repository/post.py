"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devfeed.domain.model.post import Post
from devfeed.domain.value import PostId, RiskLevel


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_all(
        self,
        topic: Optional[str] = None,
        tag: Optional[str] = None,
        risk_level: Optional[RiskLevel] = None,
        search: Optional[str] = None,
        topics: Optional[List[str]] = None,
    ) -> List[Post]:
        """Find posts matching all given filters.

        Ranking is applied by the service, so no particular order is
        guaranteed here.

        Args:
            topic: Exact primary topic
            tag: Tag the post must carry
            risk_level: Exact risk level
            search: Case-insensitive substring of title, summary or problem_solved
            topics: Primary topic must be one of these (ignored when empty)

        Returns:
            Matching posts
        """
        pass

    @abstractmethod
    async def find_recent_titles(self, limit: int) -> List[str]:
        """Titles of the most recently created posts, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass
