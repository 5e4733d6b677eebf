"""Post domain service."""

import logfire

from devfeed.domain.model.post import Post
from devfeed.domain.repository import PostRepository, PowerUpRepository
from devfeed.domain.value import PostId, PowerUpTarget, RiskLevel

from .base import Service
from .thread import rank_by_popularity


def _post_rank_key(post: Post):
    return (post.power_up_count, post.created_at)


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        power_up_repository: PowerUpRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            power_up_repository: Power-up repository (popularity counts)
        """
        self.post_repository = post_repository
        self.power_up_repository = power_up_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID, with its power-up count.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            count = await self.power_up_repository.count_by_target(
                PowerUpTarget.POST, post.id
            )
            logfire.info("Post found", post_id=str(post_id), title=post.title)
            return post.with_power_up_count(count)

    async def get_posts_by_ids(self, post_ids: list[PostId]) -> dict[PostId, Post]:
        """Load several posts with counts. Missing IDs are absent from the result."""
        with logfire.span("post_service.get_posts_by_ids", count=len(post_ids)):
            posts = []
            for post_id in post_ids:
                post = await self.post_repository.find_by_id(post_id)
                if post:
                    posts.append(post)

            posts = await self._with_counts(posts)
            return {post.id: post for post in posts}

    async def list_feed(
        self,
        topic: str | None = None,
        tag: str | None = None,
        risk_level: RiskLevel | None = None,
        search: str | None = None,
        topics: list[str] | None = None,
    ) -> list[Post]:
        """List feed posts, most powered-up first, newest first among equals.

        Args:
            topic: Only posts with this primary topic
            tag: Only posts carrying this tag
            risk_level: Only posts with this risk level
            search: Case-insensitive text search
            topics: Only posts whose primary topic is one of these

        Returns:
            Ranked posts with power-up counts
        """
        with logfire.span(
            "post_service.list_feed",
            topic=topic,
            tag=tag,
            risk_level=risk_level.value if risk_level else None,
            search=search,
            topics=topics,
        ):
            posts = await self.post_repository.find_all(
                topic=topic,
                tag=tag,
                risk_level=risk_level,
                search=search,
                topics=topics,
            )
            posts = await self._with_counts(posts)
            ranked = rank_by_popularity(posts, key=_post_rank_key)

            logfire.info("Feed listed", count=len(ranked))
            return ranked

    async def get_recent_titles(self, limit: int) -> list[str]:
        """Titles of the most recently created posts, newest first."""
        with logfire.span("post_service.get_recent_titles", limit=limit):
            if limit <= 0:
                return []
            titles = await self.post_repository.find_recent_titles(limit)
            logfire.info("Recent titles loaded", count=len(titles))
            return titles

    async def _with_counts(self, posts: list[Post]) -> list[Post]:
        if not posts:
            return []
        counts = await self.power_up_repository.count_by_targets(
            PowerUpTarget.POST, [p.id for p in posts]
        )
        return [p.with_power_up_count(counts.get(p.id, 0)) for p in posts]
