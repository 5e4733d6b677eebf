"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from devfeed.domain.repository import PostRepository
from devfeed.domain.service import PostService, PowerUpService
from devfeed.domain.value import PostId, PowerUpTarget, RiskLevel, UserId
from tests.conftest import at, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListFeed:
    """Tests for list_feed method."""

    @pytest.mark.asyncio
    async def test_ranked_by_power_ups_then_newest(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        power_up_service = await unit_env.get(PowerUpService)
        post_repo = await unit_env.get(PostRepository)

        old_popular = make_post("Old but loved", created_at=at(0))
        newest = make_post("Brand new", created_at=at(30))
        middle = make_post("Somewhere in between", created_at=at(15))
        for post in (old_popular, newest, middle):
            await post_repo.save(post)
        await power_up_service.toggle(PowerUpTarget.POST, old_popular.id, UserId(uuid4()))

        # Act
        feed = await post_service.list_feed()

        # Assert
        assert [p.id for p in feed] == [old_popular.id, newest.id, middle.id]
        assert feed[0].power_up_count == 1

    @pytest.mark.asyncio
    async def test_filters_combine(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        match = make_post(
            "Async context managers",
            primary_topic="python",
            tags=["asyncio"],
            risk_level=RiskLevel.LOW,
        )
        wrong_tag = make_post("Dataclass slots", primary_topic="python", tags=["typing"])
        wrong_topic = make_post("Tokio tasks", primary_topic="rust", tags=["asyncio"])
        for post in (match, wrong_tag, wrong_topic):
            await post_repo.save(post)

        # Act
        feed = await post_service.list_feed(
            topic="python", tag="asyncio", risk_level=RiskLevel.LOW
        )

        # Assert
        assert [p.id for p in feed] == [match.id]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post("Profile with cProfile", summary="Find slow functions")
        await post_repo.save(post)
        await post_repo.save(make_post("Unrelated"))

        feed = await post_service.list_feed(search="SLOW")

        assert [p.id for p in feed] == [post.id]


class TestLookups:
    """Tests for single and batch lookups."""

    @pytest.mark.asyncio
    async def test_get_missing_post_returns_none(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_get_posts_by_ids_skips_missing(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        posts = await post_service.get_posts_by_ids([post.id, PostId(uuid4())])

        assert list(posts) == [post.id]

    @pytest.mark.asyncio
    async def test_recent_titles_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        for minute, title in enumerate(["First", "Second", "Third"]):
            await post_repo.save(make_post(title, created_at=at(minute)))

        assert await post_service.get_recent_titles(2) == ["Third", "Second"]
        assert await post_service.get_recent_titles(0) == []
