"""Integration tests for the PostgreSQL repositories.

These tests verify that domain models survive a round trip through the
platform schema, including JSONB snippets and soft deletes.
"""

from datetime import datetime, timezone
from uuid import uuid4

from dishka import AsyncContainer
import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import PollVote, PowerUp, StackEntry, UserPreferences
from devfeed.domain.repository import (
    CommentRepository,
    PollRepository,
    PollVoteRepository,
    PostRepository,
    PowerUpRepository,
    PreferencesRepository,
    StackRepository,
)
from devfeed.domain.value import (
    CodeSnippet,
    ItemKind,
    PollFrequency,
    PollVoteId,
    PowerUpId,
    PowerUpTarget,
    RiskLevel,
    UserId,
)
from tests.conftest import make_comment, make_poll, make_post
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)

    await session.execute(
        text(
            "TRUNCATE TABLE post_stack, comment_power_ups, post_likes, comments, "
            "poll_votes, poll_options, polls, post, profiles CASCADE"
        )
    )
    await session.commit()

    yield


class TestPostgresPostRepository:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_save_and_filter(self, integration_env: AsyncContainer):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        post = make_post(
            "Use pathlib for file paths",
            primary_topic="python",
            tags=["stdlib", "files"],
            risk_level=RiskLevel.LOW,
            code_snippets=[
                CodeSnippet(label="After", language="python", content="Path(a) / b")
            ],
        )
        await post_repo.save(post)
        await post_repo.save(make_post("Rebase interactively", primary_topic="git"))

        # Act
        found = await post_repo.find_by_id(post.id)
        by_tag = await post_repo.find_all(tag="files")
        by_search = await post_repo.find_all(search="PATHLIB")
        by_risk = await post_repo.find_all(risk_level=RiskLevel.HIGH)
        by_topics = await post_repo.find_all(topics=["python", "go"])

        # Assert
        assert found is not None
        assert found.code_snippets[0].content == "Path(a) / b"
        assert found.risk_level == RiskLevel.LOW
        assert [p.id for p in by_tag] == [post.id]
        assert [p.id for p in by_search] == [post.id]
        assert by_risk == []
        assert [p.id for p in by_topics] == [post.id]


class TestPostgresPollRepository:
    """Integration tests for PostgresPollRepository."""

    @pytest.mark.asyncio
    async def test_options_keep_order(self, integration_env: AsyncContainer):
        poll_repo = await integration_env.get(PollRepository)
        poll = make_poll(options=["tabs", "spaces"])
        await poll_repo.save(poll)

        active = await poll_repo.find_active()

        assert [p.id for p in active] == [poll.id]
        assert [o.text for o in active[0].options] == ["tabs", "spaces"]
        assert await poll_repo.find_recent_questions(5) == [poll.question]


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_soft_delete_hides_comment(self, integration_env: AsyncContainer):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = make_post()
        await post_repo.save(post)
        root = make_comment(post.id)
        reply = make_comment(post.id, parent_id=root.id)
        await comment_repo.save(root)
        await comment_repo.save(reply)

        # Act
        deleted = await comment_repo.soft_delete(
            reply.id, datetime.now(timezone.utc)
        )
        visible = await comment_repo.find_by_item(ItemKind.POST, post.id)
        everything = await comment_repo.find_by_item(
            ItemKind.POST, post.id, include_deleted=True
        )

        # Assert
        assert deleted is True
        assert [c.id for c in visible] == [root.id]
        assert len(everything) == 2
        assert await comment_repo.count_by_item(ItemKind.POST, post.id) == 1

    @pytest.mark.asyncio
    async def test_update_text_marks_edited(self, integration_env: AsyncContainer):
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = make_post()
        await post_repo.save(post)
        comment = make_comment(post.id)
        await comment_repo.save(comment)

        updated = await comment_repo.update_text(comment.id, "Reworded")

        assert updated is not None
        assert updated.text == "Reworded"
        assert updated.is_edited is True


class TestPostgresPowerUpAndStackRepositories:
    """Integration tests for power-up and stack persistence."""

    @pytest.mark.asyncio
    async def test_power_up_counts(self, integration_env: AsyncContainer):
        post_repo = await integration_env.get(PostRepository)
        power_up_repo = await integration_env.get(PowerUpRepository)
        post = make_post()
        await post_repo.save(post)
        for _ in range(2):
            await power_up_repo.save(
                PowerUp(
                    id=PowerUpId(uuid4()),
                    user_id=UserId(uuid4()),
                    target_type=PowerUpTarget.POST,
                    target_id=post.id,
                )
            )

        counts = await power_up_repo.count_by_targets(PowerUpTarget.POST, [post.id])

        assert counts[post.id] == 2

    @pytest.mark.asyncio
    async def test_stack_push_pop(self, integration_env: AsyncContainer):
        post_repo = await integration_env.get(PostRepository)
        stack_repo = await integration_env.get(StackRepository)
        post = make_post()
        await post_repo.save(post)
        user_id = UserId(uuid4())

        await stack_repo.push(StackEntry(user_id=user_id, post_id=post.id))

        assert await stack_repo.contains(user_id, post.id) is True
        assert await stack_repo.count_by_user(user_id) == 1
        assert await stack_repo.pop(user_id, post.id) is True
        assert await stack_repo.pop(user_id, post.id) is False

    @pytest.mark.asyncio
    async def test_duplicate_power_up_keeps_transaction_usable(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        power_up_repo = await integration_env.get(PowerUpRepository)
        post = make_post()
        await post_repo.save(post)
        user_id = UserId(uuid4())
        await power_up_repo.save(
            PowerUp(
                id=PowerUpId(uuid4()),
                user_id=user_id,
                target_type=PowerUpTarget.POST,
                target_id=post.id,
            )
        )

        # Act
        with pytest.raises(IntegrityError):
            await power_up_repo.save(
                PowerUp(
                    id=PowerUpId(uuid4()),
                    user_id=user_id,
                    target_type=PowerUpTarget.POST,
                    target_id=post.id,
                )
            )
        count = await power_up_repo.count_by_target(PowerUpTarget.POST, post.id)

        # Assert
        assert count == 1

    @pytest.mark.asyncio
    async def test_duplicate_stack_push_keeps_transaction_usable(
        self, integration_env: AsyncContainer
    ):
        post_repo = await integration_env.get(PostRepository)
        stack_repo = await integration_env.get(StackRepository)
        post = make_post()
        await post_repo.save(post)
        user_id = UserId(uuid4())
        await stack_repo.push(StackEntry(user_id=user_id, post_id=post.id))

        with pytest.raises(IntegrityError):
            await stack_repo.push(StackEntry(user_id=user_id, post_id=post.id))

        assert await stack_repo.count_by_user(user_id) == 1


class TestPostgresPollVoteRepository:
    """Integration tests for PostgresPollVoteRepository."""

    @pytest.mark.asyncio
    async def test_counts_and_duplicate_vote(self, integration_env: AsyncContainer):
        # Arrange
        poll_repo = await integration_env.get(PollRepository)
        vote_repo = await integration_env.get(PollVoteRepository)
        poll = make_poll(options=["tabs", "spaces"])
        await poll_repo.save(poll)
        tabs = poll.options[0]
        voter = UserId(uuid4())

        def vote(user_id):
            return PollVote(
                id=PollVoteId(uuid4()),
                poll_id=poll.id,
                option_id=tabs.id,
                user_id=user_id,
            )

        await vote_repo.save(vote(voter))
        await vote_repo.save(vote(UserId(uuid4())))

        # Act
        with pytest.raises(IntegrityError):
            await vote_repo.save(vote(voter))
        counts = await vote_repo.count_by_option(poll.id)
        found = await vote_repo.find_by_user(poll.id, voter)

        # Assert
        assert counts == {tabs.id: 2}
        assert found is not None
        assert found.option_id == tabs.id


class TestPostgresPreferencesRepository:
    """Integration tests for PostgresPreferencesRepository."""

    @pytest.mark.asyncio
    async def test_save_replaces_preferences(self, integration_env: AsyncContainer):
        # Arrange
        preferences_repo = await integration_env.get(PreferencesRepository)
        user_id = UserId(uuid4())

        # Act
        missing = await preferences_repo.find_by_user(user_id)
        await preferences_repo.save(
            UserPreferences(user_id=user_id, topics=["python", "git"])
        )
        await preferences_repo.save(
            UserPreferences(
                user_id=user_id, topics=["rust"], poll_frequency=PollFrequency.LOW
            )
        )
        found = await preferences_repo.find_by_user(user_id)

        # Assert
        assert missing is None
        assert found is not None
        assert found.topics == ["rust"]
        assert found.poll_frequency == PollFrequency.LOW
