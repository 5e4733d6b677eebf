"""Unit tests for GetCommentThreadUseCase."""

from uuid import uuid4

import pytest

from devfeed.application.usecase.comment import (
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
)
from devfeed.domain.error import NotFoundError
from devfeed.domain.repository import (
    CommentRepository,
    PollRepository,
    PostRepository,
)
from devfeed.domain.service import PowerUpService
from devfeed.domain.value import ItemKind, PowerUpTarget, UserId
from tests.conftest import at, make_comment, make_poll, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentThreadUseCase:
    """Tests for GetCommentThreadUseCase."""

    @pytest.mark.asyncio
    async def test_nested_thread_with_depth_and_reply_affordance(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        post = make_post()
        await post_repo.save(post)

        # Chain of six comments: depths 0..5
        chain = [make_comment(post.id, created_at=at(0))]
        for i in range(1, 6):
            chain.append(make_comment(post.id, parent_id=chain[-1].id, created_at=at(i)))
        for comment in chain:
            await comment_repo.save(comment)

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(item_kind=ItemKind.POST, item_id=str(post.id))
        )

        # Assert
        assert response.total == 6
        assert response.max_depth == 5

        node = response.comments[0]
        depths = []
        while True:
            depths.append((node.depth, node.can_reply))
            if not node.children:
                break
            node = node.children[0]

        assert depths == [
            (0, True),
            (1, True),
            (2, True),
            (3, True),
            (4, True),
            (5, False),
        ]

    @pytest.mark.asyncio
    async def test_marks_comments_the_user_powered_up(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        power_up_service = await unit_env.get(PowerUpService)

        post = make_post()
        await post_repo.save(post)
        liked = make_comment(post.id, created_at=at(0))
        other = make_comment(post.id, created_at=at(1))
        await comment_repo.save(liked)
        await comment_repo.save(other)

        user_id = UserId(uuid4())
        await power_up_service.toggle(PowerUpTarget.COMMENT, liked.id, user_id)

        # Act
        response = await use_case.execute(
            GetCommentThreadRequest(
                item_kind=ItemKind.POST, item_id=str(post.id), user_id=str(user_id)
            )
        )

        # Assert
        by_id = {c.comment_id: c for c in response.comments}
        assert by_id[str(liked.id)].has_powered_up is True
        assert by_id[str(liked.id)].power_up_count == 1
        assert by_id[str(other.id)].has_powered_up is False
        # Powered-up comment ranks first despite being older
        assert response.comments[0].comment_id == str(liked.id)

    @pytest.mark.asyncio
    async def test_poll_thread(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        poll_repo = await unit_env.get(PollRepository)
        comment_repo = await unit_env.get(CommentRepository)
        poll = make_poll()
        await poll_repo.save(poll)
        await comment_repo.save(make_comment(poll.id, item_kind=ItemKind.POLL))

        response = await use_case.execute(
            GetCommentThreadRequest(item_kind=ItemKind.POLL, item_id=str(poll.id))
        )

        assert response.total == 1
        assert response.comments[0].parent_id is None

    @pytest.mark.asyncio
    async def test_unknown_item_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetCommentThreadRequest(item_kind=ItemKind.POST, item_id=str(uuid4()))
            )
