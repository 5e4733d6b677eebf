"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

from datetime import datetime
from uuid import uuid4

import pytest

from devfeed.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from devfeed.domain.error import (
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from devfeed.domain.repository import CommentRepository
from devfeed.domain.value import UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = make_comment(uuid4(), author_id=author_id, text="Original")
        await comment_repo.save(comment)

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment.id), user_id=str(author_id), text="Updated"
            )
        )

        # Assert
        assert result.text == "Updated"
        assert result.is_edited is True
        assert result.power_up_count == 0
        assert result.has_powered_up is False

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(uuid4())
        await comment_repo.save(comment)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id), user_id=str(uuid4()), text="Hijacked"
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = make_comment(uuid4(), author_id=author_id, deleted_at=datetime.now())
        await comment_repo.save(comment)

        with pytest.raises(ContentDeletedException):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id), user_id=str(author_id), text="Too late"
                )
            )

    @pytest.mark.asyncio
    async def test_blank_text_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = make_comment(uuid4(), author_id=author_id)
        await comment_repo.save(comment)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id), user_id=str(author_id), text="   "
                )
            )

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), text="Anyone?"
                )
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_and_replies_stay_stored(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = uuid4()
        author_id = UserId(uuid4())
        parent = make_comment(post_id, author_id=author_id)
        reply = make_comment(post_id, parent_id=parent.id)
        await comment_repo.save(parent)
        await comment_repo.save(reply)

        # Act
        result = await use_case.execute(
            DeleteCommentRequest(comment_id=str(parent.id), user_id=str(author_id))
        )

        # Assert
        assert result.deleted is True
        assert (await comment_repo.find_by_id(parent.id)).is_deleted
        assert not (await comment_repo.find_by_id(reply.id)).is_deleted

    @pytest.mark.asyncio
    async def test_delete_twice_raises(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = make_comment(uuid4(), author_id=author_id)
        await comment_repo.save(comment)
        request = DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author_id))

        await use_case.execute(request)

        with pytest.raises(ContentDeletedException):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(uuid4())
        await comment_repo.save(comment)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )
