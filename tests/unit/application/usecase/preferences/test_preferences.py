"""Unit tests for the preferences use cases."""

from uuid import uuid4

import pytest

from devfeed.application.usecase.preferences import (
    ClearPreferencesUseCase,
    GetPreferencesUseCase,
    PreferencesRequest,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
)
from devfeed.domain.value import PollFrequency
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPreferencesUseCases:
    """Tests for the get, update and clear use cases."""

    @pytest.mark.asyncio
    async def test_partial_updates_keep_other_fields(self, unit_env):
        # Arrange
        update_use_case = await unit_env.get(UpdatePreferencesUseCase)
        get_use_case = await unit_env.get(GetPreferencesUseCase)
        user_id = str(uuid4())

        # Act
        await update_use_case.execute(
            UpdatePreferencesRequest(user_id=user_id, topics=["python", "git"])
        )
        await update_use_case.execute(
            UpdatePreferencesRequest(user_id=user_id, poll_frequency=PollFrequency.LOW)
        )
        response = await get_use_case.execute(PreferencesRequest(user_id=user_id))

        # Assert
        assert response.topics == ["python", "git"]
        assert response.poll_frequency == PollFrequency.LOW

    @pytest.mark.asyncio
    async def test_clear(self, unit_env):
        update_use_case = await unit_env.get(UpdatePreferencesUseCase)
        clear_use_case = await unit_env.get(ClearPreferencesUseCase)
        user_id = str(uuid4())
        await update_use_case.execute(
            UpdatePreferencesRequest(user_id=user_id, topics=["python"])
        )

        response = await clear_use_case.execute(PreferencesRequest(user_id=user_id))

        assert response.topics == []
