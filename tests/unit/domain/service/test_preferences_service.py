"""Unit tests for PreferencesService."""

from uuid import uuid4

import pytest

from devfeed.domain.service import PreferencesService, normalize_topics
from devfeed.domain.value import PollFrequency, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNormalizeTopics:
    """Tests for normalize_topics function."""

    def test_strips_and_drops_blanks_and_repeats(self):
        assert normalize_topics([" python ", "", "git", "python", "  "]) == [
            "python",
            "git",
        ]


class TestFilterPreferences:
    """Tests for saving, loading and clearing topics."""

    @pytest.mark.asyncio
    async def test_defaults_when_nothing_saved(self, unit_env):
        preferences_service = await unit_env.get(PreferencesService)
        user_id = UserId(uuid4())

        preferences = await preferences_service.get_preferences(user_id)

        assert preferences.topics == []
        assert preferences.poll_frequency == PollFrequency.NORMAL
        assert await preferences_service.load_filter_preferences(user_id) == []

    @pytest.mark.asyncio
    async def test_save_then_load(self, unit_env):
        # Arrange
        preferences_service = await unit_env.get(PreferencesService)
        user_id = UserId(uuid4())

        # Act
        await preferences_service.save_filter_preferences(user_id, ["rust", "git"])
        topics = await preferences_service.load_filter_preferences(user_id)

        # Assert
        assert topics == ["rust", "git"]

    @pytest.mark.asyncio
    async def test_clear_keeps_poll_frequency(self, unit_env):
        # Arrange
        preferences_service = await unit_env.get(PreferencesService)
        user_id = UserId(uuid4())
        await preferences_service.save_filter_preferences(user_id, ["python"])
        await preferences_service.save_poll_frequency(user_id, PollFrequency.NEVER)

        # Act
        cleared = await preferences_service.clear_filter_preferences(user_id)

        # Assert
        assert cleared.topics == []
        assert cleared.poll_frequency == PollFrequency.NEVER

    @pytest.mark.asyncio
    async def test_poll_frequency_keeps_topics(self, unit_env):
        preferences_service = await unit_env.get(PreferencesService)
        user_id = UserId(uuid4())
        await preferences_service.save_filter_preferences(user_id, ["python"])

        saved = await preferences_service.save_poll_frequency(
            user_id, PollFrequency.HIGH
        )

        assert saved.topics == ["python"]
        assert saved.poll_frequency == PollFrequency.HIGH

    @pytest.mark.asyncio
    async def test_preferences_are_per_user(self, unit_env):
        preferences_service = await unit_env.get(PreferencesService)
        alice, bob = UserId(uuid4()), UserId(uuid4())

        await preferences_service.save_filter_preferences(alice, ["python"])

        assert await preferences_service.load_filter_preferences(bob) == []
