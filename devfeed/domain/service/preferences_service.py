"""User preferences domain service."""

from datetime import datetime

import logfire

from devfeed.domain.model.preferences import UserPreferences
from devfeed.domain.repository import PreferencesRepository
from devfeed.domain.value import PollFrequency, UserId

from .base import Service


def normalize_topics(topics: list[str]) -> list[str]:
    """Strip topics and drop blanks and repeats, keeping the first occurrence."""
    seen: set[str] = set()
    normalized = []
    for topic in topics:
        topic = topic.strip()
        if topic and topic not in seen:
            seen.add(topic)
            normalized.append(topic)
    return normalized


class PreferencesService(Service):
    """Domain service for saved feed filters and poll frequency."""

    def __init__(self, preferences_repository: PreferencesRepository) -> None:
        """Initialize preferences service.

        Args:
            preferences_repository: Preferences repository
        """
        self.preferences_repository = preferences_repository

    async def get_preferences(self, user_id: UserId) -> UserPreferences:
        """A user's preferences, or the defaults if none were saved."""
        with logfire.span("preferences_service.get_preferences", user_id=str(user_id)):
            preferences = await self.preferences_repository.find_by_user(user_id)
            if preferences is None:
                logfire.info("No saved preferences", user_id=str(user_id))
                return UserPreferences(user_id=user_id)
            return preferences

    async def load_filter_preferences(self, user_id: UserId) -> list[str]:
        """Topics the user's feed is filtered to; empty means everything."""
        preferences = await self.get_preferences(user_id)
        return list(preferences.topics)

    async def save_filter_preferences(
        self, user_id: UserId, topics: list[str]
    ) -> UserPreferences:
        """Replace the user's saved topics.

        Args:
            user_id: User ID
            topics: Topics to filter the feed to; blanks and repeats are dropped

        Returns:
            Updated preferences
        """
        with logfire.span(
            "preferences_service.save_filter_preferences",
            user_id=str(user_id),
            topics=len(topics),
        ):
            return await self._update(user_id, topics=normalize_topics(topics))

    async def clear_filter_preferences(self, user_id: UserId) -> UserPreferences:
        """Forget the user's saved topics. Poll frequency is kept."""
        with logfire.span(
            "preferences_service.clear_filter_preferences", user_id=str(user_id)
        ):
            return await self._update(user_id, topics=[])

    async def save_poll_frequency(
        self, user_id: UserId, frequency: PollFrequency
    ) -> UserPreferences:
        with logfire.span(
            "preferences_service.save_poll_frequency",
            user_id=str(user_id),
            frequency=frequency.value,
        ):
            return await self._update(user_id, poll_frequency=frequency)

    async def _update(self, user_id: UserId, **changes) -> UserPreferences:
        current = await self.get_preferences(user_id)
        updated = current.model_copy(update={**changes, "updated_at": datetime.now()})
        saved = await self.preferences_repository.save(updated)
        logfire.info(
            "Preferences saved",
            user_id=str(user_id),
            topics=len(saved.topics),
            poll_frequency=saved.poll_frequency.value,
        )
        return saved
