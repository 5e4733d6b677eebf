"""In-memory preferences repository for testing."""

from typing import Optional

from devfeed.domain.model.preferences import UserPreferences
from devfeed.domain.repository.preferences import PreferencesRepository
from devfeed.domain.value import UserId


class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory implementation of PreferencesRepository for testing."""

    def __init__(self) -> None:
        self._preferences: dict[UserId, UserPreferences] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[UserPreferences]:
        return self._preferences.get(user_id)

    async def save(self, preferences: UserPreferences) -> UserPreferences:
        self._preferences[preferences.user_id] = preferences
        return preferences
