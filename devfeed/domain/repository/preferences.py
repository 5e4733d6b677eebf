"""User preferences repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devfeed.domain.model.preferences import UserPreferences
from devfeed.domain.value import UserId


class PreferencesRepository(ABC):
    """Repository for the preference columns of user profiles."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[UserPreferences]:
        """Load a user's preferences, None if nothing was ever saved."""
        pass

    @abstractmethod
    async def save(self, preferences: UserPreferences) -> UserPreferences:
        """Create or replace a user's preferences."""
        pass
