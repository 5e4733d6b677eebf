"""Preferences use cases: read, update and clear a user's feed preferences."""

from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.model import UserPreferences
from devfeed.domain.service import PreferencesService
from devfeed.domain.value import PollFrequency, UserId


class PreferencesRequest(BaseModel):
    user_id: str  # User ID from authenticated user


class UpdatePreferencesRequest(BaseModel):
    """Update request. Fields left as None are not changed."""

    user_id: str
    topics: list[str] | None = None
    poll_frequency: PollFrequency | None = None


class PreferencesResponse(BaseModel):
    topics: list[str]
    poll_frequency: PollFrequency

    @classmethod
    def from_domain(cls, preferences: UserPreferences) -> "PreferencesResponse":
        return cls(
            topics=preferences.topics, poll_frequency=preferences.poll_frequency
        )


class GetPreferencesUseCase(BaseUseCase[PreferencesRequest, PreferencesResponse]):
    """Use case for reading a user's preferences (defaults if never saved)."""

    def __init__(self, preferences_service: PreferencesService) -> None:
        self.preferences_service = preferences_service

    async def execute(self, request: PreferencesRequest) -> PreferencesResponse:
        preferences = await self.preferences_service.get_preferences(
            UserId(UUID(request.user_id))
        )
        return PreferencesResponse.from_domain(preferences)


class UpdatePreferencesUseCase(
    BaseUseCase[UpdatePreferencesRequest, PreferencesResponse]
):
    """Use case for saving topics and/or poll frequency."""

    def __init__(self, preferences_service: PreferencesService) -> None:
        self.preferences_service = preferences_service

    async def execute(self, request: UpdatePreferencesRequest) -> PreferencesResponse:
        user_id = UserId(UUID(request.user_id))

        if request.topics is not None:
            await self.preferences_service.save_filter_preferences(
                user_id, request.topics
            )
        if request.poll_frequency is not None:
            await self.preferences_service.save_poll_frequency(
                user_id, request.poll_frequency
            )

        preferences = await self.preferences_service.get_preferences(user_id)
        return PreferencesResponse.from_domain(preferences)


class ClearPreferencesUseCase(BaseUseCase[PreferencesRequest, PreferencesResponse]):
    """Use case for clearing the saved feed topics."""

    def __init__(self, preferences_service: PreferencesService) -> None:
        self.preferences_service = preferences_service

    async def execute(self, request: PreferencesRequest) -> PreferencesResponse:
        preferences = await self.preferences_service.clear_filter_preferences(
            UserId(UUID(request.user_id))
        )
        return PreferencesResponse.from_domain(preferences)
