"""User preferences use cases."""

from .preferences import (
    ClearPreferencesUseCase,
    GetPreferencesUseCase,
    PreferencesRequest,
    PreferencesResponse,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
)

__all__ = [
    "ClearPreferencesUseCase",
    "GetPreferencesUseCase",
    "PreferencesRequest",
    "PreferencesResponse",
    "UpdatePreferencesRequest",
    "UpdatePreferencesUseCase",
]
