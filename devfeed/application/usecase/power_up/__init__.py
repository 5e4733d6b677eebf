"""Power-up use cases."""

from .toggle_power_up import (
    TogglePowerUpRequest,
    TogglePowerUpResponse,
    TogglePowerUpUseCase,
)

__all__ = [
    "TogglePowerUpRequest",
    "TogglePowerUpResponse",
    "TogglePowerUpUseCase",
]
