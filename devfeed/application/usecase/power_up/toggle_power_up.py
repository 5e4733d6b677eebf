"""Toggle power-up use case."""

from uuid import UUID

from pydantic import BaseModel

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.service import PowerUpService
from devfeed.domain.value import PowerUpTarget, UserId


class TogglePowerUpRequest(BaseModel):
    """Toggle power-up request."""

    target_type: PowerUpTarget
    target_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class TogglePowerUpResponse(BaseModel):
    """Toggle power-up response."""

    target_type: PowerUpTarget
    target_id: str
    powered_up: bool
    count: int


class TogglePowerUpUseCase(
    BaseUseCase[TogglePowerUpRequest, TogglePowerUpResponse]
):
    """Use case for powering up (or un-powering) a post or comment."""

    def __init__(self, power_up_service: PowerUpService) -> None:
        """Initialize toggle power-up use case.

        Args:
            power_up_service: Power-up domain service
        """
        self.power_up_service = power_up_service

    async def execute(self, request: TogglePowerUpRequest) -> TogglePowerUpResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If the post or comment doesn't exist
        """
        status = await self.power_up_service.toggle(
            target_type=request.target_type,
            target_id=UUID(request.target_id),
            user_id=UserId(UUID(request.user_id)),
        )

        return TogglePowerUpResponse(
            target_type=status.target_type,
            target_id=str(status.target_id),
            powered_up=status.powered_up,
            count=status.count,
        )
