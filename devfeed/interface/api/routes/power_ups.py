"""Power-up routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from devfeed.application.usecase.power_up import (
    TogglePowerUpRequest,
    TogglePowerUpResponse,
    TogglePowerUpUseCase,
)
from devfeed.domain.error import NotFoundError
from devfeed.domain.service import JWTService
from devfeed.domain.value import PowerUpTarget
from devfeed.interface.api.auth import bearer_token

router = APIRouter(tags=["power-ups"], route_class=DishkaRoute)


async def _toggle(
    target_type: PowerUpTarget,
    target_id: str,
    use_case: TogglePowerUpUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> TogglePowerUpResponse:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to power up",
        )

    try:
        return await use_case.execute(
            TogglePowerUpRequest(
                target_type=target_type,
                target_id=target_id,
                user_id=str(user_id),
            )
        )
    except NotFoundError as e:
        logfire.warn("Power-up target not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/posts/{post_id}/power-up", response_model=TogglePowerUpResponse)
async def toggle_post_power_up(
    post_id: str,
    toggle_use_case: FromDishka[TogglePowerUpUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> TogglePowerUpResponse:
    """Power up a post, or take the power-up back if already given.

    Returns:
        New power-up state and the post's total count
    """
    return await _toggle(
        PowerUpTarget.POST, post_id, toggle_use_case, jwt_service, auth_token
    )


@router.post("/comments/{comment_id}/power-up", response_model=TogglePowerUpResponse)
async def toggle_comment_power_up(
    comment_id: str,
    toggle_use_case: FromDishka[TogglePowerUpUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> TogglePowerUpResponse:
    """Power up a comment, or take the power-up back if already given.

    Deleted comments can't be powered up.
    """
    return await _toggle(
        PowerUpTarget.COMMENT, comment_id, toggle_use_case, jwt_service, auth_token
    )
