"""User preference routes. All of them require authentication."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from devfeed.application.usecase.preferences import (
    ClearPreferencesUseCase,
    GetPreferencesUseCase,
    PreferencesRequest,
    PreferencesResponse,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
)
from devfeed.domain.service import JWTService
from devfeed.domain.value import PollFrequency, UserId
from devfeed.interface.api.auth import bearer_token

router = APIRouter(prefix="/me", tags=["preferences"], route_class=DishkaRoute)


class UpdatePreferencesAPIRequest(BaseModel):
    """API request for updating preferences. Omitted fields are kept."""

    topics: list[str] | None = None
    poll_frequency: PollFrequency | None = None


def _require_user(jwt_service: JWTService, auth_token: str | None) -> UserId:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to manage preferences",
        )
    return user_id


@router.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(
    get_use_case: FromDishka[GetPreferencesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PreferencesResponse:
    """The user's saved feed topics and poll frequency."""
    user_id = _require_user(jwt_service, auth_token)
    return await get_use_case.execute(PreferencesRequest(user_id=str(user_id)))


@router.put("/preferences", response_model=PreferencesResponse)
async def update_preferences(
    request: UpdatePreferencesAPIRequest,
    update_use_case: FromDishka[UpdatePreferencesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PreferencesResponse:
    """Save feed topics and/or poll frequency.

    Saved topics filter GET /posts whenever it is called without filters.
    """
    user_id = _require_user(jwt_service, auth_token)
    return await update_use_case.execute(
        UpdatePreferencesRequest(
            user_id=str(user_id),
            topics=request.topics,
            poll_frequency=request.poll_frequency,
        )
    )


@router.delete("/preferences", response_model=PreferencesResponse)
async def clear_preferences(
    clear_use_case: FromDishka[ClearPreferencesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PreferencesResponse:
    """Clear the saved feed topics."""
    user_id = _require_user(jwt_service, auth_token)
    return await clear_use_case.execute(PreferencesRequest(user_id=str(user_id)))
