"""Stack (save-for-later) routes. All of them require authentication."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from devfeed.application.usecase.stack import (
    ClearStackResponse,
    ClearStackUseCase,
    GetStackRequest,
    GetStackResponse,
    GetStackUseCase,
    PopFromStackResponse,
    PopFromStackUseCase,
    PushToStackResponse,
    PushToStackUseCase,
    StackRequest,
)
from devfeed.domain.error import NotFoundError
from devfeed.domain.service import JWTService
from devfeed.domain.value import UserId
from devfeed.interface.api.auth import bearer_token

router = APIRouter(prefix="/stack", tags=["stack"], route_class=DishkaRoute)


def _require_user(jwt_service: JWTService, auth_token: str | None) -> UserId:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to use the stack",
        )
    return user_id


@router.get("", response_model=GetStackResponse)
async def get_stack(
    get_stack_use_case: FromDishka[GetStackUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> GetStackResponse:
    """List the user's stacked posts, most recently pushed first."""
    user_id = _require_user(jwt_service, auth_token)
    return await get_stack_use_case.execute(GetStackRequest(user_id=str(user_id)))


@router.put("/{post_id}", response_model=PushToStackResponse)
async def push_to_stack(
    post_id: str,
    push_use_case: FromDishka[PushToStackUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PushToStackResponse:
    """Save a post for later. Pushing an already stacked post is a no-op."""
    user_id = _require_user(jwt_service, auth_token)

    try:
        return await push_use_case.execute(
            StackRequest(user_id=str(user_id), post_id=post_id)
        )
    except NotFoundError as e:
        logfire.warn("Stack push failed - post not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{post_id}", response_model=PopFromStackResponse)
async def pop_from_stack(
    post_id: str,
    pop_use_case: FromDishka[PopFromStackUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PopFromStackResponse:
    """Remove a post from the stack."""
    user_id = _require_user(jwt_service, auth_token)

    try:
        return await pop_use_case.execute(
            StackRequest(user_id=str(user_id), post_id=post_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("", response_model=ClearStackResponse)
async def clear_stack(
    clear_use_case: FromDishka[ClearStackUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> ClearStackResponse:
    """Empty the user's stack."""
    user_id = _require_user(jwt_service, auth_token)
    return await clear_use_case.execute(GetStackRequest(user_id=str(user_id)))
