"""Post feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status

from devfeed.application.usecase.feed import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListFeedRequest,
    ListFeedResponse,
    ListFeedUseCase,
)
from devfeed.domain.error import NotFoundError
from devfeed.domain.service import JWTService
from devfeed.domain.value import RiskLevel
from devfeed.interface.api.auth import bearer_token

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=ListFeedResponse)
async def list_posts(
    list_feed_use_case: FromDishka[ListFeedUseCase],
    jwt_service: FromDishka[JWTService],
    topic: str | None = Query(default=None, description="Primary topic"),
    tag: str | None = Query(default=None, description="Tag the post must carry"),
    risk_level: RiskLevel | None = Query(default=None),
    search: str | None = Query(default=None, max_length=200),
    auth_token: str | None = Depends(bearer_token),
) -> ListFeedResponse:
    """List posts, most powered-up first.

    Filters are optional and combine with AND. Search matches the title,
    summary and problem statement, ignoring case. If authenticated, each
    post carries the user's power-up and stack state.

    Args:
        list_feed_use_case: List feed use case from DI
        jwt_service: JWT service for token verification (injected)
        topic: Optional primary topic filter
        tag: Optional tag filter
        risk_level: Optional risk level filter
        search: Optional free-text search
        auth_token: Bearer token (optional)

    Returns:
        Ranked posts
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    request = ListFeedRequest(
        topic=topic,
        tag=tag,
        risk_level=risk_level,
        search=search,
        user_id=str(user_id) if user_id else None,
    )
    return await list_feed_use_case.execute(request)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> GetPostResponse:
    """Get a single post with its comment count."""
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        request = GetPostRequest(
            post_id=post_id, user_id=str(user_id) if user_id else None
        )
        return await get_post_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
