"""Comment routes.

Threads hang off either a post or a poll, so the list and create routes take
the item kind as the first path segment: ``/posts/{id}/comments`` and
``/polls/{id}/comments``.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from devfeed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from devfeed.domain.error import (
    ContentDeletedException,
    DepthLimitExceededError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from devfeed.domain.service import JWTService
from devfeed.domain.value import ItemKind
from devfeed.interface.api.auth import bearer_token

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

# URL segment -> ItemKind
ITEM_KINDS = {"posts": ItemKind.POST, "polls": ItemKind.POLL}


def _item_kind(kind: str) -> ItemKind:
    if kind not in ITEM_KINDS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown item kind: {kind}",
        )
    return ITEM_KINDS[kind]


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1)
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{kind}/{item_id}/comments", response_model=GetCommentThreadResponse)
async def get_comments(
    kind: str,
    item_id: str,
    get_thread_use_case: FromDishka[GetCommentThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> GetCommentThreadResponse:
    """Get the ranked comment thread of a post or poll.

    Roots and each comment's replies are ordered by power-up count, then
    newest first. If authenticated, includes power-up state for each comment.

    Args:
        kind: ``posts`` or ``polls``
        item_id: Post or poll UUID
        get_thread_use_case: Get comment thread use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token (optional)

    Returns:
        Nested comment thread
    """
    item_kind = _item_kind(kind)
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        request = GetCommentThreadRequest(
            item_kind=item_kind,
            item_id=item_id,
            user_id=str(user_id) if user_id else None,
        )
        return await get_thread_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/{kind}/{item_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    kind: str,
    item_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> CreateCommentResponse:
    """Comment on a post or poll, or reply to another comment.

    Requires authentication.

    Args:
        kind: ``posts`` or ``polls``
        item_id: Post or poll UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    item_kind = _item_kind(kind)

    # Verify authentication and get user ID
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    try:
        use_case_request = CreateCommentRequest(
            item_kind=item_kind,
            item_id=item_id,
            text=request.text,
            author_id=str(user_id),
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - target not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ContentDeletedException as e:
        logfire.warn("Reply to deleted comment rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Parent comment has been deleted",
        )
    except DepthLimitExceededError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    text: str = Field(min_length=1)


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> UpdateCommentResponse:
    """Update a comment's text content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Update data (text content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token

    Returns:
        Updated comment details

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to edit comments",
        )

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            user_id=str(user_id),
            text=request.text,
        )
        return await update_comment_use_case.execute(use_case_request)

    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except ContentDeletedException as e:
        logfire.warn("Attempt to edit deleted comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found or has been deleted",
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> DeleteCommentResponse:
    """Soft-delete a comment. Only the author can delete.

    Replies stay stored but drop out of the thread with their parent.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except ContentDeletedException:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found or has been deleted",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
