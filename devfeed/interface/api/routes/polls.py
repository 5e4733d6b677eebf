"""Poll routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from devfeed.application.usecase.feed import ListPollsResponse, ListPollsUseCase
from devfeed.application.usecase.poll import (
    GetPollResultsRequest,
    GetPollResultsUseCase,
    PollResultsResponse,
    SubmitVoteRequest,
    SubmitVoteUseCase,
)
from devfeed.domain.error import AlreadyVotedError, NotFoundError, ValidationError
from devfeed.domain.service import JWTService
from devfeed.interface.api.auth import bearer_token

router = APIRouter(prefix="/polls", tags=["polls"], route_class=DishkaRoute)


class SubmitVoteAPIRequest(BaseModel):
    """API request for voting on a poll."""

    option_id: str


@router.get("", response_model=ListPollsResponse)
async def list_polls(
    list_polls_use_case: FromDishka[ListPollsUseCase],
) -> ListPollsResponse:
    """List active polls, newest first. Options come in display order."""
    return await list_polls_use_case.execute()


@router.post("/{poll_id}/vote", response_model=PollResultsResponse)
async def submit_vote(
    poll_id: str,
    request: SubmitVoteAPIRequest,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PollResultsResponse:
    """Vote on a poll. Each user votes once; the vote can't be changed.

    Args:
        poll_id: Poll UUID
        request: Chosen option
        submit_vote_use_case: Submit vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Bearer token

    Returns:
        Results including the new vote

    Raises:
        HTTPException: 401 if not authenticated, 404 for an unknown poll,
            409 on a second vote, 400 for an option of another poll
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        return await submit_vote_use_case.execute(
            SubmitVoteRequest(
                poll_id=poll_id, option_id=request.option_id, user_id=str(user_id)
            )
        )
    except NotFoundError as e:
        logfire.warn("Vote failed - poll not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AlreadyVotedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{poll_id}/results", response_model=PollResultsResponse)
async def get_poll_results(
    poll_id: str,
    get_results_use_case: FromDishka[GetPollResultsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(bearer_token),
) -> PollResultsResponse:
    """Vote counts per option. If authenticated, includes the user's vote."""
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_results_use_case.execute(
            GetPollResultsRequest(
                poll_id=poll_id, user_id=str(user_id) if user_id else None
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
