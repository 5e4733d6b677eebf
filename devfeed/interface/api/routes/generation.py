"""Ingestion routes for the scheduled content generation jobs.

The jobs call these with already-parsed candidates and authenticate with a
shared secret in the ``X-Service-Key`` header, not a user token.
"""

import secrets

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from devfeed.application.usecase.generation import (
    IngestGeneratedPollsRequest,
    IngestGeneratedPollsUseCase,
    IngestGeneratedPostsRequest,
    IngestGeneratedPostsUseCase,
    IngestionResponse,
)
from devfeed.config import GenerationSettings

router = APIRouter(prefix="/generation", tags=["generation"], route_class=DishkaRoute)


def _check_service_key(settings: GenerationSettings, service_key: str | None) -> None:
    if not service_key or not secrets.compare_digest(
        service_key.encode(), settings.service_key.encode()
    ):
        logfire.warn("Generation request rejected - bad service key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid service key",
        )


@router.post(
    "/posts",
    response_model=IngestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def ingest_posts(
    request: IngestGeneratedPostsRequest,
    ingest_use_case: FromDishka[IngestGeneratedPostsUseCase],
    settings: FromDishka[GenerationSettings],
    x_service_key: str | None = Header(default=None),
) -> IngestionResponse:
    """Store a batch of generated tips.

    Candidates without a title, and those too similar to a recent post or an
    earlier candidate in the batch, are skipped and reported.
    """
    _check_service_key(settings, x_service_key)
    return await ingest_use_case.execute(request)


@router.post(
    "/polls",
    response_model=IngestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def ingest_polls(
    request: IngestGeneratedPollsRequest,
    ingest_use_case: FromDishka[IngestGeneratedPollsUseCase],
    settings: FromDishka[GenerationSettings],
    x_service_key: str | None = Header(default=None),
) -> IngestionResponse:
    """Store a batch of generated polls.

    Polls need a question and at least two usable options; near-duplicate
    questions are skipped and reported.
    """
    _check_service_key(settings, x_service_key)
    return await ingest_use_case.execute(request)
