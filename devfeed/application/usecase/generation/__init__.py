"""Generation ingestion use cases."""

from .ingest import (
    IngestGeneratedPollsRequest,
    IngestGeneratedPollsUseCase,
    IngestGeneratedPostsRequest,
    IngestGeneratedPostsUseCase,
    IngestionResponse,
)

__all__ = [
    "IngestGeneratedPollsRequest",
    "IngestGeneratedPollsUseCase",
    "IngestGeneratedPostsRequest",
    "IngestGeneratedPostsUseCase",
    "IngestionResponse",
]
