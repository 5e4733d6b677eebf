"""Generated content ingestion use cases.

Called by the scheduled generation jobs with already-parsed candidates.
"""

from pydantic import BaseModel, Field

from devfeed.application.usecase.base import BaseUseCase
from devfeed.domain.model import GeneratedPoll, GeneratedTip, IngestionReport
from devfeed.domain.service import GenerationService


class IngestGeneratedPostsRequest(BaseModel):
    """Batch of generated tips."""

    tips: list[GeneratedTip] = Field(default_factory=list)


class IngestGeneratedPollsRequest(BaseModel):
    """Batch of generated polls."""

    polls: list[GeneratedPoll] = Field(default_factory=list)


class IngestionResponse(BaseModel):
    """Outcome of one ingestion run."""

    received: int
    invalid: int
    duplicates: int
    inserted: int
    inserted_ids: list[str]
    skipped_titles: list[str]

    @classmethod
    def from_report(cls, report: IngestionReport) -> "IngestionResponse":
        return cls(
            received=report.received,
            invalid=report.invalid,
            duplicates=report.duplicates,
            inserted=report.inserted,
            inserted_ids=[str(i) for i in report.inserted_ids],
            skipped_titles=report.skipped_titles,
        )


class IngestGeneratedPostsUseCase(
    BaseUseCase[IngestGeneratedPostsRequest, IngestionResponse]
):
    """Use case for storing a batch of generated tips."""

    def __init__(self, generation_service: GenerationService) -> None:
        """Initialize ingest posts use case.

        Args:
            generation_service: Generation domain service
        """
        self.generation_service = generation_service

    async def execute(self, request: IngestGeneratedPostsRequest) -> IngestionResponse:
        report = await self.generation_service.ingest_tips(request.tips)
        return IngestionResponse.from_report(report)


class IngestGeneratedPollsUseCase(
    BaseUseCase[IngestGeneratedPollsRequest, IngestionResponse]
):
    """Use case for storing a batch of generated polls."""

    def __init__(self, generation_service: GenerationService) -> None:
        """Initialize ingest polls use case.

        Args:
            generation_service: Generation domain service
        """
        self.generation_service = generation_service

    async def execute(self, request: IngestGeneratedPollsRequest) -> IngestionResponse:
        report = await self.generation_service.ingest_polls(request.polls)
        return IngestionResponse.from_report(report)
