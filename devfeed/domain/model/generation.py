"""Content generation records.

Candidates arrive from the scheduled generation jobs already parsed into
structured records. Every field is optional here because model output is
not trusted; structural checks happen during ingestion.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from devfeed.domain.value import CodeSnippet


class GeneratedTip(BaseModel):
    """A tip candidate produced by the posts generation job."""

    title: Optional[str] = None
    summary: Optional[str] = None
    problem_solved: Optional[str] = None
    upside: Optional[str] = None
    downside: Optional[str] = None
    risk_level: Optional[str] = None
    performance_impact: Optional[str] = None
    doc_url: Optional[str] = None
    primary_topic: Optional[str] = None
    syntax: Optional[str] = None
    code_snippets: list[CodeSnippet] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    compatibility_min_version: Optional[str] = None
    compatibility_deprecated_in: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    difficulty: Optional[str] = None


class GeneratedPoll(BaseModel):
    """A poll candidate produced by the polls generation job.

    Options may be plain strings or ``{"text": ..., "order": ...}`` objects;
    anything else is discarded during ingestion.
    """

    question: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    options: list[Any] = Field(default_factory=list)


class IngestionReport(BaseModel):
    """Summary of one ingestion run."""

    received: int = 0
    invalid: int = 0
    duplicates: int = 0
    inserted: int = 0
    inserted_ids: list[UUID] = Field(default_factory=list)
    skipped_titles: list[str] = Field(default_factory=list)
