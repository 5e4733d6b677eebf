"""Content generation ingestion service.

The scheduled jobs produce tips and polls in batches. Before anything is
stored, each batch is checked against the most recent existing content so
the feed doesn't fill up with rewordings of the same tip:

1. Load the recent titles (or questions) to compare against
2. Drop structurally invalid candidates
3. Drop near-duplicates, growing the comparison set with every accepted one
4. Persist what is left
"""

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any
from uuid import uuid4

import logfire

from devfeed.config import DuplicateFilterSettings, GenerationSettings
from devfeed.domain.model.generation import GeneratedPoll, GeneratedTip, IngestionReport
from devfeed.domain.model.poll import Poll, PollOption
from devfeed.domain.model.post import Post
from devfeed.domain.value import PollId, PollOptionId, PostId, RiskLevel

from .base import Service
from .poll_service import PollService
from .post_service import PostService
from .similarity import filter_near_duplicates


def normalize_poll_options(raw_options: Sequence[Any]) -> list[PollOption]:
    """Turn loosely shaped option values into ordered poll options.

    A string becomes an option ordered by its position. A mapping keeps its
    ``order`` when it is a non-negative integer, otherwise it falls back to
    the position. Blank texts and any other value are discarded.
    """
    options = []
    for index, raw in enumerate(raw_options):
        if isinstance(raw, str):
            text, order = raw, index
        elif isinstance(raw, Mapping) and isinstance(raw.get("text"), str):
            text = raw["text"]
            order = raw.get("order")
            if isinstance(order, bool) or not isinstance(order, int) or order < 0:
                order = index
        else:
            continue

        text = text.strip()
        if text:
            options.append(PollOption(id=PollOptionId(uuid4()), text=text, order=order))

    return sorted(options, key=lambda option: option.order)


def _parse_risk_level(value: str | None) -> RiskLevel | None:
    if not value:
        return None
    try:
        return RiskLevel(value.strip().capitalize())
    except ValueError:
        return None


class GenerationService(Service):
    """Domain service that ingests generated tips and polls."""

    def __init__(
        self,
        post_service: PostService,
        poll_service: PollService,
        generation_settings: GenerationSettings,
        duplicate_settings: DuplicateFilterSettings,
    ) -> None:
        """Initialize generation service.

        Args:
            post_service: Post domain service
            poll_service: Poll domain service
            generation_settings: Comparison windows and poll rules
            duplicate_settings: Near-duplicate thresholds
        """
        self.post_service = post_service
        self.poll_service = poll_service
        self.generation_settings = generation_settings
        self.duplicate_settings = duplicate_settings

    async def ingest_tips(self, tips: Sequence[GeneratedTip]) -> IngestionReport:
        """Store generated tips that are valid and not near-duplicates.

        Args:
            tips: Candidate tips in generation order

        Returns:
            Report of what was received, rejected and inserted
        """
        with logfire.span("generation_service.ingest_tips", received=len(tips)):
            existing = await self.post_service.get_recent_titles(
                self.generation_settings.recent_posts_window
            )

            valid = [tip for tip in tips if tip.title and tip.title.strip()]
            accepted, rejected = filter_near_duplicates(
                valid,
                existing,
                key=lambda tip: tip.title.strip(),
                threshold=self.duplicate_settings.similarity_threshold,
                length_slack=self.duplicate_settings.containment_length_slack,
            )

            inserted_ids = []
            for tip in accepted:
                saved = await self.post_service.save_post(self._tip_to_post(tip))
                inserted_ids.append(saved.id)

            report = IngestionReport(
                received=len(tips),
                invalid=len(tips) - len(valid),
                duplicates=len(rejected),
                inserted=len(inserted_ids),
                inserted_ids=inserted_ids,
                skipped_titles=[tip.title.strip() for tip in rejected],
            )
            logfire.info(
                "Generated tips ingested",
                received=report.received,
                invalid=report.invalid,
                duplicates=report.duplicates,
                inserted=report.inserted,
            )
            return report

    async def ingest_polls(self, polls: Sequence[GeneratedPoll]) -> IngestionReport:
        """Store generated polls that are valid and not near-duplicates.

        A poll is invalid without a question or with fewer than
        ``min_poll_options`` options left after normalization.

        Args:
            polls: Candidate polls in generation order

        Returns:
            Report of what was received, rejected and inserted
        """
        with logfire.span("generation_service.ingest_polls", received=len(polls)):
            existing = await self.poll_service.get_recent_questions(
                self.generation_settings.recent_polls_window
            )

            valid: list[tuple[GeneratedPoll, list[PollOption]]] = []
            for candidate in polls:
                if not candidate.question or not candidate.question.strip():
                    continue
                options = normalize_poll_options(candidate.options)
                if len(options) < self.generation_settings.min_poll_options:
                    logfire.warn(
                        "Generated poll has too few options",
                        question=candidate.question,
                        options=len(options),
                    )
                    continue
                valid.append((candidate, options))

            accepted, rejected = filter_near_duplicates(
                valid,
                existing,
                key=lambda pair: pair[0].question.strip(),
                threshold=self.duplicate_settings.similarity_threshold,
                length_slack=self.duplicate_settings.containment_length_slack,
            )

            inserted_ids = []
            for candidate, options in accepted:
                poll = Poll(
                    id=PollId(uuid4()),
                    question=candidate.question.strip(),
                    description=candidate.description,
                    category=candidate.category,
                    is_active=True,
                    options=options,
                    created_at=datetime.now(),
                )
                saved = await self.poll_service.save_poll(poll)
                inserted_ids.append(saved.id)

            report = IngestionReport(
                received=len(polls),
                invalid=len(polls) - len(valid),
                duplicates=len(rejected),
                inserted=len(inserted_ids),
                inserted_ids=inserted_ids,
                skipped_titles=[pair[0].question.strip() for pair in rejected],
            )
            logfire.info(
                "Generated polls ingested",
                received=report.received,
                invalid=report.invalid,
                duplicates=report.duplicates,
                inserted=report.inserted,
            )
            return report

    @staticmethod
    def _tip_to_post(tip: GeneratedTip) -> Post:
        now = datetime.now()
        return Post(
            id=PostId(uuid4()),
            title=tip.title.strip(),
            summary=tip.summary,
            problem_solved=tip.problem_solved,
            upside=tip.upside,
            downside=tip.downside,
            risk_level=_parse_risk_level(tip.risk_level),
            performance_impact=tip.performance_impact,
            doc_url=tip.doc_url,
            primary_topic=tip.primary_topic,
            syntax=tip.syntax,
            code_snippets=tip.code_snippets,
            dependencies=tip.dependencies,
            compatibility_min_version=tip.compatibility_min_version,
            compatibility_deprecated_in=tip.compatibility_deprecated_in,
            tags=tip.tags,
            difficulty=tip.difficulty,
            last_verified=date.today(),
            created_at=now,
            updated_at=now,
        )
