"""Unit tests for GenerationService and poll option normalization."""

import pytest

from devfeed.domain.model import GeneratedPoll, GeneratedTip
from devfeed.domain.repository import PollRepository, PostRepository
from devfeed.domain.service import GenerationService, PollService
from devfeed.domain.service.generation_service import normalize_poll_options
from devfeed.domain.value import RiskLevel
from tests.conftest import make_poll, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNormalizePollOptions:
    """Tests for normalize_poll_options."""

    def test_strings_ordered_by_position(self):
        options = normalize_poll_options(["pip", "poetry", "uv"])

        assert [(o.text, o.order) for o in options] == [
            ("pip", 0),
            ("poetry", 1),
            ("uv", 2),
        ]

    def test_mappings_keep_their_order(self):
        options = normalize_poll_options(
            [{"text": "last", "order": 5}, {"text": "first", "order": 1}]
        )

        assert [(o.text, o.order) for o in options] == [("first", 1), ("last", 5)]

    def test_bad_order_falls_back_to_position(self):
        options = normalize_poll_options(
            [
                {"text": "a", "order": "2"},
                {"text": "b", "order": -1},
                {"text": "c", "order": True},
                {"text": "d"},
            ]
        )

        assert [(o.text, o.order) for o in options] == [
            ("a", 0),
            ("b", 1),
            ("c", 2),
            ("d", 3),
        ]

    def test_unusable_values_discarded(self):
        options = normalize_poll_options(
            ["  ", 42, None, {"label": "no text"}, {"text": 7}, " kept "]
        )

        assert [(o.text, o.order) for o in options] == [("kept", 5)]


class TestIngestTips:
    """Tests for ingest_tips method."""

    @pytest.mark.asyncio
    async def test_invalid_and_duplicate_tips_skipped(self, unit_env):
        # Arrange
        generation_service = await unit_env.get(GenerationService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("React Hooks Guide"))

        tips = [
            GeneratedTip(title="react hooks guide"),  # duplicate of existing
            GeneratedTip(title="   "),  # invalid
            GeneratedTip(title="Rust Ownership Basics", risk_level="medium"),
            GeneratedTip(title="rust ownership basics!"),  # duplicate within batch
            GeneratedTip(summary="No title at all"),  # invalid
        ]

        # Act
        report = await generation_service.ingest_tips(tips)

        # Assert
        assert report.received == 5
        assert report.invalid == 2
        assert report.duplicates == 2
        assert report.inserted == 1
        assert report.skipped_titles == ["react hooks guide", "rust ownership basics!"]

        stored = await post_repo.find_by_id(report.inserted_ids[0])
        assert stored.title == "Rust Ownership Basics"
        assert stored.risk_level == RiskLevel.MEDIUM

    @pytest.mark.asyncio
    async def test_empty_batch(self, unit_env):
        generation_service = await unit_env.get(GenerationService)

        report = await generation_service.ingest_tips([])

        assert report.received == 0
        assert report.inserted == 0


class TestIngestPolls:
    """Tests for ingest_polls method."""

    @pytest.mark.asyncio
    async def test_polls_validated_deduplicated_and_saved(self, unit_env):
        # Arrange
        generation_service = await unit_env.get(GenerationService)
        poll_service = await unit_env.get(PollService)
        poll_repo = await unit_env.get(PollRepository)
        await poll_repo.save(make_poll("Which formatter do you use?"))

        polls = [
            GeneratedPoll(question="Which formatter do you use?", options=["a", "b"]),
            GeneratedPoll(question="Tabs or spaces?", options=["tabs"]),
            GeneratedPoll(question=None, options=["a", "b"]),
            GeneratedPoll(
                question="Favourite test runner?",
                category="testing",
                options=[{"text": "unittest", "order": 2}, "pytest"],
            ),
        ]

        # Act
        report = await generation_service.ingest_polls(polls)

        # Assert
        assert report.received == 4
        assert report.invalid == 2
        assert report.duplicates == 1
        assert report.inserted == 1

        active = await poll_service.list_active_polls()
        saved = next(p for p in active if p.id == report.inserted_ids[0])
        assert saved.category == "testing"
        assert [o.text for o in saved.options] == ["pytest", "unittest"]

