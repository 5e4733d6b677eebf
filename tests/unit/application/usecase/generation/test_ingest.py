"""Unit tests for the generation ingestion use cases."""

import pytest

from devfeed.application.usecase.generation import (
    IngestGeneratedPollsRequest,
    IngestGeneratedPollsUseCase,
    IngestGeneratedPostsRequest,
    IngestGeneratedPostsUseCase,
)
from devfeed.domain.service import PostService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIngestGeneratedPostsUseCase:
    """Tests for IngestGeneratedPostsUseCase."""

    @pytest.mark.asyncio
    async def test_parses_raw_payload_and_reports(self, unit_env):
        # Arrange
        use_case = await unit_env.get(IngestGeneratedPostsUseCase)
        post_service = await unit_env.get(PostService)
        request = IngestGeneratedPostsRequest.model_validate(
            {
                "tips": [
                    {
                        "title": "Prefer pathlib over os.path",
                        "primary_topic": "python",
                        "tags": ["stdlib"],
                        "code_snippets": [
                            {
                                "label": "Before",
                                "language": "python",
                                "content": "os.path.join(a, b)",
                            }
                        ],
                    },
                    {"title": "prefer pathlib over os.path"},
                ]
            }
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.inserted == 1
        assert response.duplicates == 1
        assert response.skipped_titles == ["prefer pathlib over os.path"]

        feed = await post_service.list_feed(topic="python")
        assert [str(p.id) for p in feed] == response.inserted_ids
        assert feed[0].code_snippets[0].label == "Before"


class TestIngestGeneratedPollsUseCase:
    """Tests for IngestGeneratedPollsUseCase."""

    @pytest.mark.asyncio
    async def test_invalid_polls_counted(self, unit_env):
        use_case = await unit_env.get(IngestGeneratedPollsUseCase)
        request = IngestGeneratedPollsRequest.model_validate(
            {
                "polls": [
                    {"question": "Monorepo or polyrepo?", "options": ["mono", "poly"]},
                    {"question": "", "options": ["a", "b"]},
                    {"question": "One option only?", "options": [{"text": "yes"}]},
                ]
            }
        )

        response = await use_case.execute(request)

        assert response.received == 3
        assert response.invalid == 2
        assert response.inserted == 1
