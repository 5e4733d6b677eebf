"""Unit tests for provider resolution and the test container builder."""

import pytest

from devfeed.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from devfeed.util.error import DependencyInjectionError
from tests.di import build_test_container
from tests.di.persistence import MockPersistenceProvider


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_resolves_to_itself(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_mockable_component_selects_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(DependencyInjectionError, match="bluetooth"):
            build_test_container(unmock={"bluetooth"})
