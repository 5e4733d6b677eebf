"""Test container builder with selective unmocking."""

from collections.abc import Sequence

from dishka import AsyncContainer, Provider, make_async_container

from devfeed.util.di import PROVIDERS, Component
from devfeed.util.di.container import instantiate_providers
from devfeed.util.error import DependencyInjectionError

# Importing registers the mock subclasses that get_provider looks up
from tests.di.persistence import MockPersistenceProvider  # noqa: F401


def build_test_container(
    unmock: set[Component] | None = None,
    extra_providers: Sequence[Provider] = (),
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Every mockable component uses its in-memory implementation unless named
    in ``unmock``.

    Args:
        unmock: Components to use production implementations for
        extra_providers: Added as-is, e.g. FastapiProvider for route tests

    Returns:
        Configured test container

    Raises:
        DependencyInjectionError: If unmock names an unknown component

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()

    mockable = {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }
    unknown = unmock - mockable
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    return make_async_container(
        *instantiate_providers(mocked=mockable - unmock), *extra_providers
    )
