"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
import logfire

from devfeed.util.di import PROVIDERS, Component, get_provider


def instantiate_providers(mocked: Iterable[Component] = ()) -> list[Provider]:
    """Instantiate one provider per entry in PROVIDERS.

    Mockable components named in ``mocked`` get their mock implementation;
    everything else gets its production one. Providers take no arguments
    because settings are themselves resolved from the container.
    """
    mocked = set(mocked)
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


def create_container() -> AsyncContainer:
    """Build the production container with FastAPI request integration."""
    providers = instantiate_providers()
    logfire.info(
        "DI container created", providers=[type(p).__name__ for p in providers]
    )
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
