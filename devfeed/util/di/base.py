"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable test implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class that declares ``__mock_component__`` is a mockable base:
    its subclasses are the implementations, told apart by ``__is_mock__``.
    Providers without a component are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
