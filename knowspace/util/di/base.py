"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a mockable component: the
    subclasses are its production and mock implementations, told apart by
    ``__is_mock__``. A provider class without subclasses is used as is.

    Attributes:
        __mock_component__: Component name of a mockable provider, else None
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this provider is a component base with implementations."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> type["ProviderBase"] | None:
        """Find the production or mock implementation of a component."""
        return next(
            (c for c in cls.__subclasses__() if c.__is_mock__ == use_mock),
            None,
        )
