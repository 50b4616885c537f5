"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components a test container can swap for in-memory doubles
Component = Literal["events", "persistence"]


class ProviderBase(Provider):
    """Common base of every discuss provider.

    A provider that declares ``__mock_component__`` is the base of a mockable
    component; its subclasses are the production (``__is_mock__ = False``)
    and in-memory (``__is_mock__ = True``) implementations. ``get_provider``
    picks between them.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
