"""Comment event infrastructure providers."""

from dishka import Scope, provide

from discuss.adapter.events import LogfireCommentEventPublisher
from discuss.domain.event import CommentEventPublisher
from discuss.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Comment events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider emitting Logfire records."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_event_publisher(self) -> CommentEventPublisher:
        """Provide comment event publisher."""
        return LogfireCommentEventPublisher()
