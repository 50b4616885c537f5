"""Comment event publishers."""

import logfire

from discuss.domain.event import CommentEvent, CommentEventPublisher


class LogfireCommentEventPublisher(CommentEventPublisher):
    """Publishes comment events as structured Logfire records."""

    async def publish(self, event: CommentEvent) -> None:
        """Emit the event."""
        logfire.info(
            "Comment event {event_type}",
            event_type=event.type.value,
            comment_id=event.comment_id,
            post_id=event.post_id,
            occurred_at=event.occurred_at.isoformat(),
        )


class InMemoryCommentEventPublisher(CommentEventPublisher):
    """Records published events for testing."""

    def __init__(self) -> None:
        self.events: list[CommentEvent] = []

    async def publish(self, event: CommentEvent) -> None:
        """Record the event."""
        self.events.append(event)
