"""Comment domain events.

Exactly one event is published per successfully created comment:
``comment.new`` for top-level comments, ``comment.reply`` for replies.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum

from pydantic import Field

from discuss.domain.model.comment import Comment
from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PostId


class CommentEventType(str, Enum):
    """Kind of comment notification."""

    NEW = "comment.new"
    REPLY = "comment.reply"


class CommentEvent(DomainModel):
    """Notification that a comment was created."""

    type: CommentEventType
    comment_id: CommentId
    post_id: PostId
    occurred_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def for_created(cls, comment: Comment) -> "CommentEvent":
        """Build the event announcing ``comment``, chosen by its parent id."""
        event_type = (
            CommentEventType.NEW if comment.is_top_level else CommentEventType.REPLY
        )
        return cls(type=event_type, comment_id=comment.id, post_id=comment.post_id)


class CommentEventPublisher(ABC):
    """Sink for comment events.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def publish(self, event: CommentEvent) -> None:
        """Publish a comment event.

        Args:
            event: The event to publish
        """
        pass
