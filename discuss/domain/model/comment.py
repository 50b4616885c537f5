"""Comment entity.

Comments are threaded discussions on posts with unlimited depth.
Threading is expressed only through ``parent_id``; there is no stored
path or depth, trees are assembled in memory from flat records.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import ROOT_COMMENT_ID, CommentId, CommentStatus, PostId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - id: Assigned by the repository on first save (None before that)
    - parent_id: Direct parent comment, ROOT_COMMENT_ID (0) for top-level
    - status: Moderation status, only published comments are shown publicly
    """

    id: Optional[CommentId] = None
    post_id: PostId
    parent_id: CommentId = ROOT_COMMENT_ID
    author: str = Field(min_length=1, max_length=50)
    email: str = Field(max_length=255)
    author_url: Optional[str] = Field(default=None, max_length=127)
    content: str = Field(min_length=1, max_length=1023)
    status: CommentStatus = CommentStatus.AUDITING
    gravatar_md5: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    is_admin: bool = False
    allow_notification: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether this comment replies directly to the post."""
        return self.parent_id == ROOT_COMMENT_ID
