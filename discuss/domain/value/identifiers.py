"""Strongly typed identifiers for comment entities.

Comment ids are integers assigned in strictly increasing order by the store,
so sibling ordering by id follows creation order.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
PostId = NewType("PostId", int)

# Parent id of every top-level comment, and id of the virtual forest root
ROOT_COMMENT_ID = CommentId(0)
