"""Page results."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from discuss.domain.model.view import CommentNode

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """Slice of a flat result set."""

    content: list[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size > 0 else 0


@dataclass
class CommentTreePage:
    """Slice of a comment forest's top-level threads.

    Two totals are reported:
    - total_threads: number of top-level threads, drives the page count
    - total_comments: every comment in the unpaginated input, replies included
    """

    content: list[CommentNode]
    page: int
    size: int
    total_threads: int
    total_comments: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_threads / self.size) if self.size > 0 else 0
