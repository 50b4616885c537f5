"""Domain value objects for comments.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field

from discuss.domain.error import InvalidArgumentError
from discuss.domain.value.common import ValueObject


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PUBLISHED = "published"
    AUDITING = "auditing"
    RECYCLE = "recycle"


class SortDirection(str, Enum):
    """Direction of a sort order."""

    ASC = "asc"
    DESC = "desc"


class SortOrder(ValueObject):
    """Sort order on a single field."""

    field: str = Field(min_length=1)
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: str) -> "SortOrder":
        """Parse a ``field[,direction]`` query string.

        Examples: ``id``, ``id,desc``, ``created_at,asc``

        Raises:
            InvalidArgumentError: If the field is empty or the direction unknown
        """
        name, _, direction = value.partition(",")
        name = name.strip()
        if not name:
            raise InvalidArgumentError("sort", f"missing field in '{value}'")

        direction = direction.strip().lower() or SortDirection.ASC.value
        try:
            return cls(field=name, direction=SortDirection(direction))
        except ValueError:
            raise InvalidArgumentError(
                "sort", f"unknown direction '{direction}' in '{value}'"
            ) from None


class PageRequest(ValueObject):
    """Zero-based page descriptor with optional sort orders."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        """Number of records to skip for this page."""
        return self.page * self.size


class CommentQuery(ValueObject):
    """Moderation listing filter.

    The keyword is matched against author, content and email.
    """

    status: CommentStatus | None = None
    keyword: str | None = None
