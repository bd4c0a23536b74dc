from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar('T')
U = TypeVar('U')

DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 100


class PaginationDirection(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class PaginationParams(BaseModel):
    """One page request.

    ``cursor`` is exclusive: forward pages hold ids greater than it, backward
    pages ids lower than it. No cursor starts from the respective end.
    """
    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    cursor: Optional[int] = Field(default=None, ge=0)
    direction: PaginationDirection = PaginationDirection.FORWARD


class PaginatedResult(BaseModel, Generic[T]):
    """A page of records, always ascending by id whichever way it was fetched."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T]
    next_cursor: Optional[int] = None
    prev_cursor: Optional[int] = None

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.prev_cursor is not None

    def map(self, fn: Callable[[T], U]) -> "PaginatedResult[U]":
        """Convert the items, keeping both cursors."""
        return PaginatedResult(
            items=[fn(item) for item in self.items],
            next_cursor=self.next_cursor,
            prev_cursor=self.prev_cursor,
        )
