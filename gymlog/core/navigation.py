"""Caller-held navigation state for paging through a list.

The state is an immutable value. Every transition returns the successor
state, so a page that fails to load simply leaves the caller holding the old
one and the same request can be retried.

``current_cursor`` and ``direction`` describe the last request issued;
``next_cursor`` and ``prev_cursor`` describe the last page received.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gymlog.schemas.pagination import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    PaginatedResult,
    PaginationDirection,
    PaginationParams,
)


class PaginationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    next_cursor: Optional[int] = None
    prev_cursor: Optional[int] = None
    current_cursor: Optional[int] = None
    direction: PaginationDirection = PaginationDirection.FORWARD

    def has_next(self) -> bool:
        return self.next_cursor is not None

    def has_previous(self) -> bool:
        return self.prev_cursor is not None

    def to_params(self) -> PaginationParams:
        return PaginationParams(
            limit=self.limit,
            cursor=self.current_cursor,
            direction=self.direction,
        )

    def go_forwards(self) -> "PaginationState":
        return apply_forward(self)

    def go_backwards(self) -> "PaginationState":
        return apply_backward(self)

    def reset_pagination(self) -> "PaginationState":
        return apply_reset(self)

    def rewind(self) -> "PaginationState":
        return apply_rewind(self)

    def with_limit(self, limit: int) -> "PaginationState":
        return PaginationState(limit=limit)

    def receive(self, page: PaginatedResult) -> "PaginationState":
        return apply_response(self, page)


def apply_forward(state: PaginationState) -> PaginationState:
    """Target the page after the last one received.

    Check ``has_next()`` first: without a next cursor this asks for page 1.
    """
    return state.model_copy(
        update={"current_cursor": state.next_cursor, "direction": PaginationDirection.FORWARD}
    )


def apply_backward(state: PaginationState) -> PaginationState:
    """Target the page before the last one received."""
    return state.model_copy(
        update={"current_cursor": state.prev_cursor, "direction": PaginationDirection.BACKWARD}
    )


def apply_response(state: PaginationState, page: PaginatedResult) -> PaginationState:
    return state.model_copy(
        update={"next_cursor": page.next_cursor, "prev_cursor": page.prev_cursor}
    )


def apply_reset(state: PaginationState) -> PaginationState:
    """Forget the forward continuation only.

    The current cursor and direction are kept, so the next request repeats
    the last one. Use ``apply_rewind`` when the filters change.
    """
    return state.model_copy(update={"next_cursor": None})


def apply_rewind(state: PaginationState) -> PaginationState:
    """Back to page 1, forward, keeping the page size."""
    return PaginationState(limit=state.limit)
