"""Shared route dependencies."""
from typing import Optional

from fastapi import Query

from gymlog.schemas.pagination import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    PaginationDirection,
    PaginationParams,
)


def get_pagination_params(
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    cursor: Optional[int] = Query(None, ge=0, description="Exclusive id boundary"),
    direction: PaginationDirection = Query(PaginationDirection.FORWARD),
) -> PaginationParams:
    return PaginationParams(limit=limit, cursor=cursor, direction=direction)
