"""Keyset pagination shared by every list endpoint.

Pages are bounded by the surrogate ``id`` instead of an offset, so inserts
and deletes between requests never shift or duplicate rows. Each request
over-fetches ``limit + 1`` rows; the extra row only tells us whether another
page exists in the direction of travel and is never returned.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.exceptions import ValidationError
from gymlog.core.logging import get_logger
from gymlog.core.predicates import render_predicate
from gymlog.schemas.filtering import Conjunction, FilterSpec
from gymlog.schemas.pagination import (
    MAX_PAGE_LIMIT,
    PaginatedResult,
    PaginationDirection,
    PaginationParams,
)

logger = get_logger(__name__)


class HasId(Protocol):
    @property
    def id(self) -> int: ...


RecordT = TypeVar("RecordT", bound=HasId)
ModelT = TypeVar("ModelT")


class PageStore(Protocol[RecordT]):
    """Anything that can return the ordered, over-fetched window for a page."""

    async def fetch_window(
        self, predicate: Conjunction, params: PaginationParams
    ) -> Sequence[RecordT]: ...


def keyset_window(query: Select, id_column: Any, params: PaginationParams) -> Select:
    """Bound, order and over-fetch ``query`` for one page request."""
    if params.direction == PaginationDirection.FORWARD:
        if params.cursor is not None:
            query = query.where(id_column > params.cursor)
        query = query.order_by(id_column.asc())
    else:
        if params.cursor is not None:
            query = query.where(id_column < params.cursor)
        query = query.order_by(id_column.desc())
    return query.limit(params.limit + 1)


def resolve_page(rows: Sequence[RecordT], params: PaginationParams) -> PaginatedResult[RecordT]:
    """Turn a fetched window into a page and the cursors around it.

    ``rows`` must come in fetch order (descending ids for backward requests).
    A forward page only has a previous page when the request carried a
    cursor. A backward page always has a next page, since paging backward
    starts from a record that lies after it.
    """
    items = list(rows)
    has_more = len(items) > params.limit
    if has_more:
        items.pop()

    if params.direction == PaginationDirection.BACKWARD:
        items.reverse()

    start_id = items[0].id if items else None
    end_id = items[-1].id if items else None

    if params.direction == PaginationDirection.FORWARD:
        next_cursor = end_id if has_more else None
        prev_cursor = start_id if params.cursor is not None else None
    else:
        next_cursor = end_id
        prev_cursor = start_id if has_more else None

    return PaginatedResult(items=items, next_cursor=next_cursor, prev_cursor=prev_cursor)


def check_params(params: PaginationParams) -> None:
    # PaginationParams validates on construction; model_construct() does not.
    limit = params.limit
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_PAGE_LIMIT:
        raise ValidationError(
            "limit",
            f"must be between 1 and {MAX_PAGE_LIMIT}",
            {"limit": params.limit},
        )
    if params.cursor is not None and params.cursor < 0:
        raise ValidationError("cursor", "must not be negative", {"cursor": params.cursor})


class SqlAlchemyPageStore(Generic[ModelT]):
    """Page store over a mapped model with an integer ``id`` primary key."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self._session = session
        self._model = model

    def build_query(self, predicate: Conjunction, params: PaginationParams) -> Select:
        query = select(self._model).where(render_predicate(predicate, self._model))
        return keyset_window(query, self._model.id, params)

    async def fetch_window(
        self, predicate: Conjunction, params: PaginationParams
    ) -> Sequence[ModelT]:
        result = await self._session.execute(self.build_query(predicate, params))
        return result.scalars().all()


async def paginate(
    store: PageStore[RecordT],
    filters: FilterSpec | Conjunction | None,
    params: PaginationParams,
) -> PaginatedResult[RecordT]:
    """Fetch one page from ``store``.

    Invalid params are rejected before the store is called. Store errors are
    not caught here.
    """
    check_params(params)

    if isinstance(filters, FilterSpec):
        predicate = filters.to_conjunction()
    else:
        predicate = filters or Conjunction()

    rows = await store.fetch_window(predicate, params)
    page = resolve_page(rows, params)

    logger.debug(
        "page_fetched",
        limit=params.limit,
        cursor=params.cursor,
        direction=params.direction.value,
        filter_terms=len(predicate.terms),
        window_size=len(rows),
        item_count=len(page.items),
        next_cursor=page.next_cursor,
        prev_cursor=page.prev_cursor,
    )
    return page
