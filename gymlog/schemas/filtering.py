"""Filter expressions for list queries.

A list filter is first turned into a small AST (a ``Conjunction`` of
``FilterExpression`` leaves) and only then rendered against a mapped model by
``gymlog.core.predicates``. Building the AST never touches the database.
"""
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class FilterOperator(str, Enum):
    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    IN = "in"
    CONTAINS = "contains"


class FilterExpression(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    operator: FilterOperator
    value: Any

    @model_validator(mode="after")
    def _check_value(self) -> "FilterExpression":
        if self.operator == FilterOperator.IN:
            if not isinstance(self.value, (list, tuple)) or not self.value:
                raise ValueError("'in' expressions need a non-empty list of values")
        if self.operator == FilterOperator.CONTAINS and not isinstance(self.value, str):
            raise ValueError("'contains' expressions need a string value")
        return self


class Conjunction(BaseModel):
    """Logical AND of its terms. No terms means no filtering at all."""
    model_config = ConfigDict(frozen=True)

    terms: tuple[FilterExpression, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.terms


def contains(field: str, value: Optional[str]) -> Optional[FilterExpression]:
    if value is None:
        return None
    return FilterExpression(field=field, operator=FilterOperator.CONTAINS, value=value)


def one_of(field: str, values: Optional[Iterable[Any]]) -> Optional[FilterExpression]:
    # An empty selection is the same as no selection, never "match nothing".
    if not values:
        return None
    distinct = list(dict.fromkeys(values))
    return FilterExpression(field=field, operator=FilterOperator.IN, value=distinct)


def equals(field: str, value: Any) -> Optional[FilterExpression]:
    if value is None:
        return None
    return FilterExpression(field=field, operator=FilterOperator.EQ, value=value)


def at_least(field: str, value: Any) -> Optional[FilterExpression]:
    if value is None:
        return None
    return FilterExpression(field=field, operator=FilterOperator.GTE, value=value)


def at_most(field: str, value: Any) -> Optional[FilterExpression]:
    if value is None:
        return None
    return FilterExpression(field=field, operator=FilterOperator.LTE, value=value)


class FilterSpec(BaseModel):
    """Base class for per-entity list filters.

    Every field is optional; subclasses say which expression each field turns
    into by yielding from ``expressions``. ``None`` entries are dropped.
    """

    def expressions(self) -> Iterator[Optional[FilterExpression]]:
        raise NotImplementedError

    def to_conjunction(self) -> Conjunction:
        return Conjunction(terms=tuple(e for e in self.expressions() if e is not None))
