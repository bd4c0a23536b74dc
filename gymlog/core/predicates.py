"""Render filter expressions into SQLAlchemy predicates."""
from typing import Any

from sqlalchemy import and_, inspect, true
from sqlalchemy.sql.elements import ColumnElement

from gymlog.core.exceptions import ValidationError
from gymlog.schemas.filtering import Conjunction, FilterExpression, FilterOperator


def render_expression(expression: FilterExpression, model: type[Any]) -> ColumnElement[bool]:
    mapper = inspect(model)
    if expression.field not in mapper.column_attrs:
        raise ValidationError(
            "filter",
            f"{model.__name__} has no column {expression.field!r}",
            {"field": expression.field, "model": model.__name__},
        )
    column = getattr(model, expression.field)
    operator = expression.operator

    if operator == FilterOperator.CONTAINS:
        # autoescape makes %, _ and the escape char match literally.
        # An empty string matches every non-NULL value.
        return column.contains(expression.value, autoescape=True)
    if operator == FilterOperator.IN:
        return column.in_(list(expression.value))
    if operator == FilterOperator.EQ:
        return column == expression.value
    if operator == FilterOperator.GTE:
        return column >= expression.value
    if operator == FilterOperator.LTE:
        return column <= expression.value
    raise ValidationError("filter", f"unsupported operator {operator.value!r}")


def render_predicate(conjunction: Conjunction, model: type[Any]) -> ColumnElement[bool]:
    """Compile the whole conjunction once; an empty one is a plain ``true()``."""
    if conjunction.is_empty:
        return true()
    return and_(*(render_expression(term, model) for term in conjunction.terms))
