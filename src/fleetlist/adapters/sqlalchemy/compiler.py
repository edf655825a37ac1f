"""SQLAlchemy adapter – compile ``where``/``order_by`` into SQL expressions.

Field paths resolve against the mapped model: ``"name"`` is a column,
``"category.name"`` is a column on a relationship target, rendered as an
``EXISTS`` via ``has()`` (many-to-one) or ``any()`` (one-to-many).
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

from sqlalchemy import and_, inspect, or_
from sqlalchemy.sql.elements import ColumnElement

from fleetlist.application.query.expressions import AllOf, AnyOf, Condition, Expression
from fleetlist.application.query.spec import SortOrder, SortSpec
from fleetlist.kernel.errors import ValidationError


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _unknown_field(path: str, model: type) -> ValidationError:
    return ValidationError(
        f"Unknown field '{path}' for {model.__name__}",
        errors=[{"field": path, "message": "unknown field"}],
    )


def _column(model: type, name: str, path: str) -> Any:
    mapper = inspect(model)
    if name not in mapper.column_attrs:
        raise _unknown_field(path, model)
    return getattr(model, name)


def _coerce(column: Any, value: Any, path: str) -> Any:
    if isinstance(value, (list, tuple)):
        return [_coerce(column, v, path) for v in value]
    if not isinstance(value, str):
        return value
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value
    try:
        if python_type is datetime:
            return datetime.fromisoformat(value)
        if python_type is date:
            return date.fromisoformat(value)
        if python_type in (int, float):
            return python_type(value)
    except ValueError as exc:
        raise ValidationError.for_field(
            f"Invalid value for '{path}'",
            path,
            f"expected {python_type.__name__}, got {value!r}",
        ) from exc
    return value


def _compare(column: Any, cond: Condition) -> ColumnElement[bool]:
    value = _coerce(column, cond.value, cond.field)
    match cond.op:
        case "eq":
            return column.is_(None) if value is None else column == value
        case "neq":
            return column.is_not(None) if value is None else column != value
        case "in":
            return column.in_(value)
        case "gt":
            return column > value
        case "gte":
            return column >= value
        case "lt":
            return column < value
        case "lte":
            return column <= value
        case "contains":
            return column.ilike(f"%{_escape_like(str(value))}%", escape="\\")
    raise ValidationError.for_field(
        f"Unsupported operator '{cond.op}'",
        cond.field,
        f"unsupported operator {cond.op!r}",
    )


def _condition(model: type, cond: Condition) -> ColumnElement[bool]:
    parts = cond.field.split(".")
    if len(parts) == 1:
        return _compare(_column(model, parts[0], cond.field), cond)
    if len(parts) != 2:
        raise _unknown_field(cond.field, model)

    relation_name, attr = parts
    relation = inspect(model).relationships.get(relation_name)
    if relation is None:
        raise _unknown_field(cond.field, model)
    target = relation.mapper.class_
    inner = _compare(_column(target, attr, cond.field), cond)
    relationship_attr = getattr(model, relation_name)
    return relationship_attr.any(inner) if relation.uselist else relationship_attr.has(inner)


def compile_where(model: type, expr: Expression | None) -> ColumnElement[bool] | None:
    """Translate an expression tree into a SQLAlchemy boolean clause."""
    if expr is None:
        return None
    if isinstance(expr, Condition):
        return _condition(model, expr)
    children = [c for c in (compile_where(model, child) for child in expr.children) if c is not None]
    if not children:
        return None
    if isinstance(expr, AllOf):
        return and_(*children)
    if isinstance(expr, AnyOf):
        return or_(*children)
    raise TypeError(f"Unsupported expression node: {expr!r}")


def compile_order_by(model: type, order_by: Sequence[SortSpec]) -> list[Any]:
    clauses: list[Any] = []
    for sort in order_by:
        column = _column(model, sort.field, sort.field)
        clauses.append(column.desc() if sort.order == SortOrder.DESC else column.asc())
    return clauses


__all__ = ["compile_order_by", "compile_where"]
