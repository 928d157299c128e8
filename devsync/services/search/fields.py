from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from sqlalchemy import String, and_, func, or_, true, type_coerce
from sqlalchemy.sql.elements import ColumnElement

from devsync.core.errors import InvalidFieldError, InvalidValueError

PredicateBuilder = Callable[[str, str], ColumnElement]

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class SearchMode(str, enum.Enum):
    AND = "AND"
    OR = "OR"


def _contains_expr(column, value: str) -> ColumnElement:
    # Enum columns are stored as VARCHAR, coerce so LIKE binds a plain string.
    return func.lower(type_coerce(column, String), type_=String).contains(value.lower(), autoescape=True)


def contains(column) -> PredicateBuilder:
    def _build(field: str, value: str) -> ColumnElement:
        return _contains_expr(column, value)

    return _build


def equals(column) -> PredicateBuilder:
    def _build(field: str, value: str) -> ColumnElement:
        return column == value

    return _build


def enum_equals(column, enum_cls: type[enum.Enum]) -> PredicateBuilder:
    expected = "one of " + ", ".join(member.name for member in enum_cls)

    def _build(field: str, value: str) -> ColumnElement:
        try:
            member = enum_cls[value]
        except KeyError:
            raise InvalidValueError(field, value, expected)
        return column == member

    return _build


def boolean(column) -> PredicateBuilder:
    def _build(field: str, value: str) -> ColumnElement:
        text = value.lower()
        if text == "true":
            return column.is_(True)
        if text == "false":
            return column.is_(False)
        raise InvalidValueError(field, value, "'true' or 'false'")

    return _build


def integer(column) -> PredicateBuilder:
    def _build(field: str, value: str) -> ColumnElement:
        if not _INTEGER_RE.fullmatch(value):
            raise InvalidValueError(field, value, "an integer")
        number = int(value)
        if not INT32_MIN <= number <= INT32_MAX:
            raise InvalidValueError(field, value, "an integer")
        return column == number

    return _build


def related_contains(relation, column) -> PredicateBuilder:
    """Many-to-one text match, rendered as EXISTS against the related table."""

    def _build(field: str, value: str) -> ColumnElement:
        return relation.has(_contains_expr(column, value))

    return _build


def any_equals(relation, column) -> PredicateBuilder:
    """Collection membership: some related row has ``column == value``."""

    def _build(field: str, value: str) -> ColumnElement:
        return relation.any(column == value)

    return _build


def any_contains(relation, column) -> PredicateBuilder:
    def _build(field: str, value: str) -> ColumnElement:
        return relation.any(_contains_expr(column, value))

    return _build


@dataclass(frozen=True)
class SearchSpec:
    """Searchable surface of one entity.

    ``fields`` is the whitelist: only the names it maps can appear in a filter,
    anything else is rejected before a statement is built. ``mode`` picks how
    the per-field predicates are combined.
    """

    entity: str
    model: Any
    mode: SearchMode
    fields: Mapping[str, PredicateBuilder]
    sort_fields: Mapping[str, Any]
    default_sort: str

    @property
    def whitelist(self) -> frozenset[str]:
        return frozenset(self.fields)

    def build_predicate(self, field: str, value: str) -> ColumnElement:
        builder = self.fields.get(field)
        if builder is None:
            raise InvalidFieldError(field)
        return builder(field, value)

    def build_criteria(self, terms: Mapping[str, str]) -> ColumnElement:
        predicates = [self.build_predicate(field, value) for field, value in terms.items()]
        if not predicates:
            return true()
        if self.mode is SearchMode.OR:
            return or_(*predicates)
        return and_(*predicates)
