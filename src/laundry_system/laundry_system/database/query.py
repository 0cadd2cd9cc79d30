"""Declarative filters for gateway reads.

A :class:`Query` is plain data: the in-memory gateway evaluates it with
:meth:`Query.matches`/:meth:`Query.sort`, the MySQL gateway translates it to a
parameterized WHERE/ORDER BY clause. Policies build queries without knowing
which store will run them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

EQ = "eq"
IS_NULL = "is_null"
IN = "in"


def plain_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class Criterion:
    field: str
    op: str
    value: Any = None

    def matches(self, row: Mapping[str, Any]) -> bool:
        current = plain_value(row.get(self.field))
        if self.op == EQ:
            return current == self.value
        if self.op == IS_NULL:
            return current is None
        if self.op == IN:
            return current in self.value
        raise ValueError(f"Unsupported criterion op: {self.op!r}")


def eq(field_name: str, value: Any) -> Criterion:
    if value is None:
        return is_null(field_name)
    return Criterion(field_name, EQ, plain_value(value))


def is_null(field_name: str) -> Criterion:
    return Criterion(field_name, IS_NULL)


def one_of(field_name: str, values: Iterable[Any]) -> Criterion:
    return Criterion(field_name, IN, tuple(sorted(plain_value(v) for v in values)))


@dataclass(frozen=True)
class Query:
    criteria: tuple[Criterion, ...] = ()
    # (field, descending) pairs, most significant first
    order_by: tuple[tuple[str, bool], ...] = field(default_factory=tuple)

    def where(self, *criteria: Criterion) -> "Query":
        return Query(criteria=self.criteria + tuple(criteria), order_by=self.order_by)

    def ordered(self, *order_by: tuple[str, bool]) -> "Query":
        return Query(criteria=self.criteria, order_by=tuple(order_by))

    def matches(self, row: Mapping[str, Any]) -> bool:
        return all(c.matches(row) for c in self.criteria)

    def sort(self, rows: Sequence[Mapping[str, Any]]) -> list:
        out = list(rows)
        # Stable sorts applied from least to most significant key.
        for field_name, descending in reversed(self.order_by):
            out.sort(key=lambda r: r.get(field_name), reverse=descending)
        return out

    def apply(self, rows: Iterable[Mapping[str, Any]]) -> list:
        return self.sort([r for r in rows if self.matches(r)])
