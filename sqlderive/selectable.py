"""Selector building blocks producing `WHERE`, `ORDER BY`, `LIMIT` and `OFFSET` clauses."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Selectable(ABC):
    """Something that provides filter, order, limit and offset parts of a query."""

    def statement(self) -> str:
        """Return the combined `WHERE ... ORDER BY ... LIMIT ... OFFSET ...` text."""
        filter_clause = self.filter()
        order_clause = self.order_by()
        limit = self.limit()
        offset = self.offset()
        parts = [
            f"WHERE {filter_clause}" if filter_clause is not None else "",
            f"ORDER BY {order_clause}" if order_clause is not None else "",
            f"LIMIT {limit}" if limit is not None else "",
            f"OFFSET {offset}" if offset is not None else "",
        ]
        return " ".join(part for part in parts if part)

    @abstractmethod
    def filter(self) -> str | None:
        """Return the content of the `WHERE` clause, or None for no filtering."""

    @abstractmethod
    def limit(self) -> int | None:
        """Return the `LIMIT` value, or None for no limit."""

    @abstractmethod
    def offset(self) -> int | None:
        """Return the `OFFSET` value, or None for no offset."""

    @abstractmethod
    def order_by(self) -> str | None:
        """Return the content of the `ORDER BY` clause, or None for no ordering."""


@dataclass(frozen=True)
class Value:
    """A value used in a filter, rendered either quoted or as is."""

    value: Any
    quoted: bool

    @classmethod
    def escaped(cls, value: Any) -> Value:
        """Create a value rendered between single quotes."""
        return cls(value, True)

    @classmethod
    def raw(cls, value: Any) -> Value:
        """Create a value rendered as is."""
        return cls(value, False)

    @classmethod
    def of(cls, value: Any) -> Value:
        """Create a value from a string (quoted) or a non-negative integer (raw)."""
        if isinstance(value, Value):
            return value
        if isinstance(value, str):
            return cls.escaped(value)
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise ValueError(f"integer filter values must be non-negative, got {value}")
            return cls.raw(value)
        raise TypeError(f"unsupported filter value type: {type(value).__name__}")

    def __str__(self) -> str:
        return f"'{self.value}'" if self.quoted else f"{self.value}"


class Operator(enum.Enum):
    """Comparison operators available to a generic filter."""

    EQUAL = "="
    LOWER = "<"
    LOWER_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="

    def __str__(self) -> str:
        return self.value


class FilterClause(ABC):
    """Something that renders itself as the content of a `WHERE` clause."""

    @abstractmethod
    def filter(self) -> str:
        """Return the filter text."""


class GenericFilter(FilterClause):
    """A `key operator value` filter such as `` `name` = 'John' ``."""

    def __init__(self, key: str, operator: Operator, value: Any) -> None:
        self.key = key
        self.operator = operator
        self.value = Value.of(value)

    def filter(self) -> str:
        return f"`{self.key}` {self.operator} {self.value}"


class _Combination(FilterClause):
    _keyword = ""

    def __init__(self, *clauses: FilterClause) -> None:
        if not 2 <= len(clauses) <= 6:
            raise ValueError(
                f"{type(self).__name__} combines between 2 and 6 filters, got {len(clauses)}"
            )
        self.clauses = clauses

    def filter(self) -> str:
        joined = f" {self._keyword} ".join(clause.filter() for clause in self.clauses)
        return f"( {joined} )"


class And(_Combination):
    """Combine 2 to 6 filters with `AND`."""

    _keyword = "AND"

    def filter(self) -> str:
        return super().filter()


class Or(_Combination):
    """Combine 2 to 6 filters with `OR`."""

    _keyword = "OR"

    def filter(self) -> str:
        return super().filter()


class Filterable(Selectable):
    """A selector holding an optional filter and delegating the rest to a next selector."""

    def __init__(
        self, clause: FilterClause | None = None, next_: Selectable | None = None
    ) -> None:
        self.clause = clause
        self.next = next_

    def and_(self, next_: Selectable) -> Filterable:
        """Chain a selector providing limit, offset and order; return self."""
        self.next = next_
        return self

    def filter(self) -> str | None:
        return None if self.clause is None else self.clause.filter()

    def limit(self) -> int | None:
        return None if self.next is None else self.next.limit()

    def offset(self) -> int | None:
        return None if self.next is None else self.next.offset()

    def order_by(self) -> str | None:
        return None if self.next is None else self.next.order_by()