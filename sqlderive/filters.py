"""Flavored filters producing the content of `WHERE` clauses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol

from .connection import Connection


class FlavoredFilter(Protocol):
    """Something that renders a `WHERE` clause content for a connection."""

    def filter(self, conn: Connection) -> str: ...


@dataclass(frozen=True)
class Value:
    """A value used in a condition, rendered either quoted or as is."""

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
    """Operators available to a filtering condition."""

    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"
    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="
    LOWER_THAN = "<"
    LOWER_EQUAL = "<="

    @property
    def needs_value(self) -> bool:
        """Whether the operator compares against a value."""
        return self not in (Operator.IS_NULL, Operator.IS_NOT_NULL)

    def __str__(self) -> str:
        return self.value


@dataclass
class Condition:
    """A single filtering condition on a column, optionally qualified by a table."""

    table: str | None
    label: str
    operator: Operator
    value: Value | None = None

    def __post_init__(self) -> None:
        if self.operator.needs_value:
            if self.value is None:
                raise ValueError(f"operator {self.operator.name} requires a value")
            self.value = Value.of(self.value)
        elif self.value is not None:
            raise ValueError(f"operator {self.operator.name} takes no value")

    @classmethod
    def from_table_label_operator(
        cls, table: str | None, label: str, operator: Operator, value: Any = None
    ) -> Condition:
        """Create a condition on `table`.`label`."""
        return cls(table, label, operator, value)

    @classmethod
    def from_label_operator(cls, label: str, operator: Operator, value: Any = None) -> Condition:
        """Create a condition on a column with no table qualifier."""
        return cls(None, label, operator, value)

    def filter(self, conn: Connection) -> str:
        """Return the `WHERE` clause content for the connection's flavor."""
        flavor = conn.flavor()
        label = flavor.column(self.label)
        if self.table is not None:
            label = f"{flavor.table(self.table)}.{label}"
        if self.operator.needs_value:
            return f"{label} {self.operator} {self.value}"
        return f"{label} {self.operator}"


class NoFilter:
    """An empty filter that triggers no filtering."""

    def filter(self, conn: Connection) -> str:
        """Return an empty string."""
        return ""


class _Combination:
    _keyword = ""

    def __init__(self, *filters: FlavoredFilter) -> None:
        if not 2 <= len(filters) <= 6:
            raise ValueError(
                f"{type(self).__name__} combines between 2 and 6 filters, got {len(filters)}"
            )
        self.filters = filters

    def filter(self, conn: Connection) -> str:
        joined = f" {self._keyword} ".join(item.filter(conn) for item in self.filters)
        return f"( {joined} )"


class And(_Combination):
    """Combine 2 to 6 filters with `AND`."""

    _keyword = "AND"

    def filter(self, conn: Connection) -> str:
        return super().filter(conn)


class Or(_Combination):
    """Combine 2 to 6 filters with `OR`."""

    _keyword = "OR"

    def filter(self, conn: Connection) -> str:
        return super().filter(conn)