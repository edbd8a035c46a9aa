"""Flavored ordering clauses producing the content of `ORDER BY` clauses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from .connection import Connection


class FlavoredOrder(Protocol):
    """Something that renders an `ORDER BY` clause content for a connection."""

    def as_order_clause(self, conn: Connection) -> str: ...


class Operator(enum.Enum):
    """Direction of an ordering condition."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"

    def __str__(self) -> str:
        return self.value


@dataclass
class Condition:
    """A single ordering condition on a column, optionally qualified by a table."""

    table: str | None
    label: str
    operator: Operator

    @classmethod
    def from_table_label_operator(
        cls, table: str | None, label: str, operator: Operator
    ) -> Condition:
        """Create a condition from a table name, column name and an operator."""
        return cls(table, label, operator)

    @classmethod
    def from_label_operator(cls, label: str, operator: Operator) -> Condition:
        """Create a condition from a column name and an operator."""
        return cls(None, label, operator)

    def as_order_clause(self, conn: Connection) -> str:
        """Return the `ORDER BY` clause content for the connection's flavor."""
        flavor = conn.flavor()
        label = flavor.column(self.label)
        if self.table is not None:
            label = f"{flavor.table(self.table)}.{label}"
        return f"{label} {self.operator}"


class NoOrder:
    """An empty ordering that triggers no ordering."""

    def as_order_clause(self) -> str:
        """Return an empty string."""
        return ""


class And:
    """Combine 2 to 6 ordering conditions into a comma separated list."""

    def __init__(self, *orders: FlavoredOrder) -> None:
        if not 2 <= len(orders) <= 6:
            raise ValueError(f"And combines between 2 and 6 orders, got {len(orders)}")
        self.orders = orders

    def as_order_clause(self, conn: Connection) -> str:
        """Return the combined clause, such as `( a, b )`."""
        joined = ", ".join(order.as_order_clause(conn) for order in self.orders)
        return f"( {joined} )"