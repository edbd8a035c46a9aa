"""Helper to build filtering and ordering conditions on a column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import filters, orders


@dataclass(frozen=True)
class Field:
    """A column, optionally qualified by a table, used to build conditions."""

    label: str
    table: str | None = None

    @classmethod
    def named(cls, label: str) -> Field:
        """Create a field with the given column label."""
        return cls(label)

    @classmethod
    def from_table_column(cls, table: str, label: str) -> Field:
        """Create a field for the given table and column."""
        return cls(label, table)

    def _filter(self, operator: filters.Operator, value: Any = None) -> filters.Condition:
        return filters.Condition.from_table_label_operator(self.table, self.label, operator, value)

    def _order(self, operator: orders.Operator) -> orders.Condition:
        return orders.Condition.from_table_label_operator(self.table, self.label, operator)

    def is_none(self) -> filters.Condition:
        """Condition testing the column is NULL."""
        return self._filter(filters.Operator.IS_NULL)

    def is_some(self) -> filters.Condition:
        """Condition testing the column is not NULL."""
        return self._filter(filters.Operator.IS_NOT_NULL)

    def eq(self, value: Any) -> filters.Condition:
        """Condition testing the column equals `value`."""
        return self._filter(filters.Operator.EQUAL, value)

    def ne(self, value: Any) -> filters.Condition:
        """Condition testing the column differs from `value`."""
        return self._filter(filters.Operator.NOT_EQUAL, value)

    def gt(self, value: Any) -> filters.Condition:
        """Condition testing the column is greater than `value`."""
        return self._filter(filters.Operator.GREATER_THAN, value)

    def ge(self, value: Any) -> filters.Condition:
        """Condition testing the column is greater than or equal to `value`."""
        return self._filter(filters.Operator.GREATER_EQUAL, value)

    def lt(self, value: Any) -> filters.Condition:
        """Condition testing the column is lower than `value`."""
        return self._filter(filters.Operator.LOWER_THAN, value)

    def le(self, value: Any) -> filters.Condition:
        """Condition testing the column is lower than or equal to `value`."""
        return self._filter(filters.Operator.LOWER_EQUAL, value)

    def ascending(self) -> orders.Condition:
        """Ascending ordering on the column."""
        return self._order(orders.Operator.ASCENDING)

    def descending(self) -> orders.Condition:
        """Descending ordering on the column."""
        return self._order(orders.Operator.DESCENDING)