"""Uniform interface over SQL database connections and statement assembly."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Sequence


class Flavor(enum.Enum):
    """The SQL dialect spoken by a connection."""

    SQLITE = "SQLite"
    MYSQL = "MySQL"
    POSTGRESQL = "PostgreSQL"

    def _quote(self, name: str) -> str:
        if self is Flavor.POSTGRESQL:
            return f'"{name}"'
        return f"`{name}`"

    def table(self, name: str) -> str:
        """Return the table name quoted for this flavor."""
        return self._quote(name)

    def column(self, name: str) -> str:
        """Return the column name quoted for this flavor."""
        return self._quote(name)


class Connection(ABC):
    """Interface implemented by SQL drivers or proxies to SQL drivers."""

    @abstractmethod
    def flavor(self) -> Flavor:
        """Return the SQL flavor of the connection."""

    @abstractmethod
    def execute_with_params(self, query: str, params: Sequence[Any]) -> None:
        """Run a statement with the given parameters."""

    @abstractmethod
    def execute_with_params_iterator(
        self, query: str, params_iter: Iterable[Sequence[Any]]
    ) -> None:
        """Run a statement once for each set of parameters."""

    @abstractmethod
    def query(self, query: str) -> list:
        """Run a query and return the list of rows."""

    def query_try_as_object(self, query: str, factory: Callable[[Any], Any]) -> list:
        """Run a query and convert each row with `factory`."""
        return [factory(row) for row in self.query(query)]

    def query_first(self, query: str) -> Any | None:
        """Run a query and return its first row, or None."""
        return next(iter(self.query(query)), None)

    def query_first_try_as_object(
        self, query: str, factory: Callable[[Any], Any]
    ) -> Any | None:
        """Run a query and convert its first row with `factory`, or return None."""
        row = self.query_first(query)
        return None if row is None else factory(row)

    def query_drop(self, query: str) -> None:
        """Run a query and discard its result."""
        self.query_first(query)


class AsStatement(ABC):
    """Something that renders itself as an SQL statement."""

    @abstractmethod
    def as_statement(self) -> str:
        """Return the SQL statement."""


def _append_limit_offset(statement: str, limit: int | None, offset: int | None) -> str:
    if limit is not None:
        statement = f"{statement} LIMIT {limit}"
    if offset is not None and offset > 0:
        statement = f"{statement} OFFSET {offset}"
    return statement


def statement_with_filter_order_limit_offset(
    statement: str,
    filter=None,
    order=None,
    limit: int | None = None,
    offset: int | None = None,
) -> str:
    """Combine a statement with optional filter, order, limit and offset."""
    if filter is not None:
        clause = filter.filter()
        if clause:
            statement = f"{statement} WHERE {clause}"
    if order is not None:
        clause = order.as_order_clause()
        if clause:
            statement = f"{statement} ORDER BY {clause}"
    return _append_limit_offset(statement, limit, offset)


def statement_with_conn_filter_order_limit_offset(
    statement: str,
    conn: Connection,
    filter=None,
    order=None,
    limit: int | None = None,
    offset: int | None = None,
) -> str:
    """Combine a statement with flavored filter and order, limit and offset."""
    if filter is not None:
        clause = filter.filter(conn)
        if clause:
            statement = f"{statement} WHERE {clause}"
    if order is not None:
        clause = order.as_order_clause(conn)
        if clause:
            statement = f"{statement} ORDER BY {clause}"
    return _append_limit_offset(statement, limit, offset)