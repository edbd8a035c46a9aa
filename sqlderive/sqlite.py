"""SQLite connections built on the standard library `sqlite3` module."""

from __future__ import annotations

import datetime
import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar

from .connection import Connection, Flavor
from .errors import (
    MaximumNumberOfParametersExceededError,
    QueryReturnNoResultError,
    RowItemNotFoundError,
    SqliteProxyNoConnectionProvidedError,
)

_logger = logging.getLogger(__name__)

MAX_PARAMETERS = 17

T = TypeVar("T")


def _to_sql(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, datetime.datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return value


def _bind(params: Any) -> Any:
    """Convert driver parameters given as a sequence or a mapping."""
    if params is None:
        return ()
    if isinstance(params, dict):
        return {key: _to_sql(value) for key, value in params.items()}
    return [_to_sql(value) for value in params]


def _as_params(params: Any) -> list:
    """Flatten a params object, sequence or single value into a list of SQL values."""
    if hasattr(params, "as_vec_params"):
        values = list(params.as_vec_params())
    elif isinstance(params, (list, tuple)):
        values = list(params)
    else:
        values = [params]
    if len(values) > MAX_PARAMETERS:
        raise MaximumNumberOfParametersExceededError(MAX_PARAMETERS, len(values))
    return [_to_sql(value) for value in values]


@dataclass(frozen=True)
class SqliteRow:
    """A row returned by a SQLite query, holding its column values."""

    values: tuple

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def get_value(self, index: int) -> Any:
        """Return the value at `index`; raise RowItemNotFoundError if absent."""
        if not 0 <= index < len(self.values):
            raise RowItemNotFoundError(index)
        return self.values[index]

    def get(self, index: int) -> Any:
        """Return the value at `index`, or None if the row has no such column."""
        if not 0 <= index < len(self.values):
            return None
        return self.values[index]


class SqliteConnection(Connection):
    """Connection interface over a `sqlite3.Connection`."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @classmethod
    def open_in_memory(cls) -> SqliteConnection:
        """Open a connection to a new in-memory database."""
        return cls(sqlite3.connect(":memory:"))

    @property
    def raw(self) -> sqlite3.Connection:
        """The underlying `sqlite3` connection."""
        return self._conn

    def flavor(self) -> Flavor:
        return Flavor.SQLITE

    def execute_with_params(self, query: str, params: Any) -> None:
        values = _as_params(params)
        with self._conn:
            self._conn.execute(query, values)

    def execute_with_params_iterator(self, query: str, params_iter: Iterable[Any]) -> None:
        with self._conn:
            if not self._conn.in_transaction:
                self._conn.execute("BEGIN")
            for params in params_iter:
                self._conn.execute(query, _as_params(params))

    def query(self, query: str) -> list[SqliteRow]:
        with self._conn:
            cursor = self._conn.execute(query)
            return [SqliteRow(tuple(row)) for row in cursor.fetchall()]


class SqliteConn:
    """Thin wrapper over a `sqlite3.Connection` exposing execute and query helpers."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def execute(self, sql: str, params: Any = ()) -> int:
        """Run a statement and return the number of rows changed."""
        with self._conn:
            cursor = self._conn.execute(sql, _bind(params))
            return max(cursor.rowcount, 0)

    def query_first(self, sql: str, params: Any, func: Callable[[SqliteRow], T]) -> T:
        """Apply `func` to the first row; raise QueryReturnNoResultError if none."""
        with self._conn:
            row = self._conn.execute(sql, _bind(params)).fetchone()
        if row is None:
            raise QueryReturnNoResultError()
        return func(SqliteRow(tuple(row)))

    def query_map(self, sql: str, params: Any, func: Callable[[SqliteRow], T]) -> list[T]:
        """Apply `func` to each returned row."""
        with self._conn:
            rows = self._conn.execute(sql, _bind(params)).fetchall()
        return [func(SqliteRow(tuple(row))) for row in rows]


class SqliteLog:
    """Log each statement at info level before running it on a wrapped connection."""

    def __init__(self) -> None:
        self._conn: SqliteConn | SqliteLog | None = None

    def with_conn(self, conn: SqliteConn | SqliteLog) -> SqliteLog:
        """Set the wrapped connection; return self."""
        self._conn = conn
        return self

    def _target(self, sql: str) -> SqliteConn | SqliteLog:
        _logger.info("%s", sql)
        if self._conn is None:
            raise SqliteProxyNoConnectionProvidedError()
        return self._conn

    def execute(self, sql: str, params: Any = ()) -> int:
        """Log and run a statement; return the number of rows changed."""
        return self._target(sql).execute(sql, params)

    def query_first(self, sql: str, params: Any, func: Callable[[SqliteRow], T]) -> T:
        """Log the query and apply `func` to its first row."""
        return self._target(sql).query_first(sql, params, func)

    def query_map(self, sql: str, params: Any, func: Callable[[SqliteRow], T]) -> list[T]:
        """Log the query and apply `func` to each row."""
        return self._target(sql).query_map(sql, params, func)