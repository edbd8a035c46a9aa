"""Connection wrapper that logs each statement before running it."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .connection import Connection, Flavor

_logger = logging.getLogger(__name__)


class LogConnection(Connection):
    """Log every statement at a chosen level, then run it on the wrapped connection."""

    def __init__(self, conn: Connection, level: int = logging.INFO) -> None:
        self._conn = conn
        self.level = level

    def inner(self) -> Connection:
        """Return the wrapped connection."""
        return self._conn

    def with_level(self, level: int) -> LogConnection:
        """Set the logging level; return self."""
        self.level = level
        return self

    def _log(self, statement: str) -> None:
        _logger.log(self.level, "%s", statement)

    def flavor(self) -> Flavor:
        return self._conn.flavor()

    def execute_with_params(self, query: str, params: Sequence[Any]) -> None:
        self._log(query)
        self._conn.execute_with_params(query, params)

    def execute_with_params_iterator(
        self, query: str, params_iter: Iterable[Sequence[Any]]
    ) -> None:
        self._log(query)
        self._conn.execute_with_params_iterator(query, params_iter)

    def query(self, query: str) -> list:
        self._log(query)
        return self._conn.query(query)