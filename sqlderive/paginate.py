"""Wrapper adding `LIMIT` and `OFFSET` clauses to a statement."""

from __future__ import annotations

from .connection import AsStatement


class Paginate(AsStatement):
    """Append optional `LIMIT` and `OFFSET` clauses to an inner statement."""

    def __init__(self, inner: AsStatement) -> None:
        self.inner = inner
        self.limit: int | None = None
        self.offset: int | None = None

    def with_limit(self, limit: int) -> Paginate:
        """Set the limit; return self."""
        self.limit = limit
        return self

    def with_offset(self, offset: int) -> Paginate:
        """Set the offset; return self."""
        self.offset = offset
        return self

    def as_statement(self) -> str:
        statement = self.inner.as_statement()
        limit = "" if self.limit is None else f"LIMIT {self.limit}"
        offset = "" if self.offset is None else f"OFFSET {self.offset}"
        return f"{statement} {limit} {offset}"