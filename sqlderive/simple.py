"""Ready-made selectors for simple filter, limit, offset and order clauses."""

from __future__ import annotations

import enum
from typing import Any

from .selectable import Filterable, GenericFilter, Operator, Selectable


class Order(enum.Enum):
    """Whether ordering is ascending (A to Z) or descending (Z to A)."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"


class SimpleFilter(Selectable):
    """Selector producing a `WHERE key = value` clause, or no filter at all."""

    def __init__(self, key: str | None = None, value: Any = None) -> None:
        if (key is None) != (value is None):
            raise ValueError("SimpleFilter needs both a key and a value, or neither")
        clause = None if key is None else GenericFilter(key, Operator.EQUAL, value)
        self._filterable = Filterable(clause)

    def and_(self, next_: Selectable) -> SimpleFilter:
        """Chain a selector providing limit, offset and order; return self."""
        self._filterable.and_(next_)
        return self

    def filter(self) -> str | None:
        return self._filterable.filter()

    def limit(self) -> int | None:
        return self._filterable.limit()

    def offset(self) -> int | None:
        return self._filterable.offset()

    def order_by(self) -> str | None:
        return self._filterable.order_by()


class SimpleLimit(Selectable):
    """Selector producing a `LIMIT value` clause."""

    def __init__(self, limit: int | None = None) -> None:
        self._limit = limit
        self.next: Selectable | None = None

    def and_(self, next_: Selectable) -> SimpleLimit:
        """Chain a selector providing filter, offset and order; return self."""
        self.next = next_
        return self

    def filter(self) -> str | None:
        return None if self.next is None else self.next.filter()

    def limit(self) -> int | None:
        return self._limit

    def offset(self) -> int | None:
        return None if self.next is None else self.next.offset()

    def order_by(self) -> str | None:
        return None if self.next is None else self.next.order_by()


class SimpleOffset(Selectable):
    """Selector producing `LIMIT value OFFSET value` clauses."""

    def __init__(self, limit: int | None = None, offset: int | None = None) -> None:
        if (limit is None) != (offset is None):
            raise ValueError("SimpleOffset needs both a limit and an offset, or neither")
        self._limit = limit
        self._offset = offset
        self.next: Selectable | None = None

    def and_(self, next_: Selectable) -> SimpleOffset:
        """Chain a selector providing filter and order; return self."""
        self.next = next_
        return self

    def filter(self) -> str | None:
        return None if self.next is None else self.next.filter()

    def limit(self) -> int | None:
        return self._limit

    def offset(self) -> int | None:
        return self._offset

    def order_by(self) -> str | None:
        return None if self.next is None else self.next.order_by()


class SimpleOrder(Selectable):
    """Selector producing an ``ORDER BY `key` ASC|DESC`` clause."""

    def __init__(self, key: str | None = None, order: Order | None = None) -> None:
        if (key is None) != (order is None):
            raise ValueError("SimpleOrder needs both a key and an order, or neither")
        self._order = None if key is None else (key, order)
        self.next: Selectable | None = None

    def and_(self, next_: Selectable) -> SimpleOrder:
        """Chain a selector providing filter, limit and offset; return self."""
        self.next = next_
        return self

    def filter(self) -> str | None:
        return None if self.next is None else self.next.filter()

    def limit(self) -> int | None:
        return None if self.next is None else self.next.limit()

    def offset(self) -> int | None:
        return None if self.next is None else self.next.offset()

    def order_by(self) -> str | None:
        if self._order is None:
            return None
        key, order = self._order
        return f"`{key}` {order.value}"