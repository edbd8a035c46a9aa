"""Uniform SQL connection interface, a SQLite implementation, and composable filter, order and pagination clauses."""

__version__ = "0.1.0"

__all__ = [
    "connection",
    "errors",
    "field",
    "filters",
    "log_proxy",
    "orders",
    "paginate",
    "selectable",
    "simple",
    "sqlite",
]