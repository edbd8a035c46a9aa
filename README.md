# sqlderive

Small building blocks for talking to SQL databases through one uniform
interface, and for composing `WHERE` and `ORDER BY` clauses without
assembling the strings by hand.

## What it provides

- `sqlderive.connection`
  - `Connection`: an abstract interface over database connections. An
    implementation provides `flavor`, `execute_with_params`,
    `execute_with_params_iterator` and `query`. The interface derives
    `query_first`, `query_drop`, `query_try_as_object` and
    `query_first_try_as_object` from them.
  - `Flavor`: the SQL dialect a connection speaks (`SQLITE`, `MYSQL`,
    `POSTGRESQL`). `Flavor.table` and `Flavor.column` quote names with
    backticks, or with double quotes for PostgreSQL.
  - `AsStatement`: the interface for anything that renders itself as a
    statement.
  - `statement_with_filter_order_limit_offset` and
    `statement_with_conn_filter_order_limit_offset`: append `WHERE`,
    `ORDER BY`, `LIMIT` and `OFFSET` to a statement. An empty filter or order
    adds nothing, and an offset of 0 is left out.
- `sqlderive.sqlite`
  - `SqliteConnection`: a `Connection` over the standard library's `sqlite3`,
    with `SqliteConnection.open_in_memory()`. Queries return `SqliteRow`
    objects. `get(i)` returns `None` for a missing column, and
    `get_value(i)` raises `RowItemNotFoundError`. A statement takes at most
    17 parameters. `execute_with_params_iterator` runs every set of
    parameters inside one transaction.
  - `SqliteConn` and `SqliteLog`: a simpler `execute` / `query_first` /
    `query_map` wrapper, and a logging proxy in front of it.
- `sqlderive.log_proxy.LogConnection`: wraps any `Connection` and logs each
  statement at a chosen level (`with_level`) before running it.
- `sqlderive.field.Field`: builds filter conditions on a column (`eq`, `ne`,
  `gt`, `ge`, `lt`, `le`, `is_none`, `is_some`) and order conditions
  (`ascending`, `descending`). Create one with `Field.named` or
  `Field.from_table_column`.
- `sqlderive.filters`: `Condition`, `Value`, `Operator`, `NoFilter`, and the
  combinators `And` and `Or`, each of which takes 2 to 6 filters. Rendering
  needs a connection, which decides the quoting.
- `sqlderive.orders`: `Condition`, `Operator`, `NoOrder`, and `And`, which
  renders 2 to 6 orders as `( a, b )`.
- `sqlderive.selectable`: selectors that need no connection. `Selectable`
  with `statement()`, `GenericFilter`, `And`, `Or` and `Filterable`.
- `sqlderive.simple`: ready-made selectors `SimpleFilter`, `SimpleLimit`,
  `SimpleOffset` and `SimpleOrder`, chained with `and_`.
- `sqlderive.paginate.Paginate`: appends `LIMIT` and `OFFSET` to an
  `AsStatement`.
- `sqlderive.errors`: every error the package raises is a subclass of
  `DeriveSqlError`.

## Installation

```
pip install sqlderive
```

## Example

```python
from sqlderive.sqlite import SqliteConnection
from sqlderive.field import Field
from sqlderive.filters import Or

conn = SqliteConnection.open_in_memory()
conn.query_drop("CREATE TABLE people (id INTEGER, name TEXT)")
conn.execute_with_params_iterator(
    "INSERT INTO people (id, name) VALUES (?, ?)",
    [(1, "Jane Doe"), (2, "Jane Foe"), (3, "Jane Goe")],
)

condition = Or(Field.named("id").eq(1), Field.named("id").eq(3))
where = condition.filter(conn)          # "( `id` = 1 OR `id` = 3 )"
rows = conn.query(f"SELECT id, name FROM people WHERE {where}")
names = [row.get(1) for row in rows]    # ["Jane Doe", "Jane Goe"]

first = conn.query_first("SELECT name FROM people ORDER BY id DESC")
print(first.get(0))                     # "Jane Goe"
```

To log every statement:

```python
import logging
from sqlderive.log_proxy import LogConnection

logged = LogConnection(conn).with_level(logging.DEBUG)
logged.query("SELECT COUNT(*) FROM people")
```

Selectors that need no connection:

```python
from sqlderive.simple import SimpleFilter, SimpleOrder, Order, SimpleOffset

selector = SimpleFilter("name", "Jane").and_(SimpleOffset(10, 20))
selector.statement()    # "WHERE `name` = 'Jane' LIMIT 10 OFFSET 20"
```

## What it does not do

- SQLite is the only database with a connection implementation. `Flavor`
  names MySQL and PostgreSQL and quotes names for them, but the package has
  no connections to those servers.
- No table or statement definitions are generated from a class. You write the
  `CREATE`, `INSERT`, `UPDATE` and `DELETE` statements yourself, and convert
  rows into objects with your own factory passed to `query_try_as_object`.
- No command-line tool is included.

## Running the tests

```
pip install -e .[test]
pytest
```