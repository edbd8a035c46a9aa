"""Exceptions raised by the package."""


class DeriveSqlError(Exception):
    """Base class for every error raised by the package."""


class NotImplementedYetError(DeriveSqlError):
    """The requested functionality is not available yet."""

    def __init__(self) -> None:
        super().__init__("Not implemented yet")


class MySQLRowIdNotSupportedError(DeriveSqlError):
    """A query relies on `rowid`, which MySQL does not provide."""

    def __init__(self) -> None:
        super().__init__(
            "`rowid` or similar approach is not supported for MySQL queries. "
            "Rewrite your query to elliminate its use"
        )


class UpdateWithLimitOffsetNotSupportedError(DeriveSqlError):
    """An update statement was combined with a limit or an offset."""

    def __init__(self) -> None:
        super().__init__("Update statement with limit and/or offset is not supported")


class SqlTypeNotSupportedError(DeriveSqlError):
    """A column type is not supported by the given SQL flavor."""

    def __init__(self, flavor: str, type_name: str) -> None:
        self.flavor = flavor
        self.type_name = type_name
        super().__init__(f"Type `{type_name}` is not supported in SQL flavor `{flavor}`")


class InvalidTypeForError(DeriveSqlError):
    """An SQL value cannot be converted to the requested type."""

    def __init__(self, type_name: str, source_type: str | None = None) -> None:
        self.type_name = type_name
        self.source_type = source_type
        if source_type is None:
            message = f"Conversion of SQL value to type `{type_name}` is invalid"
        else:
            message = (
                f"Conversion of SQL value from `{source_type}` "
                f"to type `{type_name}` is invalid"
            )
        super().__init__(message)


class MaximumNumberOfParametersExceededError(DeriveSqlError):
    """A statement was given more parameters than supported."""

    def __init__(self, maximum: int, requested: int) -> None:
        self.maximum = maximum
        self.requested = requested
        super().__init__(
            f"The maximum number of parameter - `{maximum}` - has been exceeded. "
            f"Requested: `{requested}`"
        )


class RowItemNotFoundError(DeriveSqlError):
    """A row does not hold an item at the requested index."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Row item `{index}` not found")


class InsertionFailError(DeriveSqlError):
    """Inserting an object failed."""

    def __init__(self) -> None:
        super().__init__("Object insertion failed")


class ResultConversionFailError(DeriveSqlError):
    """A query result could not be converted to the requested type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unable to convert result to type `{type_name}`")


class QueryReturnNoResultError(DeriveSqlError):
    """A query expected to return a result returned nothing."""

    def __init__(self) -> None:
        super().__init__("Query returned no result")


class SqliteProxyNoConnectionProvidedError(DeriveSqlError):
    """A logging proxy was used before being given a connection."""

    def __init__(self) -> None:
        super().__init__("No SQLite connection provided to Log proxy")


class MiscError(DeriveSqlError):
    """Any other error, described by a message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Error: {message}")