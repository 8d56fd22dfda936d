from sqlalchemy.exc import ArgumentError


class TableArgumentError(ArgumentError):
    """Base class for invalid arguments passed to table operations."""


class InvalidConditionType(TableArgumentError):
    """Condition is neither a SQL fragment nor a column/value mapping."""


class ConflictingBindSpecification(TableArgumentError):
    """Positional bind values were given together with a mapping condition."""


class UnsupportedOperation(TableArgumentError):
    pass


class InvalidOrderBy(TableArgumentError):
    """
    ORDER BY was requested for a DELETE through the reserved ``order_by`` key.

    The key is rejected rather than bound as a predicate on a column named
    ``order_by``.
    """


class UnknownColumn(TableArgumentError):
    """A column name is not part of the table's column catalog."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Invalid column name {column!r} specified as argument")
