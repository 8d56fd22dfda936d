from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, List, Tuple

from ..errors import (
    ConflictingBindSpecification, InvalidConditionType,
    InvalidOrderBy, UnsupportedOperation,
)
from ..helpers.utils import qualify_table
from ..logger import logger

ORDER_BY_KEY = "order_by"

SELECT_OPERATIONS = ("first", "all", "count")
OPERATIONS = SELECT_OPERATIONS + ("delete",)


@dataclass(frozen=True)
class LiteralFragment:
    """SQL text appended verbatim, with its own positional bind values."""
    text: str = ""
    bind_values: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class EqualityMap:
    """Column/value pairs ANDed together as ``column = :column`` predicates."""
    values: Mapping[str, Any] = field(default_factory=dict)


def as_condition(condition, bind_values=()):
    """
    Turn a caller-supplied condition (str or mapping) into a LiteralFragment
    or an EqualityMap.
    """
    bind_values = tuple(bind_values)

    if isinstance(condition, (LiteralFragment, EqualityMap)):
        if bind_values:
            raise ConflictingBindSpecification(
                "Bind values must be part of the condition object when one is passed"
            )
        return condition

    if isinstance(condition, str):
        return LiteralFragment(condition, bind_values)

    if isinstance(condition, Mapping):
        if bind_values:
            raise ConflictingBindSpecification(
                "Cannot specify bind variables when passing WHERE conditions as a mapping"
            )
        return EqualityMap(dict(condition))

    raise InvalidConditionType(
        f"Only str or mapping can be provided as SQL condition argument, got {type(condition).__name__}"
    )


@dataclass
class StatementSpec:
    operation: str
    text: str = ""
    set_clauses: List[str] = field(default_factory=list)
    set_values: List[Any] = field(default_factory=list)
    where_clauses: List[str] = field(default_factory=list)
    where_values: List[Any] = field(default_factory=list)

    @property
    def bind_values(self):
        return self.set_values + self.where_values


class StatementBuilder:
    def __init__(self, table):
        self.table = table

    @property
    def target(self):
        return qualify_table(self.table.schema_name, self.table.table_name)

    def spec(self, operation, condition="", bind_values=()) -> StatementSpec:
        if operation not in OPERATIONS:
            raise UnsupportedOperation(
                f"Only {', '.join(OPERATIONS)} are supported, got {operation!r}"
            )

        condition = as_condition(condition, bind_values)
        spec = StatementSpec(operation)

        if operation == "count":
            sql = "SELECT COUNT(*) "
        elif operation == "delete":
            sql = "DELETE "
        else:
            sql = "SELECT * "
        sql += f"FROM {self.target} "

        if isinstance(condition, LiteralFragment):
            sql += condition.text
            spec.where_values.extend(condition.bind_values)

        else:
            order_by_sql = None
            for key, value in condition.values.items():
                if key == ORDER_BY_KEY:
                    if operation == "delete":
                        raise InvalidOrderBy("ORDER BY cannot be used in a DELETE statement")
                    order_by_sql = f"ORDER BY {value} "
                else:
                    spec.where_clauses.append(f"{key} = :{key}")
                    spec.where_values.append(value)

            if spec.where_clauses:
                sql += "WHERE " + " AND ".join(spec.where_clauses) + " "
            if order_by_sql:
                sql += order_by_sql

        spec.text = sql
        logger.debug(f"Built {operation} statement: {sql}")
        return spec

    def build(self, operation, condition="", bind_values=()):
        """
        Return ``(sql, bind_values)`` for a first/all/count/delete statement.
        """
        spec = self.spec(operation, condition, bind_values)
        return spec.text, spec.bind_values
