from collections.abc import Mapping

from ..errors import InvalidConditionType, TableArgumentError, UnknownColumn
from .statement import StatementSpec

WHERE_PREFIX = "w_"


class MutationArgumentBinder:
    """
    Collects the SET and WHERE arguments of an UPDATE, checked against the
    table's column catalog.

    Bind values come out as all SET values followed by all WHERE values,
    which is also the order their placeholders appear in the statement.
    """

    def __init__(self, table):
        self.table = table
        self.spec = StatementSpec("update")

        # Bind name -> column descriptor, in placeholder order
        self.arguments = {}

    @property
    def argument_list(self):
        return list(self.arguments)

    @property
    def argument_values(self):
        return self.spec.bind_values

    def _column(self, name):
        column = self.table.columns.get(name)
        if column is None:
            raise UnknownColumn(name)
        return column

    def add_set_arguments(self, values):
        if not values:
            raise TableArgumentError("At least one column must be given to update")

        for key, value in values.items():
            self.arguments[key] = self._column(key)
            self.spec.set_clauses.append(f"{key}=:{key}")
            self.spec.set_values.append(value)

    def add_where_arguments(self, where):
        if isinstance(where, Mapping):
            for key, value in where.items():
                bind_name = f"{WHERE_PREFIX}{key}"
                self.arguments[bind_name] = self._column(key)
                self.spec.where_clauses.append(f"{key}=:{bind_name}")
                self.spec.where_values.append(value)

        elif isinstance(where, str):
            if where.strip():
                self.spec.where_clauses.append(where)

        else:
            raise InvalidConditionType(
                f"Only str or mapping can be provided as WHERE argument, got {type(where).__name__}"
            )

    def bind(self, values, where=None):
        self.add_set_arguments(values)
        if where is not None:
            self.add_where_arguments(where)
        return self.spec
