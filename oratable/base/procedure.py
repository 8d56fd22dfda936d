from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import UnsupportedOperation
from ..helpers.utils import qualify_table
from .binder import MutationArgumentBinder
from .call import RECORD_TYPE

RECORD_ARGUMENT = "p_record"


@dataclass(frozen=True)
class RecordArgument:
    fields: Mapping[str, Any]
    data_type: str = RECORD_TYPE


class TableProcedure:
    """
    Presents a table INSERT or UPDATE with the same shape as a stored
    procedure, so ProcedureCall can execute it.
    """

    return_type = None
    overloaded = False

    def __init__(self, table, operation):
        if operation not in ("insert", "update"):
            raise UnsupportedOperation(f"Only insert or update are supported, got {operation!r}")

        self.table = table
        self.operation = operation
        self.out_list = []
        self._binder = None

        if operation == "insert":
            self.argument_list = [RECORD_ARGUMENT]
            self.arguments = {RECORD_ARGUMENT: RecordArgument(fields=table.columns)}
        else:
            self._binder = MutationArgumentBinder(table)
            self.argument_list = self._binder.argument_list
            self.arguments = self._binder.arguments

    @property
    def spec(self):
        return self._binder.spec if self._binder else None

    def add_set_arguments(self, values):
        self._binder.add_set_arguments(values)
        self.argument_list = self._binder.argument_list

    def add_where_arguments(self, where):
        self._binder.add_where_arguments(where)
        self.argument_list = self._binder.argument_list

    @property
    def argument_values(self):
        return self._binder.argument_values if self._binder else []

    def call_sql(self, params_string):
        target = qualify_table(self.table.schema_name, self.table.table_name)

        if self.operation == "insert":
            return f"INSERT INTO {target} VALUES {params_string}"

        spec = self._binder.spec
        sql = f"UPDATE {target} SET {', '.join(spec.set_clauses)}"
        if spec.where_clauses:
            sql += f" WHERE {' AND '.join(spec.where_clauses)}"

        spec.text = sql
        return sql
