from collections.abc import Mapping

from ..errors import TableArgumentError, UnsupportedOperation
from ..logger import logger
from .call import ProcedureCall
from .columns import ColumnCatalog
from .procedure import TableProcedure
from .statement import SELECT_OPERATIONS, StatementBuilder
from .synonyms import SynonymResolver


class Table:
    """
    A table of the database together with its column metadata.

    The column catalog is read once, when the instance is created, and never
    refreshed: DDL run afterwards is not seen by this instance.
    """

    def __init__(self, schema, table_name, schema_name=None, columns=None):
        self._schema = schema
        self._schema_name = schema_name or schema.schema_name
        self._table_name = str(table_name).upper()

        if columns is None:
            self._columns = ColumnCatalog.load(schema, self._schema_name, self._table_name)
        elif isinstance(columns, ColumnCatalog):
            self._columns = columns
        else:
            self._columns = ColumnCatalog(columns)

        self._statements = StatementBuilder(self)

    @classmethod
    def find(cls, schema, name):
        """
        Return the Table for ``name`` (a table or a synonym), or ``None``.
        """
        resolved = SynonymResolver(schema).resolve(name)
        if resolved is None:
            return None

        return cls(schema, resolved.table_name, schema_name=resolved.owner)

    @property
    def schema(self):
        return self._schema

    @property
    def schema_name(self):
        return self._schema_name

    @property
    def table_name(self):
        return self._table_name

    @property
    def columns(self):
        return self._columns

    @property
    def column_names(self):
        return self._columns.names

    @property
    def statements(self):
        return self._statements

    def __repr__(self):
        return f"Table({self._schema_name}.{self._table_name})"

    def select(self, first_or_all, condition="", *bind_values):
        if first_or_all not in SELECT_OPERATIONS:
            raise UnsupportedOperation("Only first, all or count are supported")

        sql, values = self._statements.build(first_or_all, condition, bind_values)

        if first_or_all == "count":
            return self._schema.select_one(sql, *values)
        return self._schema.select(first_or_all, sql, *values)

    def all(self, condition="", *bind_values):
        return self.select("all", condition, *bind_values)

    def first(self, condition="", *bind_values):
        return self.select("first", condition, *bind_values)

    def count(self, condition="", *bind_values):
        return self.select("count", condition, *bind_values)

    def insert(self, record):
        # Each record of a sequence is inserted on its own
        if isinstance(record, (list, tuple)):
            for r in record:
                self.insert(r)
            return None

        call = ProcedureCall(TableProcedure(self, "insert"), [record], self._schema)
        call.exec()
        return None

    def update(self, values, where=None):
        if not isinstance(values, Mapping):
            raise TableArgumentError("Only a mapping can be passed to table update method")

        table_proc = TableProcedure(self, "update")
        table_proc.add_set_arguments(values)
        if where is not None:
            table_proc.add_where_arguments(where)

        call = ProcedureCall(table_proc, table_proc.argument_values, self._schema)
        return call.exec()

    def delete(self, condition="", *bind_values):
        sql, values = self._statements.build("delete", condition, bind_values)
        logger.debug(f"Deleting from {self._schema_name}.{self._table_name}")
        return self._schema.execute(sql, *values)
