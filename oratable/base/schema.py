from sqlalchemy import text

from ..errors import TableArgumentError
from ..helpers.utils import bind_param_names
from ..logger import logger
from .table import Table


def _row_to_dict(row):
    return {key.lower(): value for key, value in row._mapping.items()}


class Schema:
    """
    Runs statements for tables of one database schema over a SQLAlchemy
    connection, binding positional values to named placeholders.
    """

    def __init__(self, connection, schema_name=None):
        self.connection = connection

        if schema_name is None:
            url = getattr(getattr(connection, "engine", None), "url", None)
            schema_name = getattr(url, "username", None)

        if not schema_name:
            raise TableArgumentError("A schema name is required when the connection URL has no user name")

        self.schema_name = schema_name.upper()

    def _params(self, sql, bind_values):
        names = bind_param_names(sql)
        if len(names) != len(bind_values):
            raise TableArgumentError(
                f"Statement has {len(names)} bind variables but {len(bind_values)} values were given"
            )
        return dict(zip(names, bind_values))

    def _execute(self, sql, bind_values):
        params = self._params(sql, bind_values)
        logger.debug(f"Executing {sql.strip()} with {len(params)} bind values")
        return self.connection.execute(text(sql), params)

    def select_rows(self, sql, *bind_values):
        return [tuple(row) for row in self._execute(sql, bind_values)]

    def select_first(self, sql, *bind_values):
        row = self._execute(sql, bind_values).first()
        if row is None:
            return None
        return _row_to_dict(row)

    def select_all(self, sql, *bind_values):
        return [_row_to_dict(row) for row in self._execute(sql, bind_values)]

    def select(self, first_or_all, sql, *bind_values):
        if first_or_all == "first":
            return self.select_first(sql, *bind_values)
        return self.select_all(sql, *bind_values)

    def select_one(self, sql, *bind_values):
        return self._execute(sql, bind_values).scalar()

    def execute(self, sql, *bind_values):
        return self._execute(sql, bind_values).rowcount

    def find_table(self, name):
        return Table.find(self, name)
