from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..errors import TableArgumentError, UnknownColumn
from ..logger import logger

RECORD_TYPE = "PL/SQL RECORD"


@runtime_checkable
class Invocable(Protocol):
    """
    Shape shared by anything ProcedureCall can execute.
    """

    argument_list: List[str]
    arguments: Dict[str, Any]
    return_type: Optional[Any]
    out_list: List[str]

    @property
    def overloaded(self) -> bool: ...

    def call_sql(self, params_string: str) -> str: ...


class ProcedureCall:
    """
    Renders the parameter list of an Invocable, binds the argument values
    positionally and executes the resulting statement through the schema.
    """

    def __init__(self, invocable, args, schema):
        self.invocable = invocable
        self.args = list(args)
        self.schema = schema

        if len(self.args) > len(invocable.argument_list):
            raise TableArgumentError(
                f"Too many arguments: expected at most {len(invocable.argument_list)}, got {len(self.args)}"
            )

    def _record_binds(self, name, metadata, record):
        if not isinstance(record, Mapping):
            raise TableArgumentError(f"Record argument {name!r} must be a mapping")

        fields = metadata.fields
        for key in record:
            if key not in fields:
                raise UnknownColumn(key)

        placeholders = [f":{name}_{field}" for field in fields]
        values = [record.get(field) for field in fields]
        return f"({', '.join(placeholders)})", values

    def render(self):
        """
        Return ``(params_string, bind_values)`` for the invocable's arguments.
        """
        params = []
        values = []
        for name, value in zip(self.invocable.argument_list, self.args):
            metadata = self.invocable.arguments[name]

            if getattr(metadata, "data_type", None) == RECORD_TYPE:
                params_string, record_values = self._record_binds(name, metadata, value)
                params.append(params_string)
                values.extend(record_values)
            else:
                params.append(f":{name}")
                values.append(value)

        return ", ".join(params), values

    def exec(self):
        params_string, values = self.render()
        sql = self.invocable.call_sql(params_string)
        logger.debug(f"Executing call with {len(values)} bind values: {sql}")

        return self.schema.execute(sql, *values)
