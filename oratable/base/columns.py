from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from ..logger import logger

OBJECT_TYPE = "OBJECT"

COLUMNS_SQL = """
    SELECT column_name, column_id position,
           data_type, data_length, data_precision, data_scale, char_used,
           data_type_owner, data_type_mod
    FROM all_tab_columns
    WHERE owner = :owner
      AND table_name = :table_name
    ORDER BY column_id"""


def _int_or_none(value):
    return int(value) if value is not None else None


@dataclass(frozen=True)
class ColumnDescriptor:
    position: int
    data_type: str
    data_length: Optional[int] = None
    data_precision: Optional[int] = None
    data_scale: Optional[int] = None
    char_used: Optional[str] = None
    type_owner: Optional[str] = None
    type_name: Optional[str] = None
    sql_type_name: Optional[str] = None

    @property
    def is_object(self):
        return self.sql_type_name is not None

    @classmethod
    def from_catalog_row(cls, position, data_type, data_length, data_precision,
                         data_scale, char_used, data_type_owner):
        """
        Build a descriptor from one ``all_tab_columns`` row.

        A column typed by a user-defined object type (``data_type_owner`` set)
        is reported as ``OBJECT``; its length is dropped and the original type
        name is kept in ``type_name`` / ``sql_type_name``.
        """
        if data_type_owner:
            return cls(
                position=_int_or_none(position),
                data_type=OBJECT_TYPE,
                data_precision=_int_or_none(data_precision),
                data_scale=_int_or_none(data_scale),
                char_used=char_used,
                type_owner=data_type_owner,
                type_name=data_type,
                sql_type_name=f"{data_type_owner}.{data_type}",
            )

        return cls(
            position=_int_or_none(position),
            data_type=data_type,
            data_length=_int_or_none(data_length),
            data_precision=_int_or_none(data_precision),
            data_scale=_int_or_none(data_scale),
            char_used=char_used,
        )


class ColumnCatalog:
    """
    Ordered, read-only mapping of lower-cased column name to ColumnDescriptor.
    """

    def __init__(self, columns):
        self._columns = dict(columns)
        self._names = tuple(self._columns)
        self._view = MappingProxyType(self._columns)

    @classmethod
    def load(cls, schema, owner, table_name):
        columns = {}
        for row in schema.select_rows(COLUMNS_SQL, owner, table_name):
            (column_name, position, data_type, data_length, data_precision,
             data_scale, char_used, data_type_owner, _data_type_mod) = row

            columns[column_name.lower()] = ColumnDescriptor.from_catalog_row(
                position, data_type, data_length, data_precision,
                data_scale, char_used, data_type_owner,
            )

        logger.debug(f"Loaded {len(columns)} columns for {owner}.{table_name}")
        return cls(columns)

    @property
    def names(self):
        return self._names

    @property
    def mapping(self):
        return self._view

    def get(self, name, default=None):
        return self._columns.get(name, default)

    def __getitem__(self, name):
        return self._columns[name]

    def __contains__(self, name):
        return name in self._columns

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def items(self):
        return self._view.items()

    def __repr__(self):
        return f"ColumnCatalog({list(self._names)})"
