from .schema import Schema
from .table import Table

__all__ = [
    "Schema",
    "Table",
]
