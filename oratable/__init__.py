from .base.schema import Schema
from .base.table import Table
from .base.columns import ColumnCatalog, ColumnDescriptor
from .base.statement import StatementBuilder, LiteralFragment, EqualityMap
from .base.binder import MutationArgumentBinder
from .base.procedure import TableProcedure
from .base.call import Invocable, ProcedureCall

__all__ = [
    "Schema",
    "Table",
    "ColumnCatalog",
    "ColumnDescriptor",
    "StatementBuilder",
    "LiteralFragment",
    "EqualityMap",
    "MutationArgumentBinder",
    "TableProcedure",
    "Invocable",
    "ProcedureCall",
]

__version__ = '0.1.0'
