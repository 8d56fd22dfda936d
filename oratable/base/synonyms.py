from typing import NamedTuple, Optional

from ..logger import logger

TABLE_EXISTS_SQL = """
    SELECT table_name FROM all_tables
    WHERE owner = :owner
      AND table_name = :table_name"""

# Private synonyms sort before PUBLIC ones
SYNONYM_SQL = """
    SELECT t.owner, t.table_name
    FROM all_synonyms s, all_tables t
    WHERE s.owner IN (:owner, 'PUBLIC')
      AND s.synonym_name = :synonym_name
      AND t.owner = s.table_owner
      AND t.table_name = s.table_name
    ORDER BY CASE WHEN s.owner = 'PUBLIC' THEN 1 ELSE 0 END"""


class ResolvedTable(NamedTuple):
    owner: str
    table_name: str


class SynonymResolver:
    def __init__(self, schema):
        self.schema = schema

    def resolve(self, name) -> Optional[ResolvedTable]:
        """
        Find the physical table behind ``name``.

        A table owned by the schema wins; otherwise the first synonym visible
        to the schema (or PUBLIC) that points to an existing table is used.
        Returns ``None`` when nothing matches.
        """
        owner = self.schema.schema_name
        table_name = str(name).upper()

        if self.schema.select_first(TABLE_EXISTS_SQL, owner, table_name):
            return ResolvedTable(owner, table_name)

        row = self.schema.select_first(SYNONYM_SQL, owner, table_name)
        if row:
            resolved = ResolvedTable(row["owner"], row["table_name"])
            logger.debug(f"Synonym {table_name} resolved to {resolved.owner}.{resolved.table_name}")
            return resolved

        logger.debug(f"No table or synonym named {table_name} for owner {owner}")
        return None
