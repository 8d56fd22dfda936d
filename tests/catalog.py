from sqlalchemy import MetaData, Table, Column, Integer, String, insert

metadata = MetaData()

all_tables = Table(
    "all_tables", metadata,
    Column("owner", String),
    Column("table_name", String),
)

all_synonyms = Table(
    "all_synonyms", metadata,
    Column("owner", String),
    Column("synonym_name", String),
    Column("table_owner", String),
    Column("table_name", String),
)

all_tab_columns = Table(
    "all_tab_columns", metadata,
    Column("owner", String),
    Column("table_name", String),
    Column("column_name", String),
    Column("column_id", Integer),
    Column("data_type", String),
    Column("data_length", Integer),
    Column("data_precision", Integer),
    Column("data_scale", Integer),
    Column("char_used", String),
    Column("data_type_owner", String),
    Column("data_type_mod", String),
)

# Physical tables, living in the attached "HR" database
emp = Table(
    "EMP", metadata,
    Column("id", Integer),
    Column("name", String(50)),
    Column("salary", Integer),
    Column("address", String),
    schema="HR",
)

emp_archive = Table(
    "EMP_ARCHIVE", metadata,
    Column("id", Integer),
    Column("name", String(50)),
    schema="HR",
)


def _column(table_name, column_name, column_id, data_type, data_length=None,
            data_precision=None, data_scale=None, char_used=None, data_type_owner=None):
    return dict(
        owner="HR", table_name=table_name, column_name=column_name, column_id=column_id,
        data_type=data_type, data_length=data_length, data_precision=data_precision,
        data_scale=data_scale, char_used=char_used, data_type_owner=data_type_owner,
        data_type_mod=None,
    )


# Deliberately not in column_id order
TAB_COLUMNS = [
    _column("EMP", "SALARY", 3, "NUMBER", 22, 8, 2),
    _column("EMP", "ID", 1, "NUMBER", 22, 10, 0),
    _column("EMP", "ADDRESS", 4, "T_ADDRESS", 1, data_type_owner="HR"),
    _column("EMP", "NAME", 2, "VARCHAR2", 50, char_used="B"),
    _column("EMP_ARCHIVE", "NAME", 2, "VARCHAR2", 50, char_used="B"),
    _column("EMP_ARCHIVE", "ID", 1, "NUMBER", 22, 10, 0),
]

TABLES = [
    dict(owner="HR", table_name="EMP"),
    dict(owner="HR", table_name="EMP_ARCHIVE"),
]

SYNONYMS = [
    # APP sees EMPLOYEES as HR.EMP, everybody else gets the archive
    dict(owner="APP", synonym_name="EMPLOYEES", table_owner="HR", table_name="EMP"),
    dict(owner="PUBLIC", synonym_name="EMPLOYEES", table_owner="HR", table_name="EMP_ARCHIVE"),
    dict(owner="PUBLIC", synonym_name="STAFF", table_owner="HR", table_name="EMP"),
    dict(owner="PUBLIC", synonym_name="GHOST", table_owner="HR", table_name="DROPPED"),
]


def seed(conn):
    metadata.create_all(conn)
    conn.execute(insert(all_tables), TABLES)
    conn.execute(insert(all_synonyms), SYNONYMS)
    conn.execute(insert(all_tab_columns), TAB_COLUMNS)
