import pytest

from sqlalchemy import create_engine, event

from oratable import Schema, Table
from oratable.base.columns import ColumnDescriptor

from catalog import seed


@pytest.fixture
def Connection():
    engine = create_engine("sqlite://")

    @event.listens_for(engine, "connect")
    def attach_owner_schema(dbapi_connection, _):
        dbapi_connection.execute("ATTACH DATABASE ':memory:' AS \"HR\"")

    with engine.connect() as conn:
        seed(conn)
        yield conn

    engine.dispose()


@pytest.fixture
def HRSchema(Connection):
    return Schema(Connection, "hr")


@pytest.fixture
def AppSchema(Connection):
    return Schema(Connection, "APP")


@pytest.fixture
def EmpTable(HRSchema):
    return Table.find(HRSchema, "emp")


class StubSchema:
    """Schema that must never be asked to run anything."""
    schema_name = "HR"

    def __getattr__(self, name):
        raise AssertionError(f"Unexpected I/O call: {name}")


@pytest.fixture
def OfflineTable():
    columns = {
        "id": ColumnDescriptor(position=1, data_type="NUMBER", data_length=22, data_precision=10, data_scale=0),
        "name": ColumnDescriptor(position=2, data_type="VARCHAR2", data_length=50, char_used="B"),
    }
    return Table(StubSchema(), "emp", schema_name="HR", columns=columns)
