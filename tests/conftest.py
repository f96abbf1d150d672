"""
Pytest configuration for registrar tests.

Every test gets a fresh in-memory SQLite database holding the full schema,
reached through one connection wrapped in a QueryExecutor, the same way the
API wires a request.
"""
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine

from registrar.core.executor import QueryExecutor
from registrar.models import Base
from registrar.services.administrator import Administrator


@pytest.fixture
def anyio_backend():
    return "asyncio"


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def connection():
    engine = create_async_engine("sqlite+aiosqlite://")
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.connect() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.commit()
        yield conn
    await engine.dispose()


@pytest.fixture
def executor(connection):
    return QueryExecutor(connection)


@pytest.fixture
def admin(executor):
    return Administrator(executor)


@pytest.fixture
async def catalog(admin):
    """Semesters (Spring 2021 current, Fall 2021 next), a department, a course and an instructor."""
    for name in ("Winter", "Spring", "Summer", "Fall"):
        assert (await admin.create_semester(name)).success
    assert (await admin.assign_current_semester("Spring", 2021)).success
    assert (await admin.assign_next_semester("Fall", 2021)).success
    assert (await admin.create_department(1, "Computer Science")).success
    assert (await admin.create_course(1, "Database Systems", 1, 3, 1000.00)).success
    assert (await admin.create_instructor(1, "John Connor", "john.anthony.connor@gmail.com")).success
    assert (await admin.create_instructor(2, "Hesham Auda", "hauda@ccny.cuny.edu")).success
    return admin
