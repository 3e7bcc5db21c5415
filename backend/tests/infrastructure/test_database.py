"""Database Access Object: one statement per call, rows as dicts, errors mapped.

Invariants:
    - execute() returns [] for statements without result rows
    - Store failures surface as DatabaseError and leave no partial write
    - Foreign keys are enforced on SQLite connections
"""

import pytest

from biztime.core.errors import DatabaseError
from biztime.infrastructure.database import create_database


@pytest.fixture
async def db():
    database = create_database("sqlite+aiosqlite:///:memory:")
    await database.create_schema()
    yield database
    await database.dispose()


async def test_execute_returns_rows_as_dicts(db):
    await db.execute(
        "INSERT INTO companies (code, name, description) VALUES (:c, :n, :d)",
        {"c": "mac", "n": "APPLE", "d": "apple company"},
    )
    rows = await db.execute("SELECT code, name FROM companies")
    assert rows == [{"code": "mac", "name": "APPLE"}]


async def test_execute_without_result_rows_returns_empty_list(db):
    rows = await db.execute("DELETE FROM companies")
    assert rows == []


async def test_integrity_error_becomes_database_error(db):
    params = {"c": "mac", "n": "APPLE", "d": "apple company"}
    insert = "INSERT INTO companies (code, name, description) VALUES (:c, :n, :d)"
    await db.execute(insert, params)

    with pytest.raises(DatabaseError) as exc_info:
        await db.execute(insert, params)

    assert exc_info.value.operation == "commit"
    assert len(await db.execute("SELECT code FROM companies")) == 1


async def test_foreign_keys_enforced(db):
    with pytest.raises(DatabaseError):
        await db.execute(
            "INSERT INTO invoices (comp_code, amt) VALUES (:c, :a)",
            {"c": "ghost", "a": 10},
        )


async def test_malformed_statement_becomes_database_error(db):
    with pytest.raises(DatabaseError):
        await db.execute("SELECT nope FROM nowhere")


async def test_create_schema_is_idempotent(db):
    await db.create_schema()
    assert await db.execute("SELECT code FROM companies") == []


async def test_health_check(db):
    assert await db.health_check() is True
