"""API test fixtures: in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - get_db dependency overridden to hand routes the test Database
    - The application lifespan never runs, so no real server database is touched

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Foreign keys enabled on the test engine, so ON DELETE CASCADE behaves as in PostgreSQL
"""

import pytest
from httpx import ASGITransport, AsyncClient

from biztime.infrastructure.database import create_database, get_db
from biztime.main import app


@pytest.fixture
async def test_db():
    database = create_database("sqlite+aiosqlite:///:memory:")
    await database.create_schema()
    yield database
    await database.dispose()


@pytest.fixture
async def client(test_db):
    """FastAPI test client with DB dependency overridden."""
    app.dependency_overrides[get_db] = lambda: test_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_company(test_db):
    """The one company every company/invoice test starts from."""
    await test_db.execute(
        "INSERT INTO companies (code, name, description) "
        "VALUES (:code, :name, :description)",
        {"code": "mac", "name": "APPLE", "description": "apple company"},
    )
    return {"code": "mac", "name": "APPLE", "description": "apple company"}


@pytest.fixture
async def seed_invoice(test_db, seed_company):
    rows = await test_db.execute(
        "INSERT INTO invoices (comp_code, amt) VALUES (:comp_code, :amt) "
        "RETURNING id",
        {"comp_code": seed_company["code"], "amt": 100},
    )
    return rows[0]["id"]


@pytest.fixture
def count_rows(test_db):
    """Row count of a table, for asserting the store was (not) changed."""
    async def _count(table: str) -> int:
        rows = await test_db.execute(f"SELECT COUNT(*) AS n FROM {table}")
        return rows[0]["n"]
    return _count
