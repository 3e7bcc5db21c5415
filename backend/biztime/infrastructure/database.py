"""Database Access Object: one parameterized statement per call over a pooled async engine.

Invariants:
    - execute() runs exactly one statement in its own transaction (autocommit unit)
    - No retries: a failed statement is rolled back and reported once
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - SQLite connections enforce foreign keys, so cascade rules match PostgreSQL

Design Decisions:
    - Database instance created in the FastAPI lifespan and stored on app.state;
      handlers receive it through get_db, never through a module global
    - Raw text() statements with named binds: every route maps to one visible SQL statement
    - Connection pool owns acquire/release; pool_pre_ping detects stale connections
"""

import logging
from typing import Any, Mapping

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from biztime.core.errors import DatabaseError
from biztime.db.base import Base
import biztime.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Executes parameterized SQL against the store and returns rows as dicts."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async def execute(
        self, statement: str, parameters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run one statement and return its rows in store order ([] if none)."""
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(statement), dict(parameters or {}))
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]
        except IntegrityError as e:
            logger.error(f"DB integrity error: {e}", extra={"operation": "commit"})
            raise DatabaseError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            logger.error(f"DB operational error: {e}", extra={"operation": "execute"})
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}", extra={"operation": "query"})
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
            raise DatabaseError("Database operation failed", "unknown") from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.execute("SELECT 1")
            return True
        except DatabaseError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def create_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_database(
    database_url: str, pool_size: int = 5, max_overflow: int = 5,
) -> Database:
    """Build a Database with pool settings suited to the backend."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            engine = create_async_engine(database_url, poolclass=StaticPool)
        else:
            engine = create_async_engine(database_url)
    else:
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return Database(engine)


def get_db(request: Request) -> Database:
    """FastAPI dependency: the Database created by the application lifespan."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized")
    return database
