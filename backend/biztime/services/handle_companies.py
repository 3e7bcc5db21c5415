"""Company Handlers: list, get, create, update, delete over the companies table.

Invariants:
    - code is immutable: UPDATE never touches it
    - Missing code on get/update/delete raises ResourceNotFoundError
    - Duplicate code on create surfaces as the store's DatabaseError (not special-cased)
"""

import logging
from typing import Any

from biztime.core.errors import ResourceNotFoundError
from biztime.core.repository_protocols import QueryExecutor

logger = logging.getLogger(__name__)


async def list_companies(db: QueryExecutor) -> list[dict[str, Any]]:
    return await db.execute("SELECT code, name FROM companies")


async def get_company(db: QueryExecutor, code: str) -> dict[str, Any]:
    """Company by exact code, with the ids of its invoices."""
    rows = await db.execute(
        "SELECT code, name, description FROM companies WHERE code = :code",
        {"code": code},
    )
    if not rows:
        raise ResourceNotFoundError("Company", code)
    company = rows[0]
    invoices = await db.execute(
        "SELECT id FROM invoices WHERE comp_code = :code ORDER BY id",
        {"code": code},
    )
    company["invoices"] = [inv["id"] for inv in invoices]
    return company


async def create_company(
    db: QueryExecutor, code: str, name: str, description: str,
) -> dict[str, Any]:
    rows = await db.execute(
        """INSERT INTO companies (code, name, description)
           VALUES (:code, :name, :description)
           RETURNING code, name, description""",
        {"code": code, "name": name, "description": description},
    )
    logger.info(f"Created company {code}", extra={"company_code": code})
    return rows[0]


async def update_company(
    db: QueryExecutor, code: str, name: str, description: str,
) -> dict[str, Any]:
    rows = await db.execute(
        """UPDATE companies
           SET name = :name, description = :description
           WHERE code = :code
           RETURNING code, name, description""",
        {"code": code, "name": name, "description": description},
    )
    if not rows:
        raise ResourceNotFoundError("Company", code)
    logger.info(f"Updated company {code}", extra={"company_code": code})
    return rows[0]


async def delete_company(db: QueryExecutor, code: str) -> None:
    """Delete by code. The store cascades the company's invoices."""
    rows = await db.execute(
        "DELETE FROM companies WHERE code = :code RETURNING code",
        {"code": code},
    )
    if not rows:
        raise ResourceNotFoundError("Company", code)
    logger.info(f"Deleted company {code}", extra={"company_code": code})
