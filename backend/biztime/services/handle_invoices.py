"""Invoice Handlers: list, get, create, update, delete over the invoices table.

Invariants:
    - List is ordered by ascending id
    - Create inserts only when the referenced company exists, in one statement;
      zero inserted rows means UnknownCompanyError (a validation failure, not 404)
    - Update writes amt only; paid and paid_date are never modified here
    - Missing id on get/update/delete raises ResourceNotFoundError

Design Decisions:
    - INSERT ... SELECT FROM companies instead of check-then-insert: a company
      deleted concurrently can no longer slip between the check and the write
"""

import logging
from typing import Any

from biztime.core.errors import ResourceNotFoundError, UnknownCompanyError
from biztime.core.repository_protocols import QueryExecutor

logger = logging.getLogger(__name__)

_INVOICE_COLUMNS = "id, comp_code, amt, paid, add_date, paid_date"


async def list_invoices(db: QueryExecutor) -> list[dict[str, Any]]:
    return await db.execute("SELECT id, comp_code FROM invoices ORDER BY id")


async def get_invoice(db: QueryExecutor, invoice_id: int) -> dict[str, Any]:
    """Invoice joined with its company; company fields nested under `company`."""
    rows = await db.execute(
        """SELECT i.id, i.amt, i.paid, i.add_date, i.paid_date,
                  c.code, c.name, c.description
           FROM invoices AS i
           JOIN companies AS c ON i.comp_code = c.code
           WHERE i.id = :id""",
        {"id": invoice_id},
    )
    if not rows:
        raise ResourceNotFoundError("Invoice", str(invoice_id))
    data = rows[0]
    return {
        "id": data["id"],
        "amt": data["amt"],
        "paid": data["paid"],
        "add_date": data["add_date"],
        "paid_date": data["paid_date"],
        "company": {
            "code": data["code"],
            "name": data["name"],
            "description": data["description"],
        },
    }


async def create_invoice(
    db: QueryExecutor, comp_code: str, amt: float,
) -> dict[str, Any]:
    rows = await db.execute(
        f"""INSERT INTO invoices (comp_code, amt)
            SELECT code, CAST(:amt AS FLOAT) FROM companies WHERE code = :comp_code
            RETURNING {_INVOICE_COLUMNS}""",
        {"comp_code": comp_code, "amt": amt},
    )
    if not rows:
        raise UnknownCompanyError(comp_code)
    invoice = rows[0]
    logger.info(
        f"Created invoice {invoice['id']} for {comp_code}",
        extra={"invoice_id": invoice["id"], "company_code": comp_code},
    )
    return invoice


async def update_invoice(
    db: QueryExecutor, invoice_id: int, amt: float,
) -> dict[str, Any]:
    rows = await db.execute(
        f"""UPDATE invoices SET amt = :amt
            WHERE id = :id
            RETURNING {_INVOICE_COLUMNS}""",
        {"id": invoice_id, "amt": amt},
    )
    if not rows:
        raise ResourceNotFoundError("Invoice", str(invoice_id))
    logger.info(f"Updated invoice {invoice_id}", extra={"invoice_id": invoice_id})
    return rows[0]


async def delete_invoice(db: QueryExecutor, invoice_id: int) -> None:
    rows = await db.execute(
        "DELETE FROM invoices WHERE id = :id RETURNING id",
        {"id": invoice_id},
    )
    if not rows:
        raise ResourceNotFoundError("Invoice", str(invoice_id))
    logger.info(f"Deleted invoice {invoice_id}", extra={"invoice_id": invoice_id})
