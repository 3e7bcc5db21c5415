"""Invoices: CRUD routes for /invoices.

Invariants:
    - Every success returns 200, including POST
    - Unknown comp_code on POST is a 400; a missing id anywhere is a 404
    - Ids outside 1..2147483647 (the INTEGER column range) or non-integer fail path validation (400)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from biztime.infrastructure.database import Database, get_db
from biztime.schemas.common import DeletedResponse
from biztime.schemas.invoice import (
    InvoiceCreate,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from biztime.services import handle_invoices

router = APIRouter(prefix="/invoices", tags=["invoices"])

InvoiceId = Annotated[int, Path(ge=1, le=2_147_483_647)]


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(db: Database = Depends(get_db)):
    """All invoices as {id, comp_code}, ascending id."""
    return {"invoices": await handle_invoices.list_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
async def get_invoice(invoice_id: InvoiceId, db: Database = Depends(get_db)):
    return {"invoice": await handle_invoices.get_invoice(db, invoice_id)}


@router.post("", response_model=InvoiceResponse)
async def create_invoice(body: InvoiceCreate, db: Database = Depends(get_db)):
    invoice = await handle_invoices.create_invoice(db, body.comp_code, body.amt)
    return {"invoice": invoice}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: InvoiceId, body: InvoiceUpdate, db: Database = Depends(get_db),
):
    invoice = await handle_invoices.update_invoice(db, invoice_id, body.amt)
    return {"invoice": invoice}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
async def delete_invoice(invoice_id: InvoiceId, db: Database = Depends(get_db)):
    await handle_invoices.delete_invoice(db, invoice_id)
    return DeletedResponse()
