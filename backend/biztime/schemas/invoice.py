"""Invoice Schemas: request bodies and response envelopes for /invoices.

Invariants:
    - InvoiceCreate requires comp_code and a positive, finite amt
    - InvoiceUpdate carries amt only; paid and paid_date have no writable field
    - Dates serialize as ISO YYYY-MM-DD and paid as a boolean regardless of driver
"""

from datetime import date

from pydantic import BaseModel, Field

from biztime.schemas.common import RequiredText
from biztime.schemas.company import CompanyOut


class InvoiceCreate(BaseModel):
    comp_code: RequiredText
    amt: float = Field(gt=0, allow_inf_nan=False)


class InvoiceUpdate(BaseModel):
    amt: float = Field(gt=0, allow_inf_nan=False)


class InvoiceSummary(BaseModel):
    id: int
    comp_code: str


class InvoiceOut(BaseModel):
    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: date | None = None


class InvoiceDetail(BaseModel):
    """Invoice with its owning company nested under `company`."""
    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: date | None = None
    company: CompanyOut


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
