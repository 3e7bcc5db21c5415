"""Company Schemas: request bodies and response envelopes for /companies.

Invariants:
    - CompanyCreate requires code, name, description (stripped, non-empty)
    - CompanyUpdate requires name and description; code comes only from the path
"""

from pydantic import BaseModel

from biztime.schemas.common import RequiredText


class CompanyCreate(BaseModel):
    code: RequiredText
    name: RequiredText
    description: RequiredText


class CompanyUpdate(BaseModel):
    name: RequiredText
    description: RequiredText


class CompanySummary(BaseModel):
    code: str
    name: str


class CompanyOut(BaseModel):
    code: str
    name: str
    description: str


class CompanyDetail(CompanyOut):
    """Company with the ids of its invoices, ascending."""
    invoices: list[int] = []


class CompanyListResponse(BaseModel):
    companies: list[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail
