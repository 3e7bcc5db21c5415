"""Companies: CRUD routes for /companies.

Invariants:
    - POST returns 201; every other success returns 200
    - Request bodies validated by Pydantic before a handler runs (missing body/field → 400)
"""

from fastapi import APIRouter, Depends, status

from biztime.infrastructure.database import Database, get_db
from biztime.schemas.common import DeletedResponse
from biztime.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from biztime.services import handle_companies

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=CompanyListResponse)
async def list_companies(db: Database = Depends(get_db)):
    """All companies as {code, name}, in store order."""
    return {"companies": await handle_companies.list_companies(db)}


@router.get("/{code}", response_model=CompanyDetailResponse)
async def get_company(code: str, db: Database = Depends(get_db)):
    return {"company": await handle_companies.get_company(db, code)}


@router.post(
    "", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED,
)
async def create_company(body: CompanyCreate, db: Database = Depends(get_db)):
    company = await handle_companies.create_company(
        db, body.code, body.name, body.description,
    )
    return {"company": company}


@router.put("/{code}", response_model=CompanyResponse)
async def update_company(
    code: str, body: CompanyUpdate, db: Database = Depends(get_db),
):
    """Replace name and description. The code in the path never changes."""
    company = await handle_companies.update_company(
        db, code, body.name, body.description,
    )
    return {"company": company}


@router.delete("/{code}", response_model=DeletedResponse)
async def delete_company(code: str, db: Database = Depends(get_db)):
    await handle_companies.delete_company(db, code)
    return DeletedResponse()
