# companies.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from prephub.database import get_db
from prephub.models.company import Company
from prephub.routers.dependencies import get_company_or_404
from prephub.schemas.company import CompanyCreate, CompanyDetail, CompanyRead, NotesUpdate
from prephub.services.company_service import (
    create_company,
    delete_company,
    list_companies,
    toggle_favorite,
    update_notes,
)
from prephub.services.gap_service import compare
from prephub.services.profile_service import get_user_skills


router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("", response_model=list[CompanyRead])
def read_companies(db: Session = Depends(get_db)) -> list[CompanyRead]:
    return [CompanyRead.model_validate(c) for c in list_companies(db)]


@router.post("", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
def add_company(payload: CompanyCreate, db: Session = Depends(get_db)) -> CompanyRead:
    return CompanyRead.model_validate(create_company(db, payload))


@router.get("/{company_id}", response_model=CompanyDetail)
def read_company(company: Company = Depends(get_company_or_404), db: Session = Depends(get_db)) -> CompanyDetail:
    gap = compare(company.required_skills or [], get_user_skills(db))
    return CompanyDetail(company=CompanyRead.model_validate(company), gap=gap)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_company(company: Company = Depends(get_company_or_404), db: Session = Depends(get_db)) -> Response:
    delete_company(db, company)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{company_id}/favorite", response_model=CompanyRead)
def favorite_company(company: Company = Depends(get_company_or_404), db: Session = Depends(get_db)) -> CompanyRead:
    return CompanyRead.model_validate(toggle_favorite(db, company))


@router.put("/{company_id}/notes", response_model=CompanyRead)
def save_notes(
    payload: NotesUpdate,
    company: Company = Depends(get_company_or_404),
    db: Session = Depends(get_db),
) -> CompanyRead:
    return CompanyRead.model_validate(update_notes(db, company, payload.notes))
