# readiness.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from prephub.database import get_db
from prephub.schemas.company import CompanyRead, DashboardResponse, ProgressItem
from prephub.services.company_service import list_companies
from prephub.services.profile_service import get_user_skills
from prephub.services.readiness_service import aggregate_across_companies, rank_by_readiness


router = APIRouter(tags=["readiness"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(db: Session = Depends(get_db)) -> DashboardResponse:
    companies = list_companies(db)
    stats = aggregate_across_companies(companies, get_user_skills(db))
    favorites = [CompanyRead.model_validate(c) for c in companies if c.is_favorite]
    return DashboardResponse(stats=stats, favorites=favorites)


@router.get("/progress", response_model=list[ProgressItem])
def progress(db: Session = Depends(get_db)) -> list[ProgressItem]:
    ranked = rank_by_readiness(list_companies(db), get_user_skills(db))
    items: list[ProgressItem] = []
    for entry in ranked:
        gap = entry.gap
        total = len(gap.matched) + len(gap.missing)
        items.append(
            ProgressItem(
                company=CompanyRead.model_validate(entry.company),
                total_skills=total,
                acquired_skills=len(gap.matched),
                remaining_skills=len(gap.missing),
                readiness_percent=gap.readiness_percent,
                matched=gap.matched,
                missing=gap.missing,
            )
        )
    return items
