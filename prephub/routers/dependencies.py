# dependencies.py
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from prephub.config import settings
from prephub.database import get_db
from prephub.models.company import Company
from prephub.services.company_service import get_company
from prephub.services.job_search import AdzunaClient, JobSearchConfigError, load_adzuna_config
from prephub.services.skill_extractor import MatchStrategy, parse_strategy
from prephub.services.skill_vocabulary import KNOWN_SKILLS


def get_skill_vocabulary(request: Request) -> tuple[str, ...]:
    # Built once at startup (see main.lifespan).
    return getattr(request.app.state, "skill_vocabulary", None) or KNOWN_SKILLS


def get_match_strategy() -> MatchStrategy:
    try:
        return parse_strategy(settings.skill_match_strategy)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


def get_company_or_404(company_id: int, db: Session = Depends(get_db)) -> Company:
    company = get_company(db, company_id)
    if not company:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")
    return company


def get_job_search_client() -> AdzunaClient:
    try:
        config = load_adzuna_config(settings)
    except JobSearchConfigError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "API keys not configured", "message": str(exc)},
        ) from exc
    return AdzunaClient(config)
