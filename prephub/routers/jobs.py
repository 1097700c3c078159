# jobs.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from prephub.config import settings
from prephub.database import get_db
from prephub.routers.dependencies import get_job_search_client
from prephub.schemas.company import CompanyCreate, CompanyRead
from prephub.schemas.jobs import JobSearchResponse, QuickTagsResponse, TrackJobRequest
from prephub.services.company_service import JOB_SEARCH_NOTE, create_company
from prephub.services.job_search import AdzunaClient, JobSearchError, JobSearchUpstreamError
from prephub.services.profile_service import get_user_skills, quick_search_tags


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobSearchResponse)
def search_jobs(
    keyword: str | None = Query(default=None),
    location: str = Query(default=""),
    country: str | None = Query(default=None, pattern=r"^[a-zA-Z]{2}$"),
    page: int = Query(default=1, ge=1),
    client: AdzunaClient = Depends(get_job_search_client),
) -> JobSearchResponse:
    what = (keyword or "").strip() or settings.default_job_keyword
    where = (location or "").strip()
    country_code = (country or settings.default_job_country).lower()

    try:
        data = client.search(what, where, country_code, page)
    except JobSearchUpstreamError as exc:
        raise HTTPException(
            status_code=exc.status_code,
            detail={"error": str(exc), "message": exc.body},
        ) from exc
    except JobSearchError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to fetch jobs", "message": str(exc)},
        ) from exc

    return JobSearchResponse(count=data["count"], results=data["results"])


@router.get("/quick-tags", response_model=QuickTagsResponse)
def quick_tags(db: Session = Depends(get_db)) -> QuickTagsResponse:
    return QuickTagsResponse(tags=quick_search_tags(get_user_skills(db)))


@router.post("/track", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
def track_job(payload: TrackJobRequest, db: Session = Depends(get_db)) -> CompanyRead:
    # Skills are filled in later through the JD analyzer.
    company = create_company(
        db,
        CompanyCreate(
            name=payload.company,
            role=payload.role,
            required_skills=[],
            location=payload.location,
            notes=JOB_SEARCH_NOTE,
            description=payload.description or "",
        ),
    )
    logger.info("jobs.track company_id=%s name=%s", company.id, company.name)
    return CompanyRead.model_validate(company)
