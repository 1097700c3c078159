# analyzer.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from prephub.database import get_db
from prephub.routers.dependencies import get_match_strategy, get_skill_vocabulary
from prephub.schemas.analysis import JDAnalyzeRequest, JDCommitRequest, JDScore
from prephub.schemas.company import CompanyCreate, CompanyRead, JDCommitResponse
from prephub.services.company_service import DEFAULT_LOCATION, JD_ANALYZER_NOTE, create_company
from prephub.services.match_score_service import score_jd
from prephub.services.profile_service import get_user_skills
from prephub.services.skill_extractor import MatchStrategy


router = APIRouter(prefix="/analyzer", tags=["analyzer"])


@router.post("/jd", response_model=JDScore)
def analyze_jd(
    payload: JDAnalyzeRequest,
    db: Session = Depends(get_db),
    vocabulary: tuple[str, ...] = Depends(get_skill_vocabulary),
    strategy: MatchStrategy = Depends(get_match_strategy),
) -> JDScore:
    return score_jd(payload.text, get_user_skills(db), vocabulary=vocabulary, strategy=strategy)


@router.post("/jd/commit", response_model=JDCommitResponse, status_code=status.HTTP_201_CREATED)
def commit_jd(
    payload: JDCommitRequest,
    db: Session = Depends(get_db),
    vocabulary: tuple[str, ...] = Depends(get_skill_vocabulary),
    strategy: MatchStrategy = Depends(get_match_strategy),
) -> JDCommitResponse:
    analysis = score_jd(payload.text, get_user_skills(db), vocabulary=vocabulary, strategy=strategy)
    if not analysis.extracted:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No skills detected to add")

    company = create_company(
        db,
        CompanyCreate(
            name=(payload.company_name or "").strip() or "Unknown Company",
            role=(payload.role_name or "").strip() or "Unknown Role",
            required_skills=analysis.extracted,
            location=DEFAULT_LOCATION,
            notes=JD_ANALYZER_NOTE,
            description=payload.text.strip(),
        ),
    )
    return JDCommitResponse(company=CompanyRead.model_validate(company), analysis=analysis)
