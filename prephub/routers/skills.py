# skills.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from prephub.database import get_db
from prephub.schemas.analysis import AggregateStats
from prephub.schemas.skills import ResumeSkillsResponse, UserSkillsResponse, UserSkillsUpdate
from prephub.services.company_service import list_companies
from prephub.services.profile_service import get_user_skills, replace_user_skills, skills_for_resume
from prephub.services.readiness_service import aggregate_across_companies


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=UserSkillsResponse)
def read_skills(db: Session = Depends(get_db)) -> UserSkillsResponse:
    skills = get_user_skills(db)
    return UserSkillsResponse(skills=skills, count=len(skills))


@router.put("", response_model=UserSkillsResponse)
def update_skills(payload: UserSkillsUpdate, db: Session = Depends(get_db)) -> UserSkillsResponse:
    skills = replace_user_skills(db, payload.skills)
    return UserSkillsResponse(skills=skills, count=len(skills))


@router.get("/gap", response_model=AggregateStats)
def skill_gap(db: Session = Depends(get_db)) -> AggregateStats:
    return aggregate_across_companies(list_companies(db), get_user_skills(db))


@router.get("/resume", response_model=ResumeSkillsResponse)
def resume_skills(db: Session = Depends(get_db)) -> ResumeSkillsResponse:
    skills = get_user_skills(db)
    if not skills:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No skills in your profile yet. Add them in Skill Gap first.",
        )
    return ResumeSkillsResponse(skills_text=skills_for_resume(skills), count=len(skills))
