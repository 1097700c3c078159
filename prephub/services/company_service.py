from __future__ import annotations

from sqlalchemy.orm import Session

from prephub.models.company import Company
from prephub.schemas.company import CompanyCreate


DEFAULT_LOCATION = "Not specified"
JOB_SEARCH_NOTE = "Added from Jobs search. Use JD Analyzer to extract required skills."
JD_ANALYZER_NOTE = "Added from JD Analyzer."


def infer_job_type(role: str) -> str:
    return "Internship" if "intern" in (role or "").lower() else "Full-time"


def list_companies(db: Session) -> list[Company]:
    return db.query(Company).order_by(Company.id.asc()).all()


def get_company(db: Session, company_id: int) -> Company | None:
    return db.query(Company).filter(Company.id == company_id).first()


def create_company(db: Session, payload: CompanyCreate) -> Company:
    company = Company(
        name=payload.name,
        role=payload.role,
        required_skills=list(payload.required_skills),
        location=(payload.location or "").strip() or DEFAULT_LOCATION,
        type=(payload.type or "").strip() or infer_job_type(payload.role),
        is_favorite=False,
        notes=payload.notes or "",
        description=payload.description or "",
        deadline=payload.deadline,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def toggle_favorite(db: Session, company: Company) -> Company:
    company.is_favorite = not bool(company.is_favorite)
    db.commit()
    db.refresh(company)
    return company


def update_notes(db: Session, company: Company, notes: str) -> Company:
    company.notes = notes or ""
    db.commit()
    db.refresh(company)
    return company


def delete_company(db: Session, company: Company) -> None:
    db.delete(company)
    db.commit()
