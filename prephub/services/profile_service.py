# profile_service.py
from sqlalchemy.orm import Session

from prephub.models.user_skills import UserSkillSet


QUICK_TAG_LIMIT = 8


def _get_record(db: Session) -> UserSkillSet | None:
    return db.query(UserSkillSet).order_by(UserSkillSet.id.asc()).first()


def get_user_skills(db: Session) -> list[str]:
    record = _get_record(db)
    if not record or not record.skills:
        return []
    return [str(skill) for skill in record.skills if skill]


def replace_user_skills(db: Session, skills: list[str]) -> list[str]:
    """Full replace; the stored list is exactly `skills`."""
    record = _get_record(db)
    if record:
        record.skills = list(skills)
    else:
        record = UserSkillSet(skills=list(skills))
        db.add(record)
    db.commit()
    db.refresh(record)
    return list(record.skills or [])


def skills_for_resume(skills: list[str]) -> str:
    return ", ".join(skills)


def quick_search_tags(skills: list[str], limit: int = QUICK_TAG_LIMIT) -> list[str]:
    return list(skills[:limit])
