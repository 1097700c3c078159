# user_skills.py
from sqlalchemy import Column, DateTime, Integer, JSON, func

from prephub.database import Base


class UserSkillSet(Base):
    """Skills the user claims to have. The app keeps a single row."""

    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True, index=True)
    skills = Column(JSON, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
