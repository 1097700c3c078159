# company.py
from sqlalchemy import Boolean, Column, Date, DateTime, Integer, JSON, String, Text
from sqlalchemy.sql import func

from prephub.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(255), nullable=False)
    # Ordered as entered; may hold duplicates or names outside the vocabulary.
    required_skills = Column(JSON, nullable=False, default=list)
    location = Column(String(255), nullable=False, default="Not specified")
    type = Column(String(64), nullable=False, default="Full-time")
    is_favorite = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    deadline = Column(Date, nullable=True)
    added_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
